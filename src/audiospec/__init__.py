"""Decode audio, run a radix-2 FFT, and plot time and frequency views."""

__version__ = "0.1.0"
