"""Signal analysis utilities (FFT, spectrum derivation, scalar features).

This package gathers pure helpers that operate on NumPy arrays of audio
samples. Modules such as :mod:`fft`, :mod:`spectrum` and :mod:`features`
stay free of Matplotlib and file I/O so they can be reused in command-line
scripts, automated tests, or other front ends alike.
"""
