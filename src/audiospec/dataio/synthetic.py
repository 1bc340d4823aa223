"""Deterministic test signal used to exercise the analyzer without a file."""

from __future__ import annotations

import numpy as np

from ..core.models import AudioData

DEFAULT_LENGTH = 4096
DEFAULT_F0_HZ = 10.0
DEFAULT_SAMPLE_RATE_HZ = 1000.0


def phase(t: np.ndarray, f0_hz: float) -> np.ndarray:
    """Instantaneous phase ``2*pi*f0*t``."""
    return 2.0 * np.pi * f0_hz * t


def waveform(x: np.ndarray) -> np.ndarray:
    """``sin(cos(x + x**2) + x*sin(x)) - cos(x)**2``, a broadband chirp-like tone."""
    return np.sin(np.cos(x + x * x) + x * np.sin(x)) - np.cos(x) * np.cos(x)


def synthetic_signal(
    n: int = DEFAULT_LENGTH,
    f0_hz: float = DEFAULT_F0_HZ,
    sample_rate_hz: float = DEFAULT_SAMPLE_RATE_HZ,
) -> AudioData:
    """
    Sample :func:`waveform` at ``sample_rate_hz`` for ``n`` points.

    The result is a mono :class:`AudioData`, so it flows through the same
    analyzer as decoded files.
    """
    if n <= 0:
        raise ValueError(f"n must be > 0, got {n}")
    if sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {sample_rate_hz}")

    t = np.arange(n, dtype=float) / float(sample_rate_hz)
    samples = waveform(phase(t, float(f0_hz))).astype(np.float32)
    return AudioData(
        samples=samples,
        sample_rate=sample_rate_hz,
        channels=1,
        source=f"synthetic f0={f0_hz:g} Hz",
        full_scale=False,
    )
