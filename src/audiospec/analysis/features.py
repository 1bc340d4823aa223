"""Scalar summaries of time-domain and transformed signals."""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import ArrayLike


Number = Union[float, np.floating]


def _to_1d_array(signal: ArrayLike, dtype: type = float) -> np.ndarray:
    """Convert input to a non-empty 1-D numpy array."""
    arr = np.asarray(signal, dtype=dtype)
    if arr.size == 0:
        raise ValueError("signal must contain at least one sample")
    if arr.ndim != 1:
        raise ValueError(f"signal must be 1-D, got shape {arr.shape}")
    return arr


def rms(signal: ArrayLike) -> Number:
    """
    Compute root-mean-square (RMS) value of a 1-D signal.

    Parameters
    ----------
    signal:
        1-D array-like of samples.

    Returns
    -------
    float
        RMS value of the signal.
    """
    arr = _to_1d_array(signal)
    return float(np.sqrt(np.mean(np.square(arr))))


def peak_amplitude(signal: ArrayLike) -> Number:
    """Largest absolute sample value (1.0 means full scale for decoded audio)."""
    arr = _to_1d_array(signal)
    return float(np.max(np.abs(arr)))


def signal_energy(signal: ArrayLike) -> Number:
    """Sum of squared magnitudes, ``sum(|x[i]|**2)``."""
    arr = _to_1d_array(signal, dtype=complex)
    return float(np.sum(np.abs(arr) ** 2))


def spectral_energy(transformed: ArrayLike) -> Number:
    """
    Energy of a forward transform scaled back to the time domain.

    By Parseval's theorem this equals :func:`signal_energy` of the input
    that produced ``transformed``.
    """
    arr = _to_1d_array(transformed, dtype=complex)
    return float(np.sum(np.abs(arr) ** 2) / arr.shape[0])
