"""Radix-2 FFT helpers."""

from __future__ import annotations

from typing import MutableSequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from ..errors import InvalidLengthError

Signal = Union[np.ndarray, MutableSequence[complex]]


def is_power_of_two(n: int) -> bool:
    """Return True for 1, 2, 4, 8, ..."""
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two that is >= ``n`` (1 for ``n <= 1``)."""
    if n <= 1:
        return 1
    return 1 << (int(n) - 1).bit_length()


def bit_reversal_permutation(n: int) -> np.ndarray:
    """
    Return the index order produced by repeatedly splitting into even/odd halves.

    ``n`` must be a power of two. Element ``i`` of the result is ``i`` with
    its ``log2(n)`` low bits reversed.
    """
    if not is_power_of_two(n):
        raise InvalidLengthError(n)
    bits = n.bit_length() - 1
    idx = np.arange(n, dtype=np.intp)
    rev = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        rev = (rev << 1) | (idx & 1)
        idx >>= 1
    return rev


def _butterflies(work: np.ndarray, inverse: bool) -> None:
    """Run the bottom-up combine passes over a bit-reversed buffer."""
    n = work.shape[0]
    sign = 1.0 if inverse else -1.0
    size = 2
    while size <= n:
        half = size // 2
        twiddles = np.exp(sign * 2j * np.pi * np.arange(half) / size)
        blocks = work.reshape(-1, size)
        even = blocks[:, :half].copy()
        odd = blocks[:, half:] * twiddles
        blocks[:, :half] = even + odd
        blocks[:, half:] = even - odd
        if inverse:
            # halving at every stage gives the overall 1/N
            blocks /= 2.0
        size *= 2


def transform(signal: Signal, inverse: bool = False) -> None:
    """
    Compute the discrete Fourier transform of ``signal`` in place.

    Parameters
    ----------
    signal:
        Writable 1-D complex NumPy array (or a mutable sequence of complex
        numbers). Its length must be a power of two, 1 included.
    inverse:
        Run the inverse transform (positive rotation, scaled by 1/N).

    Raises
    ------
    InvalidLengthError
        If the length is not a power of two (an empty signal included).
    TypeError
        If ``signal`` cannot be updated in place as complex values.
    """
    if isinstance(signal, np.ndarray):
        if signal.ndim != 1:
            raise TypeError(f"signal must be 1-D, got shape {signal.shape}")
        if not np.iscomplexobj(signal):
            raise TypeError(f"signal must have a complex dtype, got {signal.dtype}")
        if not signal.flags.writeable:
            raise TypeError("signal must be writeable")

    n = len(signal)
    if not is_power_of_two(n):
        raise InvalidLengthError(n)
    if n == 1:
        return

    work = np.asarray(signal, dtype=np.complex128)[bit_reversal_permutation(n)]
    _butterflies(work, inverse)

    if isinstance(signal, np.ndarray):
        signal[:] = work
    else:
        signal[:] = work.tolist()


def compute_fft(
    signal: ArrayLike,
    sample_rate_hz: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute frequency bins and magnitudes for a real-valued signal.

    Parameters
    ----------
    signal:
        1-D array-like input signal with a power-of-two length.
    sample_rate_hz:
        Sampling rate in Hz. Must be > 0.

    Returns
    -------
    freqs : np.ndarray
        Frequency bins in Hz for the non-negative half (``N//2 + 1`` values).
    magnitude : np.ndarray
        Unscaled magnitude ``|X[k]|`` of the one-sided FFT.
    """
    if sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {sample_rate_hz}")

    arr = np.asarray(signal, dtype=float)
    if arr.size == 0:
        raise ValueError("signal must contain at least one sample")
    if arr.ndim != 1:
        raise ValueError(f"signal must be 1-D, got shape {arr.shape}")

    buffer = arr.astype(np.complex128)
    transform(buffer)
    n_samples = arr.shape[0]
    n_half = n_samples // 2 + 1
    freqs = np.arange(n_half, dtype=float) * float(sample_rate_hz) / n_samples
    magnitude = np.abs(buffer[:n_half])

    return freqs, magnitude


__all__ = [
    "Signal",
    "is_power_of_two",
    "next_power_of_two",
    "bit_reversal_permutation",
    "transform",
    "compute_fft",
]
