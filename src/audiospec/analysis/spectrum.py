"""One-sided magnitude spectrum and time-axis helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..errors import InvalidLengthError
from .fft import is_power_of_two, next_power_of_two

LENGTH_POLICIES = ("strict", "pad", "truncate")


@dataclass(frozen=True, eq=False)
class Spectrum:
    """Non-negative-frequency half of a forward transform."""

    frequency: np.ndarray
    magnitude: np.ndarray

    def __post_init__(self) -> None:
        if self.frequency.shape != self.magnitude.shape:
            raise ValueError(
                "frequency and magnitude must have the same shape, got "
                f"{self.frequency.shape} and {self.magnitude.shape}"
            )
        self.frequency.setflags(write=False)
        self.magnitude.setflags(write=False)

    def __len__(self) -> int:
        return int(self.frequency.shape[0])

    @property
    def resolution_hz(self) -> float:
        """Spacing between adjacent bins (0.0 for a single-bin spectrum)."""
        if len(self) < 2:
            return 0.0
        return float(self.frequency[1] - self.frequency[0])

    def peak(self, *, skip_dc: bool = False) -> Tuple[float, float]:
        """Return ``(frequency, magnitude)`` of the largest bin, optionally ignoring DC."""
        if skip_dc and len(self) > 1:
            k = 1 + int(np.argmax(self.magnitude[1:]))
        else:
            k = int(np.argmax(self.magnitude))
        return float(self.frequency[k]), float(self.magnitude[k])


def derive_spectrum(
    transformed: ArrayLike,
    sample_rate_hz: float,
    *,
    double_edges: bool = True,
) -> Spectrum:
    """
    Build the one-sided spectrum of a forward-transformed real signal.

    ``frequency[k] = k * R / N`` and ``magnitude[k] = 2 * |X[k]| / N`` for
    ``k`` in ``0..N//2``. The factor 2 folds the discarded negative half
    back in. With ``double_edges=False`` the DC bin and, for even ``N``, the
    Nyquist bin keep a factor of 1 since they have no mirror image.
    """
    if sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {sample_rate_hz}")

    values = np.asarray(transformed)
    if values.ndim != 1:
        raise ValueError(f"transformed signal must be 1-D, got shape {values.shape}")
    n = values.shape[0]
    if n == 0:
        raise InvalidLengthError(n)

    n_half = n // 2 + 1
    frequency = np.arange(n_half, dtype=float) * float(sample_rate_hz) / n
    magnitude = 2.0 * np.abs(values[:n_half]) / n

    if not double_edges:
        magnitude[0] /= 2.0
        if n % 2 == 0 and n >= 2:
            magnitude[n // 2] /= 2.0

    return Spectrum(frequency=frequency, magnitude=magnitude)


def time_axis(n: int, sample_rate_hz: float) -> np.ndarray:
    """Elapsed seconds for each of ``n`` samples, ``time[i] = i / R``."""
    if sample_rate_hz <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {sample_rate_hz}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return np.arange(n, dtype=float) / float(sample_rate_hz)


def prepare_signal(samples: ArrayLike, policy: str = "strict") -> np.ndarray:
    """
    Copy real ``samples`` into a complex128 buffer ready for :func:`transform`.

    Parameters
    ----------
    samples:
        1-D array-like of real samples.
    policy:
        ``"strict"`` rejects non-power-of-two lengths, ``"pad"`` appends
        zeros up to the next power of two, ``"truncate"`` keeps the longest
        power-of-two prefix.
    """
    if policy not in LENGTH_POLICIES:
        raise ValueError(f"policy must be one of {LENGTH_POLICIES}, got {policy!r}")

    arr = np.asarray(samples, dtype=float).reshape(-1)
    n = arr.shape[0]
    if n == 0:
        raise InvalidLengthError(n)

    if is_power_of_two(n):
        target = n
    elif policy == "pad":
        target = next_power_of_two(n)
    elif policy == "truncate":
        target = next_power_of_two(n) // 2
    else:
        raise InvalidLengthError(n)

    buffer = np.zeros(target, dtype=np.complex128)
    keep = min(n, target)
    buffer[:keep] = arr[:keep]
    return buffer


__all__ = [
    "LENGTH_POLICIES",
    "Spectrum",
    "derive_spectrum",
    "time_axis",
    "prepare_signal",
]
