"""Shared dataclasses handed between sample sources, analyzer and plotter."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..analysis.spectrum import Spectrum


@dataclass
class AudioData:
    """
    Flat, channel-interleaved float32 samples plus their sample rate.

    ``full_scale`` marks decoded audio, whose samples are expected to stay
    within [-1.0, 1.0]; generated signals may leave it unset.
    """

    samples: np.ndarray
    sample_rate: float
    channels: int
    source: Optional[str] = None
    full_scale: bool = True

    @property
    def frame_count(self) -> int:
        if self.channels <= 0:
            return 0
        return int(self.samples.shape[0]) // self.channels

    @property
    def duration_s(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / float(self.sample_rate)


@dataclass
class AnalysisResult:
    time: np.ndarray
    amplitude: np.ndarray
    spectrum: Spectrum
    sample_rate: float
    original_length: int
    transform_length: int
    source: Optional[str] = None
