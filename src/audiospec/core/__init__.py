"""Core analysis flow: shared dataclasses and the spectral analyzer.

This package sits between the sample sources in :mod:`audiospec.dataio` and
the plotting front end, turning flat sample arrays into a time axis and a
one-sided magnitude spectrum.
"""

from .models import AnalysisResult, AudioData
from .analyzer import SpectralAnalyzer

__all__ = [
    "AudioData",
    "AnalysisResult",
    "SpectralAnalyzer",
]
