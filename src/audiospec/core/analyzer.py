"""Spectral analyzer: flat samples in, time axis and one-sided spectrum out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from ..analysis.features import peak_amplitude, rms
from ..analysis.fft import transform
from ..analysis.spectrum import Spectrum, derive_spectrum, prepare_signal, time_axis
from ..config.runtime import AnalyzerConfig
from ..tools.debug import time_block
from .models import AnalysisResult, AudioData

__all__ = ["SpectralAnalyzer"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SpectralAnalyzer:
    """
    Single entry point shared by every sample source.

    Channels are not separated: interleaved multi-channel samples are
    transformed as one flat sequence.
    """

    config: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    def __post_init__(self) -> None:
        self.config = self.config.sanitized()

    def spectrum_of(self, samples: np.ndarray, sample_rate: float) -> tuple[Spectrum, int]:
        """Transform ``samples`` and return ``(spectrum, transform_length)``."""
        if sample_rate <= 0:
            raise ValueError(f"sample_rate must be > 0, got {sample_rate}")

        buffer = prepare_signal(samples, self.config.length_policy)
        n_in = int(np.asarray(samples).size)
        n_fft = int(buffer.shape[0])
        if n_fft != n_in:
            logger.info(
                "Length policy %r: %d samples -> %d-point transform",
                self.config.length_policy,
                n_in,
                n_fft,
            )

        with time_block(f"fft n={n_fft}"):
            transform(buffer)

        spectrum = derive_spectrum(
            buffer,
            sample_rate,
            double_edges=self.config.double_edges,
        )
        return spectrum, n_fft

    def analyze(self, audio: AudioData) -> AnalysisResult:
        amplitude = np.asarray(audio.samples, dtype=float).reshape(-1)
        logger.info(
            "Analyzing %d samples @ %g Hz (%d channel(s)), rms=%.4f",
            amplitude.shape[0],
            audio.sample_rate,
            audio.channels,
            rms(amplitude) if amplitude.size else 0.0,
        )
        if audio.full_scale and amplitude.size and peak_amplitude(amplitude) > 1.0:
            logger.warning("Samples exceed full scale; input may not be normalized")

        spectrum, n_fft = self.spectrum_of(amplitude, audio.sample_rate)
        peak_hz, peak_mag = spectrum.peak(skip_dc=True)
        logger.info(
            "Spectrum: %d bins, %.4f Hz resolution, peak %.3f at %.2f Hz",
            len(spectrum),
            spectrum.resolution_hz,
            peak_mag,
            peak_hz,
        )

        return AnalysisResult(
            time=time_axis(amplitude.shape[0], audio.sample_rate),
            amplitude=amplitude,
            spectrum=spectrum,
            sample_rate=float(audio.sample_rate),
            original_length=int(amplitude.shape[0]),
            transform_length=n_fft,
            source=audio.source,
        )
