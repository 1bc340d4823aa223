"""Configuration objects and helpers for audiospec.

A single YAML file (for example ``audiospec.yaml``) may tune how the
analyzer reconciles sample counts with the FFT length requirement, how the
one-sided magnitudes are scaled, and how the resulting figure is laid out.
The typed dataclass in :mod:`runtime` is what the rest of the package reads.
"""

from .runtime import AnalyzerConfig, config_from_mapping, load_config

__all__ = ["AnalyzerConfig", "config_from_mapping", "load_config"]
