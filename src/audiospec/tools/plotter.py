#!/usr/bin/env python3
"""
Command-line spectrum viewer for audio files.

This script is installed as the ``audiospec`` command and can also be run
through ``main.py`` at the repository root. It decodes a ``.wav`` or
``.mp3`` file (or generates the synthetic test signal with ``--demo``),
runs the FFT, and uses Matplotlib's standard interactive window to show:

  * the time series (amplitude against elapsed seconds), and
  * the one-sided magnitude spectrum.

Settings are read from an optional YAML file (``--config``); command-line
flags override the values found there.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt

from audiospec.analysis.spectrum import LENGTH_POLICIES
from audiospec.config.runtime import AnalyzerConfig, load_config
from audiospec.core.analyzer import SpectralAnalyzer
from audiospec.core.models import AnalysisResult, AudioData
from audiospec.dataio.audio_loader import load_audio
from audiospec.dataio.synthetic import synthetic_signal
from audiospec.errors import AudioSpecError

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- # figure
def setup_figure(result: AnalysisResult, config: AnalyzerConfig | None = None):
    """Create the two stacked subplots and return (fig, axes)."""
    cfg = (config or AnalyzerConfig()).sanitized()

    fig, axes = plt.subplots(
        2,
        1,
        figsize=(cfg.figure_width_in, cfg.figure_height_in),
    )
    ax_time, ax_freq = axes

    ax_time.plot(result.time, result.amplitude)
    ax_time.set_xlabel("Time")
    ax_time.set_ylabel("Amplitude")
    ax_time.set_title("Time Series")

    ax_freq.plot(result.spectrum.frequency, result.spectrum.magnitude)
    nyquist_hz = float(result.spectrum.frequency[-1])
    if cfg.max_frequency_hz is not None:
        upper = min(cfg.max_frequency_hz, nyquist_hz) if nyquist_hz > 0.0 else cfg.max_frequency_hz
        ax_freq.set_xlim(0.0, upper)
    ax_freq.set_xlabel("Frequency")
    ax_freq.set_ylabel("Magnitude")
    ax_freq.set_title("Spectrum")

    fig.tight_layout()
    return fig, axes


def build_plot(audio: AudioData, config: AnalyzerConfig | None = None):
    """Analyze ``audio`` and return (fig, axes, result)."""
    cfg = config or AnalyzerConfig()
    print("[INFO] Applying the transform...")
    result = SpectralAnalyzer(cfg).analyze(audio)
    fig, axes = setup_figure(result, cfg)
    return fig, axes, result


def build_plot_for_file(path: Path, config: AnalyzerConfig | None = None):
    """Return a Matplotlib Figure configured for the given audio file."""
    print("[INFO] Loading audio...")
    audio = load_audio(path)
    return build_plot(audio, config)


# --------------------------------------------------------------------------- # CLI
def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audiospec",
        description="Plot the time series and FFT magnitude spectrum of an audio file.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Path to an audio file (.wav or .mp3).",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Analyze the built-in synthetic test signal instead of a file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="YAML file with analyzer settings.",
    )
    parser.add_argument(
        "-l",
        "--length-policy",
        choices=LENGTH_POLICIES,
        help=(
            "How to handle sample counts that are not a power of two: "
            "'strict' fails, 'pad' zero-pads, 'truncate' drops the tail "
            "(default: strict)."
        ),
    )
    parser.add_argument(
        "--max-freq",
        type=float,
        help="Upper x-limit of the spectrum plot in Hz; 0 shows every bin (default: 1000).",
    )
    parser.add_argument(
        "--no-double-edges",
        action="store_true",
        help="Do not double the DC and Nyquist bins of the one-sided spectrum.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Run the analysis without opening a plot window.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AnalyzerConfig:
    """Merge the YAML config (if any) with command-line overrides."""
    cfg = load_config(args.config)
    if args.length_policy is not None:
        cfg.length_policy = args.length_policy
    if args.max_freq is not None:
        cfg.max_frequency_hz = args.max_freq
    if args.no_double_edges:
        cfg.double_edges = False
    return cfg.sanitized()


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.demo and args.file:
        parser.error("Pass either an audio file or --demo, not both.")
    if not args.demo and not args.file:
        parser.error("Audio file missing.")

    if args.config and not Path(args.config).expanduser().exists():
        logger.warning("Config file %s not found; using defaults", args.config)

    try:
        cfg = resolve_config(args)
        if args.demo:
            fig, _axes, result = build_plot(synthetic_signal(), cfg)
        else:
            audio_path = Path(args.file).expanduser().resolve()
            fig, _axes, result = build_plot_for_file(audio_path, cfg)
    except (FileNotFoundError, AudioSpecError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    window_title = result.source or "audiospec"
    if args.no_show:
        plt.close(fig)
        return 0

    manager = fig.canvas.manager
    if manager is not None:
        manager.set_window_title(f"audiospec: {window_title}")
    try:
        plt.show()
    except KeyboardInterrupt:
        # Allow clean exit on Ctrl+C
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
