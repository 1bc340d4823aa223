from __future__ import annotations

import argparse

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402
import soundfile as sf  # noqa: E402

from audiospec.config.runtime import AnalyzerConfig  # noqa: E402
from audiospec.core import AudioData, SpectralAnalyzer  # noqa: E402
from audiospec.dataio.synthetic import synthetic_signal  # noqa: E402
from audiospec.tools import plotter  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def _write_wav(path, n_frames: int, rate: int = 8000) -> None:
    t = np.arange(n_frames) / rate
    sf.write(str(path), 0.25 * np.sin(2 * np.pi * 440.0 * t), rate, subtype="FLOAT")


def _result(rate: float = 8000.0, n: int = 256):
    t = np.arange(n) / rate
    audio = AudioData(samples=np.sin(2 * np.pi * 500.0 * t), sample_rate=rate, channels=1)
    return SpectralAnalyzer().analyze(audio)


def test_setup_figure_labels_both_views() -> None:
    fig, axes = plotter.setup_figure(_result())

    ax_time, ax_freq = axes
    assert ax_time.get_title() == "Time Series"
    assert ax_time.get_xlabel() == "Time"
    assert ax_time.get_ylabel() == "Amplitude"
    assert ax_freq.get_title() == "Spectrum"
    assert ax_freq.get_xlabel() == "Frequency"
    assert ax_freq.get_ylabel() == "Magnitude"
    assert ax_freq.get_xlim() == (0.0, 1000.0)
    width, height = fig.get_size_inches()
    assert (width, height) == pytest.approx((12.0, 7.8))


def test_setup_figure_without_frequency_limit_shows_all_bins() -> None:
    _fig, axes = plotter.setup_figure(_result(), AnalyzerConfig(max_frequency_hz=None))
    assert axes[1].get_xlim()[1] >= 4000.0


def test_resolve_config_applies_overrides(tmp_path) -> None:
    cfg_path = tmp_path / "audiospec.yaml"
    cfg_path.write_text("length_policy: truncate\nmax_frequency_hz: 2000\n", encoding="utf-8")
    args = argparse.Namespace(
        config=str(cfg_path),
        length_policy="pad",
        max_freq=None,
        no_double_edges=True,
    )

    cfg = plotter.resolve_config(args)

    assert cfg.length_policy == "pad"
    assert cfg.max_frequency_hz == 2000.0
    assert cfg.double_edges is False


def test_main_runs_demo_without_window(capsys) -> None:
    assert plotter.main(["--demo", "--no-show"]) == 0
    out = capsys.readouterr().out
    assert "Applying the transform" in out


def test_main_analyzes_power_of_two_wav(tmp_path, capsys) -> None:
    path = tmp_path / "tone.wav"
    _write_wav(path, 1024)

    assert plotter.main([str(path), "--no-show"]) == 0
    out = capsys.readouterr().out
    assert "Loading audio" in out


def test_main_fails_on_non_power_of_two_by_default(tmp_path, capsys) -> None:
    path = tmp_path / "tone.wav"
    _write_wav(path, 1000)

    assert plotter.main([str(path), "--no-show"]) == 1
    assert "power of two" in capsys.readouterr().err


def test_main_pads_when_asked(tmp_path) -> None:
    path = tmp_path / "tone.wav"
    _write_wav(path, 1000)

    assert plotter.main([str(path), "--no-show", "--length-policy", "pad"]) == 0


def test_main_reports_missing_file(tmp_path, capsys) -> None:
    assert plotter.main([str(tmp_path / "missing.wav"), "--no-show"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_main_reports_unsupported_extension(tmp_path, capsys) -> None:
    path = tmp_path / "lyrics.txt"
    path.write_text("la la la", encoding="utf-8")

    assert plotter.main([str(path), "--no-show"]) == 1
    assert "Unsupported extension: txt" in capsys.readouterr().err


def test_main_requires_an_input() -> None:
    with pytest.raises(SystemExit) as exc_info:
        plotter.main([])
    assert exc_info.value.code == 2


def test_main_rejects_file_and_demo_together(tmp_path) -> None:
    with pytest.raises(SystemExit):
        plotter.main([str(tmp_path / "a.wav"), "--demo"])


def test_main_shows_window(monkeypatch) -> None:
    shown = []
    monkeypatch.setattr(plotter.plt, "show", lambda: shown.append(True))

    assert plotter.main(["--demo"]) == 0
    assert shown == [True]


def test_main_reports_malformed_config(tmp_path, capsys) -> None:
    cfg_path = tmp_path / "broken.yaml"
    cfg_path.write_text("analyzer: [unclosed\n", encoding="utf-8")

    assert plotter.main(["--demo", "--no-show", "--config", str(cfg_path)]) == 1
    err = capsys.readouterr().err
    assert "[ERROR]" in err
    assert "Invalid config" in err


def test_frequency_limit_is_capped_at_nyquist() -> None:
    _fig, axes, result = plotter.build_plot(synthetic_signal())
    assert result.spectrum.frequency[-1] == pytest.approx(500.0)
    assert axes[1].get_xlim() == (0.0, 500.0)
