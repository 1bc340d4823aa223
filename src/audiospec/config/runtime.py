"""Runtime configuration helpers for the decode/transform/plot pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

import yaml

from ..analysis.spectrum import LENGTH_POLICIES


def _as_float(value: Any, fallback: float) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(result):
        return fallback
    return result


def _as_bool(value: Any, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
        return fallback
    if value is None:
        return fallback
    return bool(value)


@dataclass(slots=True)
class AnalyzerConfig:
    """
    Tuning knobs for how samples are transformed and displayed.

    The defaults reproduce the reference output: power-of-two input is
    required, every bin is doubled, and the spectrum view stops at 1 kHz.
    """

    length_policy: str = "strict"
    double_edges: bool = True
    max_frequency_hz: Optional[float] = 1000.0

    # 1200x780 px at 100 dpi
    figure_width_in: float = 12.0
    figure_height_in: float = 7.8

    def sanitized(self) -> AnalyzerConfig:
        """Return a copy with unknown values replaced by defaults."""
        policy = str(self.length_policy or "").strip().lower()
        if policy not in LENGTH_POLICIES:
            policy = "strict"

        max_freq: Optional[float] = None
        if self.max_frequency_hz is not None:
            value = _as_float(self.max_frequency_hz, 0.0)
            if value > 0.0:
                max_freq = value

        return AnalyzerConfig(
            length_policy=policy,
            double_edges=_as_bool(self.double_edges, True),
            max_frequency_hz=max_freq,
            figure_width_in=max(1.0, _as_float(self.figure_width_in, 12.0)),
            figure_height_in=max(1.0, _as_float(self.figure_height_in, 7.8)),
        )


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`AnalyzerConfig`."""
    return {f.name for f in fields(AnalyzerConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten an optional top-level ``analyzer`` block."""
    if "analyzer" in data and isinstance(data["analyzer"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "analyzer":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build :class:`AnalyzerConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return AnalyzerConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return AnalyzerConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> AnalyzerConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`AnalyzerConfig`. Unreadable or
    malformed YAML raises ``ValueError``.
    """
    if path is None:
        return AnalyzerConfig()
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        return AnalyzerConfig()
    try:
        with cfg_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ValueError(f"Invalid config {cfg_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["AnalyzerConfig", "config_from_mapping", "load_config"]
