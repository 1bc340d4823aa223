"""Decode audio files into flat, interleaved float32 samples."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Tuple

import numpy as np
import soundfile as sf

from ..core.models import AudioData
from ..errors import AudioDecodeError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# int16 full scale
_INT16_SCALE = 1.0 / 32768.0


def _read_frames(path: Path, dtype: str) -> Tuple[np.ndarray, int]:
    """Return ``(frames, sample_rate)`` with frames shaped (n_frames, channels)."""
    try:
        frames, sample_rate = sf.read(str(path), dtype=dtype, always_2d=True)
    except Exception as exc:
        raise AudioDecodeError(f"Failed to decode audio file {path.name!r}: {exc}") from exc
    return frames, int(sample_rate)


def _decode_wav(path: Path) -> AudioData:
    frames, sample_rate = _read_frames(path, "float32")
    return AudioData(
        samples=frames.reshape(-1).astype(np.float32, copy=False),
        sample_rate=sample_rate,
        channels=int(frames.shape[1]),
        source=str(path),
    )


def _decode_mp3(path: Path) -> AudioData:
    frames, sample_rate = _read_frames(path, "int16")
    samples = frames.reshape(-1).astype(np.float32) * np.float32(_INT16_SCALE)
    return AudioData(
        samples=samples,
        sample_rate=sample_rate,
        channels=int(frames.shape[1]),
        source=str(path),
    )


_DECODERS: Dict[str, Callable[[Path], AudioData]] = {
    "wav": _decode_wav,
    "mp3": _decode_mp3,
}

SUPPORTED_EXTENSIONS = frozenset(f".{ext}" for ext in _DECODERS)


def file_extension(path: str | Path) -> str:
    """Lower-cased extension without the leading dot (``""`` if there is none)."""
    return Path(path).suffix.lower().lstrip(".")


def load_audio(path: str | Path) -> AudioData:
    """
    Decode ``path`` into an :class:`AudioData`.

    The decoder is picked from the file extension (``.wav`` or ``.mp3``,
    case-insensitive). Samples are returned interleaved by channel, scaled
    to [-1.0, 1.0].

    Raises
    ------
    FileNotFoundError
        ``path`` does not exist.
    UnsupportedFormatError
        The extension has no decoder.
    AudioDecodeError
        The file exists but could not be opened or parsed.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"Audio file not found: {file_path}")

    ext = file_extension(file_path)
    decoder = _DECODERS.get(ext)
    if decoder is None:
        raise UnsupportedFormatError(ext)

    audio = decoder(file_path)
    logger.info(
        "Decoded %s: %d samples, %d channel(s) @ %g Hz",
        file_path.name,
        audio.samples.shape[0],
        audio.channels,
        audio.sample_rate,
    )
    return audio
