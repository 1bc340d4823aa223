"""Exception types raised by the decode → transform → plot pipeline."""

from __future__ import annotations


class AudioSpecError(Exception):
    """Base class for every failure that terminates an analysis run."""


class UnsupportedFormatError(AudioSpecError, ValueError):
    """The input file extension has no registered decoder."""

    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported extension: {extension}")
        self.extension = extension


class AudioDecodeError(AudioSpecError, RuntimeError):
    """The decoder could not open or parse an audio file."""


class InvalidLengthError(AudioSpecError, ValueError):
    """A signal handed to the FFT does not have a power-of-two length."""

    def __init__(self, length: int) -> None:
        super().__init__(f"signal length must be a power of two, got {length}")
        self.length = length


__all__ = [
    "AudioSpecError",
    "UnsupportedFormatError",
    "AudioDecodeError",
    "InvalidLengthError",
]
