"""Sample sources (decoded audio files and synthetic test signals).

Utility modules here keep disk-level concerns isolated from the rest of the
application:
- :mod:`audio_loader` decodes ``.wav``/``.mp3`` files into flat float32 samples.
- :mod:`synthetic` generates the deterministic test signal used by ``--demo``.
"""

from .audio_loader import SUPPORTED_EXTENSIONS, load_audio
from .synthetic import synthetic_signal

__all__ = ["SUPPORTED_EXTENSIONS", "load_audio", "synthetic_signal"]
