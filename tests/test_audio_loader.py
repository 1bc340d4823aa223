import pathlib
import sys
import tempfile
import unittest
from unittest import mock

import numpy as np
import soundfile as sf

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from audiospec.dataio import audio_loader  # noqa: E402
from audiospec.dataio.audio_loader import (  # noqa: E402
    SUPPORTED_EXTENSIONS,
    file_extension,
    load_audio,
)
from audiospec.errors import (  # noqa: E402
    AudioDecodeError,
    AudioSpecError,
    UnsupportedFormatError,
)

STEREO_FRAMES = np.array(
    [[1000, -1000], [2000, -2000], [0, 32767], [-32768, 16384]],
    dtype=np.int16,
)


class LoadWavTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = pathlib.Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_stereo(self, name: str) -> pathlib.Path:
        path = self.tmpdir / name
        sf.write(str(path), STEREO_FRAMES, 8000, subtype="PCM_16", format="WAV")
        return path

    def test_wav_samples_are_interleaved_floats(self):
        path = self._write_stereo("tone.wav")

        audio = load_audio(path)

        self.assertEqual(audio.sample_rate, 8000)
        self.assertEqual(audio.channels, 2)
        self.assertEqual(audio.samples.dtype, np.float32)
        self.assertEqual(audio.frame_count, 4)
        expected = STEREO_FRAMES.reshape(-1).astype(np.float64) / 32768.0
        np.testing.assert_allclose(audio.samples, expected, atol=1e-6)
        self.assertEqual(audio.source, str(path))

    def test_extension_match_is_case_insensitive(self):
        path = self._write_stereo("LOUD.WAV")

        audio = load_audio(path)

        self.assertEqual(audio.samples.shape, (8,))

    def test_missing_file_raises_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            load_audio(self.tmpdir / "missing.wav")

    def test_unsupported_extension(self):
        path = self.tmpdir / "notes.flac"
        path.write_bytes(b"not audio")

        with self.assertRaises(UnsupportedFormatError) as ctx:
            load_audio(path)

        self.assertEqual(str(ctx.exception), "Unsupported extension: flac")
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIsInstance(ctx.exception, AudioSpecError)

    def test_corrupt_wav_raises_decode_error(self):
        path = self.tmpdir / "corrupt.wav"
        path.write_bytes(b"definitely not a RIFF header")

        with self.assertRaises(AudioDecodeError) as ctx:
            load_audio(path)

        self.assertIsInstance(ctx.exception, RuntimeError)
        self.assertIsNotNone(ctx.exception.__cause__)


class LoadMp3Test(unittest.TestCase):
    def test_mp3_is_decoded_as_int16_and_scaled(self):
        frames = np.array([[16384], [-32768], [0]], dtype=np.int16)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "song.mp3"
            path.write_bytes(b"fake mp3")

            with mock.patch.object(
                audio_loader.sf, "read", return_value=(frames, 22050)
            ) as read:
                audio = load_audio(path)

        read.assert_called_once()
        self.assertEqual(read.call_args.kwargs["dtype"], "int16")
        self.assertEqual(audio.sample_rate, 22050)
        self.assertEqual(audio.channels, 1)
        self.assertEqual(audio.samples.dtype, np.float32)
        np.testing.assert_allclose(audio.samples, [0.5, -1.0, 0.0])

    def test_mp3_decoder_failure_is_wrapped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "broken.mp3"
            path.write_bytes(b"fake mp3")

            with mock.patch.object(
                audio_loader.sf, "read", side_effect=RuntimeError("bad frame")
            ):
                with self.assertRaises(AudioDecodeError) as ctx:
                    load_audio(path)

        self.assertIn("broken.mp3", str(ctx.exception))


class ExtensionHelpersTest(unittest.TestCase):
    def test_supported_extensions(self):
        self.assertEqual(SUPPORTED_EXTENSIONS, frozenset({".wav", ".mp3"}))

    def test_file_extension(self):
        self.assertEqual(file_extension("a/b/Track.Mp3"), "mp3")
        self.assertEqual(file_extension("archive.tar.wav"), "wav")
        self.assertEqual(file_extension("no_extension"), "")


if __name__ == "__main__":
    unittest.main()
