from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

# Make sure the 'src' directory is on sys.path so 'audiospec' can be imported
REPO_ROOT = Path(__file__).resolve().parent
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from audiospec.tools.plotter import main as run_plotter_main


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the audio spectrum viewer.

    Parameters
    ----------
    argv:
        Command-line arguments without the program name. If None, uses sys.argv[1:].
    """
    if argv is None:
        argv = sys.argv[1:]
    return run_plotter_main(list(argv))


PROFILE_SORT_KEYS = ("cumulative", "tottime", "ncalls", "pcalls", "time", "calls")


def _profile_options(value: str) -> tuple[str, int]:
    """
    Parse ``AUDIOSPEC_PROFILE`` as ``[sort][:limit]``.

    ``"1"`` (or any unknown sort key) keeps ``cumulative``; a missing or
    non-positive limit keeps 50 rows.
    """
    sort_part, _sep, limit_part = value.strip().partition(":")
    sort_key = sort_part.strip().lower()
    if sort_key not in PROFILE_SORT_KEYS:
        sort_key = "cumulative"
    try:
        limit = int(limit_part)
    except ValueError:
        limit = 50
    return sort_key, limit if limit > 0 else 50


def _run_with_cprofile(argv: Sequence[str] | None, options: str) -> int:
    """Run the viewer under cProfile and report the slowest functions on stderr."""
    import cProfile
    import pstats

    sort_key, limit = _profile_options(options)
    profiler = cProfile.Profile()
    try:
        return profiler.runcall(main, argv)
    finally:
        pstats.Stats(profiler, stream=sys.stderr).sort_stats(sort_key).print_stats(limit)


if __name__ == "__main__":
    profile = os.getenv("AUDIOSPEC_PROFILE", "")
    if profile:
        raise SystemExit(_run_with_cprofile(sys.argv[1:], profile))
    raise SystemExit(main(sys.argv[1:]))
