"""Minimal helpers for opt-in timing instrumentation."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    """Return True when ``AUDIOSPEC_DEBUG`` asks for timing reports."""
    return os.getenv("AUDIOSPEC_DEBUG", "").strip().lower() in _TRUTHY


@contextmanager
def time_block(label: str, *, emitter: Callable[[str], None] | None = None) -> Iterator[None]:
    """
    Context manager that emits elapsed time when debugging is enabled.

    The overhead is essentially a couple of perf_counter() calls when disabled.
    """
    if not debug_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        target = emitter or logger.info
        target(f"[DEBUG] {label} took {elapsed_ms:.3f} ms")
