"""Terminal and feature-flag probes injected into the argument parser."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from typing import TextIO

from .config import Settings
from .constants import PICKER_EXECUTABLE

Which = Callable[[str], str | None]


def is_terminal(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Closed or replaced streams report as non-interactive.
        return False


def is_picker_installed(which: Which | None = None) -> bool:
    lookup = shutil.which if which is None else which
    return lookup(PICKER_EXECUTABLE) is not None


def is_interactive(
    settings: Settings,
    stream: TextIO | None = None,
    which: Which | None = None,
) -> bool:
    """Return True when picker-based flows can run on this output stream."""
    if settings.ignore_picker:
        return False
    return is_terminal(sys.stdout if stream is None else stream) and is_picker_installed(which)


def make_interactive_probe(
    settings: Settings,
    stream: TextIO | None = None,
    which: Which | None = None,
) -> Callable[[], bool]:
    return lambda: is_interactive(settings, stream, which)


def make_fallback_probe(settings: Settings) -> Callable[[], bool]:
    return lambda: settings.fallback_enabled
