"""Reading whole text files."""

from __future__ import annotations

import logging

from .logger import Level

_log = logging.getLogger(__name__)


def load_text_file(filepath: str) -> str:
    """Return the contents of a text file; OSError is logged and raised."""
    _log.log(Level.TRACE, "Loading File: '%s'", filepath)
    try:
        with open(filepath, encoding="utf-8") as stream:
            return stream.read()
    except OSError:
        _log.error("Failed to load '%s'", filepath)
        raise