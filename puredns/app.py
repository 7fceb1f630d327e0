"""Application identity and detection of piped standard input."""

from __future__ import annotations

import io
import os
import stat
import sys

APP_NAME = "puredns"
APP_DESC = "Very accurate massdns resolving and bruteforcing."
APP_VERSION = "v2.1.2"

# Filled in by release builds; empty for development builds.
GIT_BRANCH = ""
GIT_REVISION = ""


def has_stdin() -> bool:
    """Return True if standard input is a pipe that data can be read from."""
    stream = sys.stdin
    if stream is None:
        return False

    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return False

    return stat.S_ISFIFO(mode)