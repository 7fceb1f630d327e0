"""Checks that the external resolver binary can be run."""

from __future__ import annotations

import errno
import shutil
import sys
from collections.abc import Callable
from typing import IO

from puredns.options import ResolveOptions

Executor = Callable[..., None]


class RequirementError(RuntimeError):
    """A required program cannot be run."""


def _locate_executable(name: str, *args: str) -> None:
    """Raise FileNotFoundError unless name is an executable that can be found."""
    if not name or shutil.which(name) is None:
        raise FileNotFoundError(errno.ENOENT, "executable file not found", name)


class RequirementChecker:
    """Verifies that massdns is available before a run starts."""

    def __init__(self, executor: Executor | None = None, out: IO[str] | None = None) -> None:
        self._executor = executor if executor is not None else _locate_executable
        self._out = out

    def check(self, opts: ResolveOptions) -> None:
        """Raise RequirementError, after printing help, if massdns cannot be run."""
        try:
            self._executor(opts.bin_path, "--help")
        except Exception as exc:
            out = self._out if self._out is not None else sys.stdout
            out.write(
                "Unable to execute massdns. Make sure it is present and that the\n"
                "path to the binary is added to the PATH environment variable.\n\n"
                "Alternatively, specify the path to massdns using --bin\n\n"
            )
            raise RequirementError(f"unable to execute massdns: {exc}") from exc