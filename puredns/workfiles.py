"""Temporary work files used while resolving."""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Callable
from dataclasses import dataclass

# Attribute name and file name of every work file, in creation order.
_FILES = (
    ("domains", "domains.txt"),
    ("massdns_public", "massdns_public.txt"),
    ("massdns_trusted", "massdns_trusted.txt"),
    ("temporary", "temporary.txt"),
    ("public_resolvers", "resolvers.txt"),
    ("trusted_resolvers", "trusted.txt"),
    ("wildcard_roots", "wildcards.txt"),
)


@dataclass
class Workfiles:
    """Paths of the temporary files used during a run."""

    temp_directory: str = ""

    domains: str = ""
    massdns_public: str = ""
    massdns_trusted: str = ""
    temporary: str = ""

    public_resolvers: str = ""
    trusted_resolvers: str = ""

    wildcard_roots: str = ""

    def close(self) -> None:
        """Delete the temporary directory and every file in it."""
        if self.temp_directory:
            shutil.rmtree(self.temp_directory, ignore_errors=True)

    def __enter__(self) -> Workfiles:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _touch(path: str) -> None:
    with open(path, "w", encoding="utf-8"):
        pass


class WorkfileCreator:
    """Creates a fresh set of empty work files in a new temporary directory."""

    def __init__(
        self,
        mkdtemp: Callable[..., str] = tempfile.mkdtemp,
        create_file: Callable[[str], None] = _touch,
    ) -> None:
        self._mkdtemp = mkdtemp
        self._create_file = create_file

    def create(self) -> Workfiles:
        """Create the work files; call close() on the result to remove them."""
        try:
            directory = self._mkdtemp(prefix="puredns.")
        except OSError as exc:
            raise OSError(f"unable to create temporary work directory: {exc}") from exc

        paths: dict[str, str] = {}
        for attribute, name in _FILES:
            path = os.path.join(directory, name)
            try:
                self._create_file(path)
            except OSError as exc:
                shutil.rmtree(directory, ignore_errors=True)
                raise OSError(f"unable to create temporary file {path}: {exc}") from exc
            paths[attribute] = path

        return Workfiles(temp_directory=directory, **paths)