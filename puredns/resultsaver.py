"""Saving of the results of a resolve run to the files the user asked for."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from puredns.fileoperation import copy_file
from puredns.options import ResolveOptions


class ResultFileSaver:
    """Copies the work files holding results to the requested output files."""

    def __init__(self, file_copy: Callable[[str, str], None] = copy_file) -> None:
        self._file_copy = file_copy

    def save(self, workfiles: Any, opts: ResolveOptions) -> None:
        """Copy domains, the massdns cache and wildcard roots where opts requests."""
        targets = (
            (workfiles.domains, opts.write_domains_file),
            (workfiles.massdns_public, opts.write_massdns_file),
            (workfiles.wildcard_roots, opts.write_wildcards_file),
        )
        for source, destination in targets:
            if destination:
                self._file_copy(source, destination)