"""Loading of trusted resolvers from a text file."""

from __future__ import annotations

import os
from typing import IO

from puredns.options import Context


def load_resolvers(reader: IO[str]) -> list[str]:
    """Return the non-blank lines of reader, stripped of surrounding whitespace."""
    return [line.strip() for line in iter(reader.readline, "") if line.strip()]


class ResolverLoader:
    """Loads trusted resolvers from a file into the program context."""

    def load(self, context: Context, filename: str | os.PathLike) -> None:
        """Replace the context's trusted resolvers with those in filename.

        Does nothing when filename is empty or the file lists no resolvers.
        """
        if not filename:
            return

        with open(filename, encoding="utf-8", errors="surrogateescape") as handle:
            resolvers = load_resolvers(handle)

        if resolvers:
            context.options.trusted_resolvers = resolvers