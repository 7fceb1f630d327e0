"""Display of the sponsors list downloaded from a URL."""

from __future__ import annotations

import codecs
import sys
import urllib.error
import urllib.request
from typing import IO

_TIMEOUT = 30.0
_CHUNK_SIZE = 64 * 1024


def show_sponsors(url: str, out: IO[str] | None = None) -> None:
    """Download the text at url and write it, followed by a newline, to out."""
    stream = out if out is not None else sys.stdout

    try:
        response = urllib.request.urlopen(url, timeout=_TIMEOUT)
    except urllib.error.HTTPError as exc:
        # An error status still carries a body worth showing.
        response = exc

    with response:
        headers = getattr(response, "headers", None)
        charset = (headers.get_content_charset() if headers is not None else None) or "utf-8"
        decoder = codecs.getincrementaldecoder(charset)(errors="replace")
        try:
            while chunk := response.read(_CHUNK_SIZE):
                stream.write(decoder.decode(chunk))
            stream.write(decoder.decode(b"", final=True))
        finally:
            stream.write("\n")