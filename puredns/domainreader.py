"""A readable stream of domains to resolve, built from a list or a wordlist."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import IO

DomainSanitizer = Callable[[str], str]


class DomainReader:
    """Produces newline-terminated domains to resolve from a source stream.

    Each line of the source is either a domain, or, when domains are given, a
    word prefixed to every domain (or substituted for every '*' in it). A
    sanitizer, if present, cleans each domain; a domain it rejects still
    produces an empty line so that counts stay accurate. The source is
    closed once it is exhausted.
    """

    def __init__(
        self,
        source: IO[str],
        domains: Iterable[str] | None = None,
        sanitizer: DomainSanitizer | None = None,
    ) -> None:
        self._source = source
        self._domains = list(domains or ())
        self._sanitizer = sanitizer
        self._chunks = self._generate()
        self._pending = ""

    def _generate(self) -> Iterator[str]:
        try:
            for raw in iter(self._source.readline, ""):
                word = raw.removesuffix("\n").removesuffix("\r")
                if not self._domains:
                    yield self._process(word)
                else:
                    yield "".join(self._process(self._combine(word, d)) for d in self._domains)
        finally:
            self._source.close()

    @staticmethod
    def _combine(word: str, domain: str) -> str:
        if "*" in domain:
            return domain.replace("*", word)
        return f"{word}.{domain}"

    def _process(self, domain: str) -> str:
        if self._sanitizer is not None:
            domain = self._sanitizer(domain)
        return domain + "\n"

    def _fill(self) -> bool:
        chunk = next(self._chunks, None)
        if chunk is None:
            return False
        self._pending += chunk
        return True

    def read(self, size: int = -1) -> str:
        """Return up to size characters of generated domains; all of them if size < 0.

        Returns an empty string once everything has been read.
        """
        while size < 0 or len(self._pending) < size:
            if not self._fill():
                break

        if size < 0:
            data, self._pending = self._pending, ""
        else:
            data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def _readline(self) -> str:
        while "\n" not in self._pending and self._fill():
            pass
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        """Yield the generated domains one line at a time, newline included."""
        while line := self._readline():
            yield line