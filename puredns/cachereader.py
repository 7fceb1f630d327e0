"""Reading of massdns answer caches written in the -o Snl format."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import IO


class RRType(enum.Enum):
    """DNS record types kept from a massdns cache."""

    A = 1
    CNAME = 5
    AAAA = 28


@dataclass(frozen=True)
class DNSAnswer:
    """A single DNS answer record."""

    type: RRType
    answer: str


class DNSCache:
    """Answers known for each domain, without duplicates, in insertion order."""

    def __init__(self) -> None:
        self._entries: dict[str, dict[DNSAnswer, None]] = {}

    def add(self, domain: str, answers: Iterable[DNSAnswer]) -> None:
        """Record answers for a domain."""
        entry = self._entries.setdefault(domain, {})
        for answer in answers:
            entry[answer] = None

    def find(self, domain: str) -> list[DNSAnswer]:
        """Return the answers known for a domain, or an empty list."""
        return list(self._entries.get(domain, ()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, domain: object) -> bool:
        return domain in self._entries


class _State(enum.Enum):
    NEW_SECTION = enum.auto()
    SAVE_ANSWER = enum.auto()
    SKIP = enum.auto()


_RRTYPES = {"A": RRType.A, "AAAA": RRType.AAAA, "CNAME": RRType.CNAME}


class CacheReader:
    """Reads a massdns cache in batches, resuming where the last read stopped."""

    def __init__(self, reader: IO[str]) -> None:
        self._reader = reader
        self._lines = iter(reader.readline, "")

    def read(
        self,
        writer: IO[str] | None = None,
        cache: DNSCache | None = None,
        max_count: int = 0,
    ) -> int:
        """Process answer sections and return the number of valid domains found.

        Each valid domain is written once to writer and its A, AAAA and CNAME
        records are added to cache, when those are given. A positive
        max_count stops reading after that many domains; the next call
        continues from there.
        """
        state = _State.NEW_SECTION
        current = ""
        saved = False
        found = 0

        for raw in self._lines:
            line = raw.removesuffix("\n").removesuffix("\r")

            if line == "":
                state = _State.NEW_SECTION
                if max_count > 0 and found == max_count:
                    break
                continue

            if state is _State.SKIP:
                continue

            parts = line.split(" ")
            if len(parts) != 3:
                state = _State.SKIP
                continue

            if state is _State.NEW_SECTION:
                domain = parts[0].removesuffix(".")
                if not domain:
                    state = _State.SKIP
                    continue
                current = domain
                saved = False
                state = _State.SAVE_ANSWER

            rrtype = _RRTYPES.get(parts[1])
            if rrtype is None:
                continue
            answer = parts[2]
            if rrtype is RRType.CNAME:
                answer = answer.removesuffix(".")

            if not saved:
                found += 1
                saved = True
                if writer is not None:
                    writer.write(current + "\n")

            if cache is not None:
                cache.add(current, [DNSAnswer(rrtype, answer)])

            if cache is None and writer is None:
                state = _State.SKIP

        return found

    def close(self) -> None:
        """Close the underlying reader."""
        self._reader.close()

    def __enter__(self) -> CacheReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()