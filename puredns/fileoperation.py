"""A set of operations commonly performed on line-oriented text files."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterable, Iterator
from typing import IO, Any

_BUFFER_SIZE = 64 * 1024


def _open_text(filename: str | os.PathLike, mode: str) -> IO[str]:
    return open(filename, mode, encoding="utf-8", errors="surrogateescape", newline="\n")


def _scan_lines(reader: IO[str]) -> Iterator[str]:
    """Yield lines without their terminating newline and carriage return."""
    while line := reader.readline():
        yield line.removesuffix("\n").removesuffix("\r")


def write_lines_io(lines: Iterable[str], writer: IO[str]) -> None:
    """Write every line followed by a newline to a writer."""
    for line in lines:
        writer.write(line + "\n")


def append_lines(lines: Iterable[str], filename: str | os.PathLike) -> None:
    """Append lines to a text file, creating it if it does not exist."""
    with _open_text(filename, "a") as handle:
        write_lines_io(lines, handle)


def write_lines(lines: Iterable[str], filename: str | os.PathLike) -> None:
    """Write lines to a text file, truncating it if it already exists."""
    with _open_text(filename, "w") as handle:
        write_lines_io(lines, handle)


def append_word_io(reader: IO[str], writer: IO[str], sep: str, word: str) -> None:
    """Copy each line from reader to writer with a separator and a word appended."""
    for line in _scan_lines(reader):
        writer.write(f"{line}{sep}{word}\n")


def append_word(
    src: str | os.PathLike, dest: str | os.PathLike, sep: str, word: str
) -> None:
    """Append a separator and a word to each line of src, writing the result to dest."""
    with _open_text(src, "r") as source, _open_text(dest, "w") as destination:
        append_word_io(source, destination, sep, word)


def cat_io(readers: Iterable[IO[str]], writer: IO[str]) -> None:
    """Write the lines of every reader in order to writer."""
    for reader in readers:
        for line in _scan_lines(reader):
            writer.write(line + "\n")


def cat(filenames: Iterable[str | os.PathLike], writer: IO[str]) -> None:
    """Write the lines of every file in order to writer.

    All files are opened before anything is written.
    """
    with contextlib.ExitStack() as stack:
        readers = [stack.enter_context(_open_text(name, "r")) for name in filenames]
        cat_io(readers, writer)


def copy_stream(reader: IO[Any], writer: IO[Any], buffer_size: int) -> None:
    """Copy everything from reader to writer in chunks of buffer_size."""
    while chunk := reader.read(buffer_size):
        writer.write(chunk)
    writer.flush()


def copy_file(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy the file src to dest, truncating dest if it exists."""
    with open(src, "rb") as source, open(dest, "wb") as destination:
        copy_stream(source, destination, _BUFFER_SIZE)


def count_newlines(reader: IO[bytes]) -> int:
    """Count the newline bytes in a binary stream."""
    total = 0
    while chunk := reader.read(_BUFFER_SIZE):
        total += chunk.count(b"\n")
    return total


def count_lines(filename: str | os.PathLike) -> int:
    """Count the number of lines in a file."""
    with open(filename, "rb") as handle:
        return count_newlines(handle)


def file_exists(path: str | os.PathLike) -> bool:
    """Return True if something exists at path and can be inspected."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def read_lines(filename: str | os.PathLike) -> list[str]:
    """Read the lines of a text file into a list."""
    with _open_text(filename, "r") as handle:
        return list(_scan_lines(handle))