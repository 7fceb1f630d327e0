import os
import sys

from puredns.app import has_stdin


def test_has_stdin_default():
    assert has_stdin() is False


def test_has_stdin_with_pipe(monkeypatch):
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    try:
        monkeypatch.setattr(sys, "stdin", reader)
        assert has_stdin() is True
    finally:
        reader.close()
        os.close(write_fd)


def test_has_stdin_file(monkeypatch, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("")
    with open(path) as handle:
        monkeypatch.setattr(sys, "stdin", handle)
        assert has_stdin() is False


def test_has_stdin_none(monkeypatch):
    monkeypatch.setattr(sys, "stdin", None)
    assert has_stdin() is False