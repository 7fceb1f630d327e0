import os
import tempfile
from pathlib import Path

import pytest

from puredns.workfiles import WorkfileCreator, Workfiles

NAMES = [
    "domains.txt",
    "massdns_public.txt",
    "massdns_trusted.txt",
    "temporary.txt",
    "resolvers.txt",
    "trusted.txt",
    "wildcards.txt",
]


def test_create_success():
    files = WorkfileCreator().create()
    try:
        directory = Path(files.temp_directory)
        assert directory.is_dir()
        assert directory.name.startswith("puredns.")
        paths = [
            files.domains,
            files.massdns_public,
            files.massdns_trusted,
            files.temporary,
            files.public_resolvers,
            files.trusted_resolvers,
            files.wildcard_roots,
        ]
        assert [Path(p).name for p in paths] == NAMES
        assert all(Path(p).is_file() and Path(p).parent == directory for p in paths)
    finally:
        files.close()

    assert not Path(files.temp_directory).exists()


def test_workfiles_context_manager_removes_directory():
    with WorkfileCreator().create() as files:
        directory = files.temp_directory
        assert Path(directory).is_dir()
    assert not Path(directory).exists()


def test_mkdtemp_error():
    error = OSError("mkdirtemp failed")

    def failing(**kwargs):
        raise error

    with pytest.raises(OSError, match="unable to create temporary work directory") as info:
        WorkfileCreator(mkdtemp=failing).create()

    assert info.value.__cause__ is error


@pytest.mark.parametrize("successes", range(len(NAMES)))
def test_create_file_error(successes):
    error = OSError("create failed")
    created = []
    directories = []

    def mkdtemp(**kwargs):
        directory = tempfile.mkdtemp(**kwargs)
        directories.append(directory)
        return directory

    def create_file(path):
        if len(created) >= successes:
            raise error
        created.append(path)
        with open(path, "w", encoding="utf-8"):
            pass

    with pytest.raises(OSError, match="unable to create temporary file") as info:
        WorkfileCreator(mkdtemp=mkdtemp, create_file=create_file).create()

    assert info.value.__cause__ is error
    assert NAMES[successes] in str(info.value)
    assert [os.path.basename(p) for p in created] == NAMES[:successes]
    assert not Path(directories[0]).exists()


def test_close_without_directory_leaves_files(tmp_path):
    keep = tmp_path / "keep.txt"
    keep.write_text("data")

    Workfiles(domains=str(keep)).close()

    assert keep.read_text() == "data"