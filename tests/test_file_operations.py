# Testes das operações de remoção e renomeação no sistema de arquivos.

import os

import pytest

from fbrowser.errors import RemovalFailed, RenameFailed
from fbrowser.services.directory_scan import load_directory
from fbrowser.services.file_operations import remove_file, remove_files, rename_entry


def entry_named(directory, name):
    _, entries = load_directory(str(directory))
    return next(e for e in entries if e.name == name)


def test_remove_file(sample_dir):
    remove_file(str(sample_dir / "a.txt"))
    assert not (sample_dir / "a.txt").exists()


def test_remove_missing_file_fails(sample_dir):
    with pytest.raises(RemovalFailed) as info:
        remove_file(str(sample_dir / "missing.txt"))
    assert info.value.path == str(sample_dir / "missing.txt")
    assert info.value.reason


def test_remove_directory_is_not_supported(sample_dir):
    (sample_dir / "sub" / "inner.txt").write_text("")
    with pytest.raises(RemovalFailed):
        remove_file(str(sample_dir / "sub"))
    assert (sample_dir / "sub" / "inner.txt").exists()


def test_remove_files_attempts_every_path(sample_dir):
    paths = [
        str(sample_dir / "missing.txt"),
        str(sample_dir / "a.txt"),
        str(sample_dir / "sub"),
        str(sample_dir / "B.txt"),
    ]
    failures = remove_files(paths)

    assert [f.path for f in failures] == [paths[0], paths[2]]
    assert not (sample_dir / "a.txt").exists()
    assert not (sample_dir / "B.txt").exists()


def test_rename_file(sample_dir):
    target = rename_entry(entry_named(sample_dir, "a.txt"), "z.txt")
    assert target == os.path.join(os.path.normpath(str(sample_dir)), "z.txt")
    assert (sample_dir / "z.txt").read_bytes() == b"a" * 500
    assert not (sample_dir / "a.txt").exists()


def test_rename_directory(sample_dir):
    rename_entry(entry_named(sample_dir, "sub"), "renamed")
    assert (sample_dir / "renamed").is_dir()
    assert not (sample_dir / "sub").exists()


def test_rename_does_not_overwrite(sample_dir):
    with pytest.raises(RenameFailed):
        rename_entry(entry_named(sample_dir, "a.txt"), "B.txt")
    assert (sample_dir / "a.txt").exists()
    assert (sample_dir / "B.txt").read_text() == "bb"


def test_rename_directory_failure_carries_reason(sample_dir):
    entry = entry_named(sample_dir, "sub")
    (sample_dir / "sub").rmdir()
    with pytest.raises(RenameFailed) as info:
        rename_entry(entry, "other")
    assert info.value.reason


def test_rename_to_empty_name_fails(sample_dir):
    with pytest.raises(RenameFailed):
        rename_entry(entry_named(sample_dir, "a.txt"), "")
