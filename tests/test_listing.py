import os

import pytest

from pilotkit.listing import FileIterator, list_files


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c")
    return tmp_path


def test_list_files_top_level_only(tree):
    assert sorted(list_files(tree)) == ["a.txt", "b.txt"]


def test_list_files_recursive(tree):
    assert sorted(list_files(tree, recursive=True)) == [
        "a.txt",
        "b.txt",
        os.path.join("sub", "c.txt"),
    ]


def test_list_files_empty_directory(tmp_path):
    assert list_files(tmp_path) == []


def test_list_files_rejects_file(tree):
    with pytest.raises(NotADirectoryError, match="Path is not a directory"):
        list_files(tree / "a.txt")


def test_list_files_rejects_missing(tmp_path):
    with pytest.raises(NotADirectoryError):
        list_files(tmp_path / "missing")


def test_iterator_non_recursive(tree):
    files = list(FileIterator(tree))
    assert sorted(files) == [str(tree / "a.txt"), str(tree / "b.txt")]


def test_iterator_recursive(tree):
    files = list(FileIterator(str(tree), recursive=True))
    assert sorted(files) == sorted(
        [str(tree / "a.txt"), str(tree / "b.txt"), str(tree / "sub" / "c.txt")]
    )


def test_iterator_exhaustion(tree):
    it = FileIterator(tree)
    assert it.has_next() is True
    next(it)
    next(it)
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_close(tree):
    it = FileIterator(tree)
    it.close()
    assert it.has_next() is False
    with pytest.raises(ValueError, match="iterator has been closed"):
        next(it)


def test_iterator_missing_directory(tmp_path):
    with pytest.raises(OSError, match="cannot access directory"):
        FileIterator(tmp_path / "missing")