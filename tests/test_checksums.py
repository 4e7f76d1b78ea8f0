import string

import pytest

from pilotkit.checksums import blake2b512sum, blake2s256sum, file_checksum, md5sum

HEX = set(string.hexdigits.lower())


@pytest.fixture
def make_file(tmp_path):
    def _make(data: bytes, name: str = "data.bin"):
        target = tmp_path / name
        target.write_bytes(data)
        return target

    return _make


def test_md5_of_empty_file(make_file):
    assert md5sum(make_file(b"")) == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_of_abc(make_file):
    assert md5sum(make_file(b"abc")) == "900150983cd24fb0d6963f7d28e17f72"


def test_generic_algorithm_by_name(make_file):
    digest = file_checksum(make_file(b"abc"), "sha256")
    assert digest == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.mark.parametrize(
    "func, length",
    [(md5sum, 32), (blake2b512sum, 128), (blake2s256sum, 64)],
)
def test_digest_shape(make_file, func, length):
    digest = func(make_file(b"some content\n"))
    assert len(digest) == length
    assert set(digest) <= HEX


@pytest.mark.parametrize("func", [md5sum, blake2b512sum, blake2s256sum])
def test_same_content_same_digest(make_file, func):
    data = b"x" * 10_000
    assert func(make_file(data, "a")) == func(make_file(data, "b"))


@pytest.mark.parametrize("func", [md5sum, blake2b512sum, blake2s256sum])
def test_different_content_different_digest(make_file, func):
    first = func(make_file(b"alpha", "a"))
    second = func(make_file(b"beta", "b"))
    assert first != second
    assert len(first) == len(second)


def test_named_helpers_match_generic(make_file):
    target = make_file(b"payload" * 1000)
    assert blake2b512sum(target) == file_checksum(target, "blake2b512")
    assert blake2s256sum(target) == file_checksum(target, "blake2s256")
    assert md5sum(target) == file_checksum(target, "MD5")


def test_chunk_boundary_content(make_file):
    exact = make_file(b"q" * 4096, "exact")
    longer = make_file(b"q" * 4097, "longer")
    assert md5sum(exact) != md5sum(longer)
    assert md5sum(exact) == md5sum(make_file(b"q" * 4096, "again"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        md5sum(tmp_path / "absent")


def test_directory_raises(tmp_path):
    with pytest.raises(OSError):
        blake2s256sum(tmp_path)


def test_unknown_algorithm_raises(make_file):
    with pytest.raises(ValueError):
        file_checksum(make_file(b"abc"), "no-such-hash")