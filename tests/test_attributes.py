import os

import pytest

from pilotkit.attributes import FileAttributes, get_attributes, set_attributes


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("data")
    return path


def test_get_attributes_reports_mode_and_ids(sample):
    os.chmod(sample, 0o640)
    attrs = get_attributes(sample)
    info = os.stat(sample)
    assert attrs == FileAttributes(mode=0o640, owner=info.st_uid, group=info.st_gid)


def test_get_attributes_on_directory(tmp_path):
    os.chmod(tmp_path, 0o750)
    assert get_attributes(str(tmp_path)).mode == 0o750


def test_get_attributes_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_attributes(tmp_path / "missing")


def test_set_attributes_round_trip(sample):
    info = os.stat(sample)
    set_attributes(sample, info.st_uid, info.st_gid, 0o600)
    attrs = get_attributes(sample)
    assert attrs.mode == 0o600
    assert (attrs.owner, attrs.group) == (info.st_uid, info.st_gid)


def test_set_attributes_without_mode_keeps_permissions(sample):
    os.chmod(sample, 0o604)
    info = os.stat(sample)
    set_attributes(str(sample), info.st_uid, info.st_gid)
    assert get_attributes(sample).mode == 0o604


@pytest.mark.parametrize("owner, group", [(-1, 0), (0, -1), (-5, -5)])
def test_set_attributes_rejects_negative_ids(sample, owner, group):
    with pytest.raises(ValueError, match="UID and GID must be non-negative"):
        set_attributes(sample, owner, group)


def test_set_attributes_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        set_attributes(tmp_path / "missing", os.getuid(), os.getgid(), 0o644)