import os
import stat
from unittest import mock

import pytest

from shtools.permissions import has_permission_to_dir

USER = 1000
GROUP = 1000
OTHER_USER = 2000
OTHER_GROUP = 2000


def _fake_stat(perm, uid, gid):
    mode = stat.S_IFDIR | perm
    return os.stat_result((mode, 1, 1, 2, uid, gid, 4096, 0, 0, 0))


def _check(perm, owner_uid, owner_gid, uid=USER, gid=GROUP):
    with mock.patch("sys.platform", "linux"), \
            mock.patch("os.getuid", return_value=uid, create=True), \
            mock.patch("os.getgid", return_value=gid, create=True), \
            mock.patch("os.stat", return_value=_fake_stat(perm, owner_uid, owner_gid)):
        return has_permission_to_dir("/some/dir")


def test_superuser_always_allowed():
    assert _check(0o000, OTHER_USER, OTHER_GROUP, uid=0) is True


@pytest.mark.parametrize(
    "perm,owner_uid,owner_gid,expected",
    [
        (0o700, USER, GROUP, True),
        (0o100, USER, OTHER_GROUP, True),
        (0o600, USER, GROUP, False),
        (0o010, OTHER_USER, GROUP, True),
        (0o010, USER, GROUP, False),
        (0o001, OTHER_USER, OTHER_GROUP, True),
        (0o001, OTHER_USER, GROUP, False),
        (0o100, OTHER_USER, OTHER_GROUP, False),
        (0o000, USER, GROUP, False),
    ],
)
def test_permission_bits(perm, owner_uid, owner_gid, expected):
    assert _check(perm, owner_uid, owner_gid) is expected


def test_windows_always_allowed():
    with mock.patch("sys.platform", "win32"):
        assert has_permission_to_dir("C:\\nowhere") is True


def test_missing_directory_raises(tmp_path):
    missing = tmp_path / "missing"
    with mock.patch("sys.platform", "linux"), \
            mock.patch("os.getuid", return_value=USER, create=True), \
            mock.patch("os.getgid", return_value=GROUP, create=True):
        with pytest.raises(FileNotFoundError):
            has_permission_to_dir(missing)