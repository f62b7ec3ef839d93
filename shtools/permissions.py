"""Checks on directory access for the current user."""

from __future__ import annotations

import os
import stat
import sys

__all__ = ["has_permission_to_dir"]


def has_permission_to_dir(path: str | os.PathLike[str]) -> bool:
    """Report whether the current user may search (execute) the directory.

    Always true on Windows and for the super-user. Raises OSError if the
    path cannot be examined.
    """
    if sys.platform == "win32":
        return True
    uid = os.getuid()
    if uid == 0:
        return True
    info = os.stat(path)
    perm = stat.S_IMODE(info.st_mode)
    owner = info.st_uid == uid
    if perm & 0o100 and owner:
        return True
    gid = os.getgid()
    in_group = info.st_gid == gid
    if perm & 0o010 and not owner and in_group:
        return True
    if perm & 0o001 and not owner and not in_group:
        return True
    return False