"""Locating executables through a shell environment's PATH."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Mapping

__all__ = [
    "LookPathError",
    "split_list",
    "win_has_ext",
    "path_exts",
    "check_stat",
    "find_executable",
    "look_path_dir",
    "look_path",
]

_WINDOWS = sys.platform == "win32"

_DEFAULT_WINDOWS_EXTS = [".com", ".exe", ".bat", ".cmd"]


class LookPathError(Exception):
    """Raised when a file is not a usable executable or cannot be found."""


def _join(*parts: str) -> str:
    return os.path.normpath(os.path.join(*parts))


def _is_drive_letter(s: str) -> bool:
    return len(s) == 1 and s.isascii() and s.isalpha()


def split_list(path: str) -> list[str]:
    """Split a PATH-style list on ':'.

    On Windows, a drive letter followed by an element starting with a
    slash or backslash is kept together, so "C:/foo" stays whole.
    """
    if path == "":
        return [""]
    parts = path.split(":")
    if not _WINDOWS:
        return parts
    fixed: list[str] = []
    items = iter(enumerate(parts))
    for i, part in items:
        following = parts[i + 1] if i + 1 < len(parts) else None
        if _is_drive_letter(part) and following and following[0] in "/\\":
            fixed.append(part + ":" + following)
            next(items, None)
        else:
            fixed.append(part)
    return fixed


def win_has_ext(file: str) -> bool:
    """Report whether the last path element of file has an extension."""
    dot = file.rfind(".")
    if dot < 0:
        return False
    last_sep = max(file.rfind(sep) for sep in ":\\/")
    return last_sep < dot


def path_exts(env: Mapping[str, str]) -> list[str]:
    """Return the executable extensions to try, from PATHEXT on Windows.

    On other systems the list is empty.
    """
    if not _WINDOWS:
        return []
    pathext = env.get("PATHEXT", "")
    if not pathext:
        return list(_DEFAULT_WINDOWS_EXTS)
    exts = []
    for ext in pathext.lower().split(";"):
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        exts.append(ext)
    return exts


def check_stat(dir: str, file: str) -> str:
    """Return the path of file, relative to dir, if it is an executable file.

    Raises LookPathError otherwise.
    """
    if not os.path.isabs(file):
        file = _join(dir, file)
    try:
        info = os.stat(file)
    except OSError as exc:
        raise LookPathError(str(exc)) from exc
    if stat.S_ISDIR(info.st_mode):
        raise LookPathError("is a directory")
    if not _WINDOWS and info.st_mode & 0o111 == 0:
        raise LookPathError("permission denied")
    return file


def find_executable(dir: str, file: str, exts: list[str]) -> str:
    """Find file as an executable, trying each extension in exts if given."""
    if not exts:
        return check_stat(dir, file)
    if win_has_ext(file):
        try:
            return check_stat(dir, file)
        except LookPathError:
            pass
    for ext in exts:
        try:
            return check_stat(dir, file + ext)
        except LookPathError:
            continue
    raise LookPathError("not found")


def look_path_dir(cwd: str, env: Mapping[str, str], file: str) -> str:
    """Find an executable named file using PATH from env, relative to cwd.

    Raises LookPathError if nothing suitable is found.
    """
    path_list = split_list(env.get("PATH", ""))
    chars = ":\\/" if _WINDOWS else "/"
    exts = path_exts(env)
    if any(ch in file for ch in chars):
        return find_executable(cwd, file, exts)
    for elem in path_list:
        if elem in ("", "."):
            candidate = "." + os.sep + file
        else:
            candidate = _join(elem, file)
        try:
            return find_executable(cwd, candidate, exts)
        except LookPathError:
            continue
    raise LookPathError(f'"{file}": executable file not found in $PATH')


def look_path(env: Mapping[str, str], file: str) -> str:
    """Like look_path_dir, using the PWD variable of env as the directory."""
    return look_path_dir(env.get("PWD", ""), env, file)