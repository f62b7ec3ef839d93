"""Parsing of builtin flags, getopts state, and lenient integer parsing."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple

__all__ = ["FlagParser", "Getopts", "GetoptsResult", "atoi"]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MAX = 2**63 - 1
_INT_MIN = -(2**63)


def atoi(s: str) -> int:
    """Parse a decimal integer the way shells do, giving 0 on invalid input.

    Values out of the 64-bit range are clamped to its limits.
    """
    if not _INT_RE.fullmatch(s):
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(s)))


class FlagParser:
    """Parses flags such as "-a", "+a" and combined forms like "-ab".

    Parsing stops at the first argument that is not a flag, or after "--".
    """

    def __init__(self, remaining: Sequence[str] | None = None) -> None:
        self._current = ""
        self._remaining: list[str] | None = (
            list(remaining) if remaining is not None else None
        )

    def more(self) -> bool:
        """Report whether another flag is waiting to be read."""
        if self._current:
            return True
        if not self._remaining:
            self._remaining = None
            return False
        arg = self._remaining[0]
        if arg == "--":
            self._remaining = self._remaining[1:]
            return False
        return bool(arg) and arg[0] in "-+"

    def flag(self) -> str:
        """Return the next flag, splitting "-ab" into "-a" then "-b"."""
        if self._current:
            arg = self._current
            self._current = ""
        else:
            if not self._remaining:
                raise IndexError("no flag left to read")
            arg = self._remaining[0]
            self._remaining = self._remaining[1:]
        if len(arg) > 2:
            self._current = arg[:1] + arg[2:]
            arg = arg[:2]
        return arg

    def value(self) -> str:
        """Consume and return the next argument, or "" if there is none."""
        if not self._remaining:
            return ""
        arg = self._remaining[0]
        self._remaining = self._remaining[1:]
        return arg

    def args(self) -> list[str] | None:
        """Return the arguments left after the flags.

        None means no arguments were left and "--" was not given.
        """
        return self._remaining

    def __iter__(self) -> Iterator[str]:
        while self.more():
            yield self.flag()


class GetoptsResult(NamedTuple):
    """One step of getopts: the option, its argument, and whether parsing ended."""

    opt: str
    optarg: str
    done: bool


@dataclass
class Getopts:
    """The position state of the getopts builtin."""

    argidx: int = 0
    runeidx: int = 0

    def next(self, optstr: str, args: Sequence[str]) -> GetoptsResult:
        """Advance to the next option in args, as described by optstr."""
        if not args or self.argidx >= len(args):
            return GetoptsResult("?", "", True)
        arg = args[self.argidx]
        if len(arg) < 2 or arg[0] != "-" or arg[1] == "-":
            return GetoptsResult("?", "", True)

        opts = arg[1:]
        opt = opts[self.runeidx]
        if self.runeidx + 1 < len(opts):
            self.runeidx += 1
        else:
            self.argidx += 1
            self.runeidx = 0

        i = optstr.find(opt)
        if i < 0:
            return GetoptsResult("?", opt, False)

        optarg = ""
        if i + 1 < len(optstr) and optstr[i + 1] == ":":
            if self.argidx >= len(args):
                return GetoptsResult(":", opt, False)
            optarg = args[self.argidx]
            self.argidx += 1
            self.runeidx = 0

        return GetoptsResult(opt, optarg, False)