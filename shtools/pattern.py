"""Shell pattern matching notation (wildcards, globbing) to regular expressions."""

from __future__ import annotations

import enum
import re

__all__ = ["Mode", "PatternError", "regexp", "has_meta", "quote_meta"]


class Mode(enum.IntFlag):
    """Options that change how patterns are interpreted."""

    SHORTEST = 1  # prefer the shortest match
    FILENAMES = 2  # "*" and "?" don't match slashes; only "**" does
    BRACES = 4  # support "{a,b}" and "{1..4}"


class PatternError(ValueError):
    """Raised when a shell pattern is malformed."""


# Characters that must be escaped to appear literally in a regular expression.
_RX_META = frozenset("\\.+*?()|[]{}^$")

# Any of these characters means the pattern cannot be returned unchanged.
_NEEDS_WORK = frozenset("*?[\\.+()|]{}^$")

_NUM_RANGE = re.compile(r"([+-]?[0-9]+)\.\.([+-]?[0-9]+)\}")

_CHAR_CLASSES = frozenset(
    {
        "alnum", "alpha", "ascii", "blank", "cntrl", "digit", "graph",
        "lower", "print", "punct", "space", "upper", "word", "xdigit",
    }
)

_UNCLOSED_BRACKET = "[ was not matched with a closing ]"


def _rx_quote(text: str) -> str:
    return "".join("\\" + ch if ch in _RX_META else ch for ch in text)


def _char_class(s: str) -> str:
    if s.startswith("[[.") or s.startswith("[[="):
        raise PatternError("collating features not available")
    if not s.startswith("[[:"):
        return ""
    name = s[3:]
    end = name.find(":]]")
    if end < 0:
        raise PatternError("[[: was not matched with a closing :]]")
    name = name[:end]
    if name not in _CHAR_CLASSES:
        raise PatternError(f'invalid character class: "{name}"')
    return s[: len(name) + 6]


def regexp(pat: str, mode: Mode | int = Mode(0)) -> str:
    """Translate a shell pattern into a regular expression.

    Raises PatternError if the pattern is malformed.
    """
    mode = Mode(mode)
    if not any(ch in _NEEDS_WORK for ch in pat):
        return pat

    closing_braces: list[int] = []
    out: list[str] = []
    n = len(pat)
    i = 0
    while i < n:
        c = pat[i]
        if c == "*":
            if mode & Mode.FILENAMES:
                if pat.startswith("**/", i):
                    out.append("(.*/|)")
                    i += 2
                elif pat.startswith("**", i):
                    out.append(".*")
                    i += 1
                else:
                    out.append("[^/]*")
            else:
                out.append(".*")
            if mode & Mode.SHORTEST:
                out.append("?")
        elif c == "?":
            out.append("[^/]" if mode & Mode.FILENAMES else ".")
        elif c == "\\":
            i += 1
            if i >= n:
                raise PatternError("\\ at end of pattern")
            out.append(_rx_quote(pat[i]))
        elif c == "[":
            name = _char_class(pat[i:])
            if name:
                out.append(name)
                i += len(name)
                continue
            if mode & Mode.FILENAMES:
                slash_first = False
                for ch in pat[i:]:
                    if ch == "]":
                        break
                    if ch == "/":
                        slash_first = True
                        break
                if slash_first:
                    out.append("\\[")
                    i += 1
                    continue
            out.append("[")
            i += 1
            if i >= n:
                raise PatternError(_UNCLOSED_BRACKET)
            if pat[i] in "!^":
                out.append("^")
                i += 1
                if i >= n:
                    raise PatternError(_UNCLOSED_BRACKET)
            if pat[i] == "]":
                out.append("]")
                i += 1
                if i >= n:
                    raise PatternError(_UNCLOSED_BRACKET)
            range_start: str | None = None
            while i < n:
                ch = pat[i]
                out.append(ch)
                if ch == "\\":
                    i += 1
                    if i < n:
                        out.append(pat[i])
                    i += 1
                    continue
                if ch == "]":
                    break
                if range_start is not None and range_start > ch:
                    raise PatternError(f"invalid range: {range_start}-{ch}")
                range_start = pat[i - 1] if ch == "-" else None
                i += 1
            if i >= n:
                raise PatternError(_UNCLOSED_BRACKET)
        elif c == "{":
            if not mode & Mode.BRACES:
                out.append("\\{")
                i += 1
                continue
            level = 1
            commas = False
            opened = False
            j = i + 1
            while j < n:
                cj = pat[j]
                if cj == "{":
                    level += 1
                elif cj == ",":
                    commas = True
                elif cj == "\\":
                    j += 1
                elif cj == "}":
                    level -= 1
                    if level <= 0:
                        if commas:
                            closing_braces.append(j)
                            out.append("(?:")
                            opened = True
                        break
                j += 1
            if opened:
                i += 1
                continue
            m = _NUM_RANGE.match(pat, i + 1)
            if m:
                start, end = int(m.group(1)), int(m.group(2))
                if start > end:
                    raise PatternError(f'invalid range: "{m.group(0)}"')
                out.append("(?:" + "|".join(str(k) for k in range(start, end + 1)) + ")")
                i += len(m.group(0))
            else:
                out.append("\\{")
        elif c == ",":
            out.append("|" if closing_braces else ",")
        elif c == "}":
            if closing_braces and closing_braces[-1] == i:
                out.append(")")
                closing_braces.pop()
            else:
                out.append("\\}")
        else:
            out.append(_rx_quote(c))
        i += 1
    return "".join(out)


def has_meta(pat: str, mode: Mode | int = Mode(0)) -> bool:
    """Report whether the pattern holds any unescaped metacharacters."""
    mode = Mode(mode)
    chars = iter(pat)
    for ch in chars:
        if ch == "\\":
            next(chars, None)
        elif ch in "*?[":
            return True
        elif ch == "{" and mode & Mode.BRACES:
            return True
    return False


def quote_meta(pat: str, mode: Mode | int = Mode(0)) -> str:
    """Quote all pattern metacharacters so the result matches the literal text."""
    mode = Mode(mode)
    special = set("*?[\\")
    if mode & Mode.BRACES:
        special.add("{")
    return "".join("\\" + ch if ch in special else ch for ch in pat)