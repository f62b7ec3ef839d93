"""Shell and bash options, with the "set" and "shopt" option handling."""

from __future__ import annotations

from typing import IO

from shtools.flags import FlagParser

__all__ = ["OptionError", "ShellOptions", "format_opt_line"]

# Sorted alphabetically by name; a space marks options with no flag form.
_SHELL_OPTS: tuple[tuple[str, str], ...] = (
    ("a", "allexport"),
    ("e", "errexit"),
    ("n", "noexec"),
    ("f", "noglob"),
    ("u", "nounset"),
    (" ", "pipefail"),
)

# Sorted alphabetically by name.
_BASH_OPTS: tuple[str, ...] = (
    "expand_aliases",
    "globstar",
    "nullglob",
)


class OptionError(ValueError):
    """Raised for an unknown option or an invalid option flag.

    The status attribute holds the exit status the shell reports for it.
    """

    def __init__(self, message: str, status: int = 2) -> None:
        super().__init__(message)
        self.status = status


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_opt_line(name: str, enabled: bool) -> str:
    """Format one line of an option listing, such as "errexit\\ton\\n"."""
    return f"{name}\t{'on' if enabled else 'off'}\n"


class ShellOptions:
    """The on/off state of the POSIX shell options and the bash options."""

    def __init__(self) -> None:
        self._shell = {name: False for _, name in _SHELL_OPTS}
        self._bash = {name: False for name in _BASH_OPTS}

    def __repr__(self) -> str:
        enabled = [n for n, v in {**self._shell, **self._bash}.items() if v]
        return f"ShellOptions(enabled={enabled!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShellOptions):
            return NotImplemented
        return self._shell == other._shell and self._bash == other._bash

    def by_flag(self, flag: str) -> str | None:
        """Return the name of the shell option with the given flag letter."""
        for letter, name in _SHELL_OPTS:
            if letter == flag:
                return name
        return None

    def by_name(self, name: str, bash: bool = False) -> str | None:
        """Return name if it is a known option, looking at bash options too if asked."""
        if bash and name in self._bash:
            return name
        if name in self._shell:
            return name
        return None

    def _table(self, name: str) -> dict[str, bool]:
        return self._bash if name in self._bash else self._shell

    def set(self, name: str, enabled: bool, bash: bool = False) -> None:
        """Turn an option on or off; raises OptionError if it is unknown."""
        found = self.by_name(name, bash)
        if found is None:
            raise OptionError(f"invalid option: {_quote(name)}")
        self._table(found)[found] = bool(enabled)

    def get(self, name: str, bash: bool = False) -> bool:
        """Report whether an option is on; raises OptionError if it is unknown."""
        found = self.by_name(name, bash)
        if found is None:
            raise OptionError(f"invalid option: {_quote(name)}")
        return self._table(found)[found]

    def apply_params(
        self, args: list[str], out: IO[str] | None = None
    ) -> list[str] | None:
        """Apply options as the "set" builtin does and return new parameters.

        Returns None when the current parameters should be kept, which is
        the case when no arguments remain and "--" was not given. Listings
        from "-o" and "+o" without a value are written to out.
        """
        fp = FlagParser(args)
        while fp.more():
            flag = fp.flag()
            enable = flag[0] == "-"
            if len(flag) < 2:
                raise OptionError(f"invalid option: {_quote(flag)}")
            if flag[1] != "o":
                name = self.by_flag(flag[1])
                if name is None:
                    raise OptionError(f"invalid option: {_quote(flag)}")
                self._shell[name] = enable
                continue
            value = fp.value()
            if value == "":
                for name, state in self._shell.items():
                    if out is None:
                        continue
                    if enable:
                        out.write(format_opt_line(name, state))
                    else:
                        out.write(f"set {'-o' if state else '+o'} {name}\n")
                continue
            name = self.by_name(value, False)
            if name is None:
                raise OptionError(f"invalid option: {_quote(value)}")
            self._shell[name] = enable
        remaining = fp.args()
        return list(remaining) if remaining is not None else None

    def shopt(self, args: list[str], out: IO[str] | None = None) -> None:
        """Show, set or unset options as the "shopt" builtin does.

        Raises OptionError with status 2 for a bad flag and status 1 for
        an unknown option name.
        """
        mode = ""
        posix_opts = False
        fp = FlagParser(args)
        while fp.more():
            flag = fp.flag()
            if flag in ("-s", "-u"):
                mode = flag
            elif flag == "-o":
                posix_opts = True
            elif flag in ("-p", "-q"):
                raise OptionError(f"unhandled shopt flag: {flag}", status=2)
            else:
                raise OptionError(f"invalid option {_quote(flag)}", status=2)
        names = fp.args() or []
        if not names:
            table = self._shell if posix_opts else self._bash
            if out is not None:
                for name, state in table.items():
                    out.write(format_opt_line(name, state))
            return
        for arg in names:
            found = self.by_name(arg, not posix_opts)
            if found is None:
                raise OptionError(f"invalid option name {_quote(arg)}", status=1)
            if mode:
                self._table(found)[found] = mode == "-s"
            elif out is not None:
                out.write(format_opt_line(arg, self._table(found)[found]))