"""Exit statuses of shell commands carried as exceptions."""

from __future__ import annotations

__all__ = ["ExitStatus", "new_exit_status", "is_exit_status"]


class ExitStatus(Exception):
    """A non-zero exit status resulting from running a shell command."""

    def __init__(self, status: int) -> None:
        self.status = status & 0xFF
        super().__init__(self.status)

    def __str__(self) -> str:
        return f"exit status {self.status}"

    def __repr__(self) -> str:
        return f"ExitStatus({self.status})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExitStatus):
            return self.status == other.status
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ExitStatus, self.status))


def new_exit_status(status: int) -> ExitStatus:
    """Create an error carrying the given exit status, kept to one byte."""
    return ExitStatus(status)


def is_exit_status(err: BaseException | None) -> int | None:
    """Return the exit status carried by err or any exception it was raised from.

    Returns None when there is none.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, ExitStatus):
            return err.status
        seen.add(id(err))
        err = err.__cause__ or err.__context__
    return None