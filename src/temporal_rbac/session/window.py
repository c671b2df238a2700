"""Time-windowed inheritance edges and their typed argument structures.

Timestamps are plain strings compared lexicographically.  Callers must use
a format whose lexicographic order matches chronological order, such as
zero-padded ISO-8601 (``"2020-01-01"`` or ``"2020-01-01T08:30:00Z"``).

Classes
-------
- Session      — a directed, time-bounded edge to another role
- TimeWindow   — the ``(start, end)`` pair carried by ``add_link``
- RequestTime  — the single timestamp carried by ``has_link``
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """A directed inheritance edge valid during ``[start_time, end_time]``.

    Parameters
    ----------
    target_id:
        Arena id of the role this edge points at.
    start_time:
        First instant (inclusive) at which the edge is active.
    end_time:
        Last instant (inclusive) at which the edge is active.
    """

    target_id: int
    start_time: str
    end_time: str

    def is_active(self, request_time: str) -> bool:
        """Return True if ``request_time`` falls inside this edge's window."""
        return self.start_time <= request_time <= self.end_time


@dataclass(frozen=True)
class TimeWindow:
    """Validity window supplied when creating a link.

    Parameters
    ----------
    start:
        Inclusive start timestamp.
    end:
        Inclusive end timestamp.
    """

    start: str
    end: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> TimeWindow | None:
        """Build a window from a variadic ``domain`` argument list.

        Returns None unless exactly two values were supplied.
        """
        if len(args) != 2:
            return None
        start, end = args
        return cls(start=start, end=end)


@dataclass(frozen=True)
class RequestTime:
    """The point in time at which a containment query is evaluated."""

    value: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> RequestTime | None:
        """Build a request time from a variadic argument list.

        Returns None unless exactly one value was supplied.
        """
        if len(args) != 1:
            return None
        return cls(value=args[0])
