"""Depth-bounded containment search over the role graph.

The search walks active sessions depth-first, in insertion order, and
stops at the first session that reaches the target.  The remaining depth
budget is the only guard against cycles; no visited set is kept, so a
cyclic graph is explored until the budget runs out.

Functions
---------
- has_valid_session  — decide whether ``role`` reaches a target at a time
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from temporal_rbac.role.record import Role
from temporal_rbac.session.window import Session

if TYPE_CHECKING:
    from temporal_rbac.storage.base import RoleStore


def has_valid_session(
    store: RoleStore,
    role: Role,
    target_id: int,
    max_depth: int,
    request_time: str,
) -> bool:
    """Return True if ``role`` reaches ``target_id`` through active sessions.

    A session is active when ``start_time <= request_time <= end_time``.
    Paths longer than ``max_depth`` hops are not considered.

    Parameters
    ----------
    store:
        Store used to resolve session targets to roles.
    role:
        The role the search starts from.
    target_id:
        Arena id of the role being looked for.
    max_depth:
        Maximum number of hops.  Zero always yields False.
    request_time:
        Timestamp at which session validity is evaluated.

    Returns
    -------
    bool
    """
    if max_depth == 0:
        return False

    # Each frame is the remaining active sessions of one role plus the budget
    # left for the edges taken out of it.
    stack: list[tuple[Iterator[Session], int]] = [
        (iter(role.active_sessions(request_time)), max_depth)
    ]
    while stack:
        sessions, remaining = stack[-1]
        session = next(sessions, None)
        if session is None:
            stack.pop()
            continue
        if session.target_id == target_id:
            return True
        if remaining > 1:
            child = store.by_id(session.target_id)
            stack.append((iter(child.active_sessions(request_time)), remaining - 1))
    return False
