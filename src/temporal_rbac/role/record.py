"""Role records.

A role is a named node owning an ordered list of outbound ``Session``
edges.  Edges reference their target by arena id, so a role never holds a
pointer to another role object.

Classes
-------
- Role  — named node with its outbound sessions
"""
from __future__ import annotations

from dataclasses import dataclass, field

from temporal_rbac.session.window import Session


@dataclass
class Role:
    """A named node in the role hierarchy.

    Parameters
    ----------
    role_id:
        Arena id assigned by the owning store.  Stable for the store's
        lifetime.
    name:
        Unique role name within the owning store.
    sessions:
        Outbound edges in insertion order.  Duplicates and overlapping
        windows to the same target are kept as-is.
    """

    role_id: int
    name: str
    sessions: list[Session] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_session(self, session: Session) -> None:
        """Append ``session`` to this role's outbound edges."""
        self.sessions.append(session)

    def delete_sessions(self, target_id: int) -> int:
        """Remove every session pointing at ``target_id``.

        The time window is not considered.  Remaining sessions keep their
        relative order.

        Parameters
        ----------
        target_id:
            Arena id of the target whose edges should be dropped.

        Returns
        -------
        int
            Number of sessions removed.
        """
        before = len(self.sessions)
        self.sessions[:] = [s for s in self.sessions if s.target_id != target_id]
        return before - len(self.sessions)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def session_targets(self) -> list[int]:
        """Return the target ids of all direct sessions, ignoring time."""
        return [session.target_id for session in self.sessions]

    def has_direct_role(self, target_id: int) -> bool:
        """Return True if any direct session targets ``target_id``."""
        return any(session.target_id == target_id for session in self.sessions)

    def active_sessions(self, request_time: str) -> list[Session]:
        """Return the sessions active at ``request_time``, in order."""
        return [s for s in self.sessions if s.is_active(request_time)]

    def __repr__(self) -> str:
        return f"Role(name={self.name!r}, sessions={len(self.sessions)})"
