"""In-memory role store.

Roles live in a list (the arena) and are addressed by their index; a dict
maps names to indices.  All data is lost when the process exits.

Classes
-------
- InMemoryRoleStore  — arena-backed ephemeral store
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from temporal_rbac.role.record import Role
from temporal_rbac.storage.base import RoleStore

logger = logging.getLogger(__name__)


class InMemoryRoleStore(RoleStore):
    """Ephemeral, in-process role store.

    Role ids are positions in the arena and never change, since roles are
    never removed.  Iteration yields roles in creation order.
    """

    def __init__(self) -> None:
        self._roles: list[Role] = []
        self._index: dict[str, int] = {}

    # ------------------------------------------------------------------
    # RoleStore interface
    # ------------------------------------------------------------------

    def exists(self, name: str) -> bool:
        """Return True if ``name`` has been created."""
        return name in self._index

    def get_or_create(self, name: str) -> Role:
        """Return the role for ``name``, creating it on first reference."""
        role_id = self._index.get(name)
        if role_id is not None:
            return self._roles[role_id]
        role = Role(role_id=len(self._roles), name=name)
        self._roles.append(role)
        self._index[name] = role.role_id
        logger.debug("InMemoryRoleStore: created role %r (id=%d)", name, role.role_id)
        return role

    def get(self, name: str) -> Role | None:
        """Return the role for ``name`` without creating it."""
        role_id = self._index.get(name)
        return None if role_id is None else self._roles[role_id]

    def by_id(self, role_id: int) -> Role:
        """Return the role stored at ``role_id``.

        Raises
        ------
        KeyError
            If ``role_id`` is outside the arena.
        """
        if not 0 <= role_id < len(self._roles):
            raise KeyError(f"Role id {role_id!r} not found in InMemoryRoleStore.")
        return self._roles[role_id]

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._roles))

    def __len__(self) -> int:
        return len(self._roles)

    # ------------------------------------------------------------------
    # Extras
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"InMemoryRoleStore(roles={len(self._roles)})"
