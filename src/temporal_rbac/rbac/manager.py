"""Temporal role manager.

Provides ``SessionRoleManager``, a ``RoleManager`` whose links are only
valid during a time window.  The generic ``domain`` argument slot carries
the window: ``add_link`` takes ``(start, end)`` and ``has_link`` takes a
single request time.

Classes
-------
- InvalidTemporalArgumentsError  — malformed temporal arguments (strict mode)
- SessionRoleManager             — time-windowed role hierarchy
"""
from __future__ import annotations

import logging

from temporal_rbac.rbac.base import RoleManager
from temporal_rbac.rbac.config import ManagerConfig
from temporal_rbac.role.record import Role
from temporal_rbac.role.traversal import has_valid_session
from temporal_rbac.session.window import RequestTime, Session, TimeWindow
from temporal_rbac.storage.base import RoleStore
from temporal_rbac.storage.memory import InMemoryRoleStore

logger = logging.getLogger(__name__)


class InvalidTemporalArgumentsError(ValueError):
    """Raised in strict mode when a call carries the wrong number of timestamps."""

    def __init__(self, operation: str, expected: int, received: int) -> None:
        self.operation = operation
        self.expected = expected
        self.received = received
        super().__init__(
            f"{operation} expects {expected} temporal argument(s), got {received}."
        )


class SessionRoleManager(RoleManager):
    """Role hierarchy where each inheritance edge has a validity window.

    Roles are created on first reference.  Containment queries follow only
    the sessions active at the request time and give up after
    ``max_hierarchy_level`` hops.

    The manager performs no locking.  Mutations concurrent with other
    calls must be serialised by the caller.

    Parameters
    ----------
    max_hierarchy_level:
        Depth bound for containment queries.  Overrides the value in
        ``config`` when both are given.  Defaults to 10.
    config:
        Optional full configuration.  Defaults to ``ManagerConfig()``.
    store:
        Optional role store.  Defaults to a fresh ``InMemoryRoleStore``.
    """

    def __init__(
        self,
        max_hierarchy_level: int | None = None,
        *,
        config: ManagerConfig | None = None,
        store: RoleStore | None = None,
    ) -> None:
        config = config or ManagerConfig()
        if max_hierarchy_level is not None:
            config = ManagerConfig.model_validate(
                {**config.model_dump(), "max_hierarchy_level": max_hierarchy_level}
            )
        self._config = config
        self._store = store if store is not None else InMemoryRoleStore()

    @property
    def config(self) -> ManagerConfig:
        """The configuration this manager was built with."""
        return self._config

    @property
    def max_hierarchy_level(self) -> int:
        """Depth bound shared by every query on this manager."""
        return self._config.max_hierarchy_level

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        """Let ``name1`` inherit ``name2`` during the window ``domain``.

        ``domain`` must be exactly ``(start, end)``.  Any other arity is a
        no-op (or ``InvalidTemporalArgumentsError`` in strict mode).
        Duplicate windows are appended, not merged.
        """
        window = TimeWindow.from_args(domain)
        if window is None:
            self._reject("add_link", expected=2, received=len(domain))
            return

        role1 = self._store.get_or_create(name1)
        role2 = self._store.get_or_create(name2)
        role1.add_session(Session(role2.role_id, window.start, window.end))
        logger.debug(
            "SessionRoleManager: linked %r -> %r [%s, %s]",
            name1,
            name2,
            window.start,
            window.end,
        )

    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        """Remove every session from ``name1`` to ``name2``.

        All windows are removed; ``domain`` is accepted for interface
        symmetry and ignored.  No-op unless both roles already exist.
        """
        role1 = self._store.get(name1)
        role2 = self._store.get(name2)
        if role1 is None or role2 is None:
            return
        removed = role1.delete_sessions(role2.role_id)
        logger.debug(
            "SessionRoleManager: removed %d session(s) %r -> %r", removed, name1, name2
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        """Return True if ``name1`` contains ``name2`` at the request time.

        ``domain`` must be exactly one request timestamp; otherwise the
        answer is False (or ``InvalidTemporalArgumentsError`` in strict
        mode).  A name always contains itself, even if never referenced.
        Unknown names contain nothing.

        Returns
        -------
        bool
        """
        request = RequestTime.from_args(domain)
        if request is None:
            self._reject("has_link", expected=1, received=len(domain))
            return False

        if name1 == name2:
            return True

        role1 = self._store.get(name1)
        role2 = self._store.get(name2)
        if role1 is None or role2 is None:
            return False

        result = has_valid_session(
            self._store,
            role1,
            role2.role_id,
            self.max_hierarchy_level,
            request.value,
        )
        if self._config.log_queries:
            logger.debug(
                "SessionRoleManager: has_link(%r, %r, %r) -> %s",
                name1,
                name2,
                request.value,
                result,
            )
        return result

    def get_roles(self, name: str, *domain: str) -> list[str]:
        """Return the direct targets of ``name``'s sessions.

        Time validity is not checked and ``domain`` is ignored.  Unknown
        names yield an empty list.
        """
        role = self._store.get(name)
        if role is None:
            return []
        return [self._store.name_of(target_id) for target_id in role.session_targets()]

    def get_users(self, name: str) -> list[str]:
        """Return the roles holding a direct session to ``name``.

        Scans every role; time validity is not checked.  Order follows the
        store's iteration order.
        """
        target = self._store.get(name)
        if target is None:
            return []
        return [
            role.name for role in self._store if role.has_direct_role(target.role_id)
        ]

    def get_sessions(self, name: str) -> list[tuple[str, str, str]]:
        """Return ``(target, start, end)`` for each direct session of ``name``."""
        role = self._store.get(name)
        if role is None:
            return []
        return [
            (self._store.name_of(s.target_id), s.start_time, s.end_time)
            for s in role.sessions
        ]

    def list_roles(self) -> list[str]:
        """Return every known role name in store iteration order."""
        return [role.name for role in self._store]

    def has_role(self, name: str) -> bool:
        """Return True if ``name`` has been referenced by a mutation."""
        return self._store.exists(name)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def print_roles(self) -> list[str]:
        """Log one line per role listing its sessions and their end times.

        Lines look like ``"alice < admin (until: 2020-12-31), dev (until:
        2021-06-30)"``.  Time validity is not checked.  Role order is
        unspecified by the contract.

        Returns
        -------
        list[str]
            The logged lines.
        """
        lines = [self._describe(role) for role in self._store]
        for line in lines:
            logger.info(line)
        return lines

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"SessionRoleManager(roles={len(self._store)}, "
            f"max_hierarchy_level={self.max_hierarchy_level})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _describe(self, role: Role) -> str:
        sessions = ", ".join(
            f"{self._store.name_of(s.target_id)} (until: {s.end_time})"
            for s in role.sessions
        )
        return f"{role.name} < {sessions}"

    def _reject(self, operation: str, *, expected: int, received: int) -> None:
        if self._config.strict_arguments:
            raise InvalidTemporalArgumentsError(operation, expected, received)
        logger.debug(
            "SessionRoleManager: ignoring %s with %d temporal argument(s)",
            operation,
            received,
        )
