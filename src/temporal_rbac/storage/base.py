"""Abstract base class for role stores.

A role store maps role names to ``Role`` records and hands out a stable
integer id per role.  Roles are created lazily on first reference and are
never deleted.

Classes
-------
- RoleStore  — abstract base for all stores
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from temporal_rbac.role.record import Role


class RoleStore(ABC):
    """Protocol for looking up and lazily creating roles.

    Store implementations must be safe for sequential (single-threaded)
    use.  Thread-safety is the responsibility of the caller when used from
    concurrent code.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True if a role called ``name`` has been created.

        Parameters
        ----------
        name:
            The role name to test.

        Returns
        -------
        bool
        """

    @abstractmethod
    def get_or_create(self, name: str) -> Role:
        """Return the role called ``name``, creating an empty one if needed.

        Idempotent; never fails.

        Parameters
        ----------
        name:
            The role name to fetch.

        Returns
        -------
        Role
            The existing or freshly created role.
        """

    @abstractmethod
    def get(self, name: str) -> Role | None:
        """Return the role called ``name`` or None if it does not exist.

        Unlike ``get_or_create`` this never creates a role.
        """

    @abstractmethod
    def by_id(self, role_id: int) -> Role:
        """Return the role with arena id ``role_id``.

        Raises
        ------
        KeyError
            If no role has that id.
        """

    @abstractmethod
    def __iter__(self) -> Iterator[Role]:
        """Iterate over all roles.  Order is implementation-defined."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of roles in the store."""

    def name_of(self, role_id: int) -> str:
        """Return the name of the role with arena id ``role_id``."""
        return self.by_id(role_id).name

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)
