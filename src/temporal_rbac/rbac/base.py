"""Capability contract consumed by a policy-enforcement engine.

The host engine drives role managers through six operations.  The
variadic ``domain`` slot is generic on purpose: each implementation
decides what the extra string arguments mean.

Classes
-------
- RoleManager  — abstract base for all role managers
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class RoleManager(ABC):
    """Protocol for role-link mutation and containment queries."""

    @abstractmethod
    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        """Record that ``name1`` inherits ``name2``.

        Parameters
        ----------
        name1:
            The inheriting role (or user).
        name2:
            The inherited role.
        domain:
            Implementation-specific qualifiers.
        """

    @abstractmethod
    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        """Remove the inheritance of ``name2`` by ``name1``."""

    @abstractmethod
    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        """Return True if ``name1`` contains ``name2``.

        Returns
        -------
        bool
        """

    @abstractmethod
    def get_roles(self, name: str, *domain: str) -> list[str]:
        """Return the roles directly inherited by ``name``."""

    @abstractmethod
    def get_users(self, name: str) -> list[str]:
        """Return the names that directly inherit ``name``."""

    @abstractmethod
    def print_roles(self) -> list[str]:
        """Log a human-readable dump of every role and return its lines."""
