"""Named constructors for role managers.

A policy engine looks role managers up by name and builds them with no
arguments.  ``SessionRoleManager`` is registered as ``"session"``; other
implementations can be added with ``role_manager_registry.register`` or
through the ``temporal_rbac.role_managers`` entry-point group.

Functions
---------
- session_role_manager  — zero-argument constructor for the default manager
- create_role_manager   — build a registered role manager by name
"""
from __future__ import annotations

from collections.abc import Callable

from temporal_rbac.plugins.registry import PluginRegistry
from temporal_rbac.rbac.base import RoleManager
from temporal_rbac.rbac.config import DEFAULT_MAX_HIERARCHY_LEVEL
from temporal_rbac.rbac.manager import SessionRoleManager

ENTRYPOINT_GROUP: str = "temporal_rbac.role_managers"

role_manager_registry: PluginRegistry[RoleManager] = PluginRegistry(
    RoleManager, "role-managers"
)
role_manager_registry.register_class("session", SessionRoleManager)

_entrypoints_loaded = False


def session_role_manager() -> Callable[[], RoleManager]:
    """Return a constructor building a ``SessionRoleManager`` of depth 10."""

    def construct() -> RoleManager:
        return SessionRoleManager(DEFAULT_MAX_HIERARCHY_LEVEL)

    return construct


def create_role_manager(name: str = "session") -> RoleManager:
    """Instantiate the role manager registered under ``name``.

    Entry points are discovered on the first call.

    Raises
    ------
    PluginNotFoundError
        If nothing is registered under ``name``.
    """
    global _entrypoints_loaded
    if not _entrypoints_loaded:
        role_manager_registry.load_entrypoints(ENTRYPOINT_GROUP)
        _entrypoints_loaded = True
    return role_manager_registry.get(name)()
