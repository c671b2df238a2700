"""temporal-rbac — Time-windowed role hierarchy for access-control engines.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> from temporal_rbac import SessionRoleManager
>>> rm = SessionRoleManager()
>>> rm.add_link("alice", "admin", "2020-01-01", "2020-12-31")
>>> rm.has_link("alice", "admin", "2020-06-01")
True
>>> rm.has_link("alice", "admin", "2021-01-01")
False
"""
from __future__ import annotations

# Edges and records
from temporal_rbac.session.window import RequestTime, Session, TimeWindow
from temporal_rbac.role.record import Role
from temporal_rbac.role.traversal import has_valid_session

# Storage
from temporal_rbac.storage.base import RoleStore
from temporal_rbac.storage.memory import InMemoryRoleStore

# Managers
from temporal_rbac.rbac.base import RoleManager
from temporal_rbac.rbac.config import ManagerConfig
from temporal_rbac.rbac.manager import InvalidTemporalArgumentsError, SessionRoleManager
from temporal_rbac.rbac.factory import (
    create_role_manager,
    role_manager_registry,
    session_role_manager,
)

# Plugins
from temporal_rbac.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # Edges and records
    "RequestTime",
    "Role",
    "Session",
    "TimeWindow",
    "has_valid_session",
    # Storage
    "InMemoryRoleStore",
    "RoleStore",
    # Managers
    "InvalidTemporalArgumentsError",
    "ManagerConfig",
    "RoleManager",
    "SessionRoleManager",
    "create_role_manager",
    "role_manager_registry",
    "session_role_manager",
    # Plugins
    "PluginAlreadyRegisteredError",
    "PluginNotFoundError",
    "PluginRegistry",
]
