"""Role manager contract, configuration and the temporal implementation."""
from __future__ import annotations

from temporal_rbac.rbac.base import RoleManager
from temporal_rbac.rbac.config import ManagerConfig
from temporal_rbac.rbac.factory import (
    create_role_manager,
    role_manager_registry,
    session_role_manager,
)
from temporal_rbac.rbac.manager import InvalidTemporalArgumentsError, SessionRoleManager

__all__ = [
    "InvalidTemporalArgumentsError",
    "ManagerConfig",
    "RoleManager",
    "SessionRoleManager",
    "create_role_manager",
    "role_manager_registry",
    "session_role_manager",
]
