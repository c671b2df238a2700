"""Role store subpackage.

All stores implement the ``RoleStore`` ABC.

Public surface
--------------
- RoleStore          — abstract base class
- InMemoryRoleStore  — arena of roles with a name index
"""
from __future__ import annotations

from temporal_rbac.storage.base import RoleStore
from temporal_rbac.storage.memory import InMemoryRoleStore

__all__ = ["InMemoryRoleStore", "RoleStore"]
