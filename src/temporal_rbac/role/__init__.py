"""Role records and the containment search."""
from __future__ import annotations

from temporal_rbac.role.record import Role
from temporal_rbac.role.traversal import has_valid_session

__all__ = ["Role", "has_valid_session"]
