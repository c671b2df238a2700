"""Session edges and temporal argument types."""
from __future__ import annotations

from temporal_rbac.session.window import RequestTime, Session, TimeWindow

__all__ = ["RequestTime", "Session", "TimeWindow"]
