"""Configuration for ``SessionRoleManager``.

Classes
-------
- ManagerConfig  — validated manager settings, loadable from YAML
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_MAX_HIERARCHY_LEVEL: int = 10


class ManagerConfig(BaseModel):
    """Configuration parameters for ``SessionRoleManager``.

    Parameters
    ----------
    max_hierarchy_level:
        Maximum number of inheritance hops a containment query follows.
        Also the only protection against cycles.  Default: 10.
    strict_arguments:
        When False (default), calls with the wrong number of temporal
        arguments are silent no-ops returning False.  When True they raise
        ``InvalidTemporalArgumentsError`` instead.
    log_queries:
        Emit a DEBUG record for every ``has_link`` decision.
    """

    max_hierarchy_level: int = Field(default=DEFAULT_MAX_HIERARCHY_LEVEL, ge=0)
    strict_arguments: bool = False
    log_queries: bool = False

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_mapping(cls, data: dict[str, object] | None) -> ManagerConfig:
        """Validate ``data`` into a config.  ``None`` yields the defaults."""
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml(cls, path: str | Path) -> ManagerConfig:
        """Load a config from a YAML file.

        Parameters
        ----------
        path:
            File holding a mapping of config keys.  An empty file yields
            the defaults.

        Raises
        ------
        ValueError
            If the document is not a mapping.
        """
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if raw is not None and not isinstance(raw, dict):
            raise ValueError(
                f"Config file {str(path)!r} must contain a mapping, got {type(raw).__name__}."
            )
        return cls.from_mapping(raw)
