"""Plugin subsystem for temporal-rbac.

The registry module provides the decorator-based registration surface.
Third-party role managers register via ``importlib.metadata``
entry-points under the "temporal_rbac.role_managers" group.

Example
-------
Declare a role manager in pyproject.toml:

.. code-block:: toml

    [project.entry-points."temporal_rbac.role_managers"]
    my_manager = "my_package.managers:MyRoleManager"
"""
from __future__ import annotations

from temporal_rbac.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginAlreadyRegisteredError", "PluginNotFoundError", "PluginRegistry"]
