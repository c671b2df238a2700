"""Decorator-based plugin registry with entry-point discovery.

Classes
-------
- PluginNotFoundError           — lookup of an unregistered name
- PluginAlreadyRegisteredError  — second registration under one name
- PluginRegistry                — name-to-class registry for one base class
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginNotFoundError(KeyError):
    """Raised when a requested plugin name is not registered."""

    def __init__(self, plugin_name: str, registry_name: str) -> None:
        self.plugin_name = plugin_name
        self.registry_name = registry_name
        super().__init__(
            f"Plugin {plugin_name!r} is not registered in registry {registry_name!r}."
        )


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a plugin name is registered twice."""

    def __init__(self, plugin_name: str, registry_name: str) -> None:
        self.plugin_name = plugin_name
        self.registry_name = registry_name
        super().__init__(
            f"Plugin {plugin_name!r} is already registered in registry {registry_name!r}."
        )


class PluginRegistry(Generic[T]):
    """Registry mapping names to subclasses of ``base_class``.

    Parameters
    ----------
    base_class:
        Every registered class must subclass this.
    registry_name:
        Human-readable name used in log records and error messages.

    Example
    -------
    ::

        registry: PluginRegistry[RoleManager] = PluginRegistry(RoleManager, "role-managers")

        @registry.register("session")
        class SessionRoleManager(RoleManager):
            ...
    """

    def __init__(self, base_class: type[T], registry_name: str) -> None:
        self._base_class = base_class
        self._registry_name = registry_name
        self._plugins: dict[str, type[T]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``.

        The decorated class is returned unchanged.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name``.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already taken.
        TypeError
            If ``cls`` is not a subclass of the registry's base class.
        """
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._registry_name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} as {name!r}: it must be a subclass of "
                f"{self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug(
            "PluginRegistry %r: registered %r -> %s", self._registry_name, name, cls.__name__
        )

    def deregister(self, name: str) -> None:
        """Remove the plugin registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._registry_name)
        del self._plugins[name]
        logger.debug("PluginRegistry %r: deregistered %r", self._registry_name, name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._registry_name) from None

    def list_plugins(self) -> list[str]:
        """Return all registered names, sorted."""
        return sorted(self._plugins)

    # ------------------------------------------------------------------
    # Entry-point discovery
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> None:
        """Register every class advertised under the entry-point ``group``.

        Names already registered are skipped, so repeated calls are
        idempotent.  Entry points that fail to import, or that do not
        resolve to a subclass of the base class, are logged and skipped.
        """
        for entry_point in importlib.metadata.entry_points(group=group):
            if entry_point.name in self._plugins:
                logger.debug(
                    "PluginRegistry %r: %r already registered, skipping entry point",
                    self._registry_name,
                    entry_point.name,
                )
                continue
            try:
                cls = entry_point.load()
            except Exception:
                logger.exception(
                    "PluginRegistry %r: failed to load entry point %r",
                    self._registry_name,
                    entry_point.name,
                )
                continue
            try:
                self.register_class(entry_point.name, cls)
            except TypeError:
                logger.warning(
                    "PluginRegistry %r: entry point %r is not a %s subclass, skipping",
                    self._registry_name,
                    entry_point.name,
                    self._base_class.__name__,
                )

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"PluginRegistry(name={self._registry_name!r}, "
            f"base={self._base_class.__name__}, plugins={len(self._plugins)})"
        )
