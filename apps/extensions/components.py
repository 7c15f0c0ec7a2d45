# apps/extensions/components.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from django.conf import settings
from django.core.signals import setting_changed
from django.db import connections
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .conf import get_settings
from .errors import ConfigError

log = logging.getLogger("extensions.components")

Factory = Callable[[], Any]

_WATCHED_SETTINGS = {"EXTENSIONS", "DATABASES", "STATIC_ROOT", "STATIC_URL"}


def parse_definition(name: str, definition: Any) -> Tuple[str, Dict[str, Any]]:
    """
    Accepte:
      - "dotted.path.Class"
      - {"BACKEND": "dotted.path.Class", "OPTIONS": {...}}
    Retourne (backend, options).
    """
    if isinstance(definition, str):
        backend, options = definition, {}
    elif isinstance(definition, Mapping):
        backend = definition.get("BACKEND")
        options = dict(definition.get("OPTIONS") or {})
    else:
        raise ConfigError(
            f'Component "{name}" must be a dotted path or a mapping, got {type(definition).__name__}.'
        )
    if not backend or not isinstance(backend, str):
        raise ConfigError(f'Component "{name}" has no BACKEND.')
    return backend, options


def import_backend(name: str, backend: str) -> Any:
    try:
        return import_string(backend)
    except ImportError as exc:
        raise ConfigError(f'Component "{name}": cannot import "{backend}" ({exc}).') from exc


def build_factory(name: str, definition: Any) -> Factory:
    """Fabrique sans argument; l'import est différé jusqu'au premier get()."""
    backend, options = parse_definition(name, definition)

    def factory() -> Any:
        return import_backend(name, backend)(**options)

    return factory


class ComponentRegistry:
    """
    Registre de composants nommés (has/get), instanciés paresseusement.

    Les lookups ne sont jamais mis en cache: chaque get() les rappelle. Les
    connexions de base y sont rangées, django.db.connections donnant un objet
    par thread.

    Un registre peut avoir un parent: scoped() superpose des composants
    (ex. le ClientScript d'une requête) sans toucher au registre parent.
    """

    def __init__(
        self,
        components: Optional[Dict[str, Any]] = None,
        factories: Optional[Dict[str, Factory]] = None,
        parent: Optional["ComponentRegistry"] = None,
        lookups: Optional[Dict[str, Factory]] = None,
    ) -> None:
        self._components: Dict[str, Any] = dict(components or {})
        self._factories: Dict[str, Factory] = dict(factories or {})
        self._lookups: Dict[str, Factory] = dict(lookups or {})
        self._parent = parent

    def has(self, name: str) -> bool:
        if name in self._components or name in self._factories or name in self._lookups:
            return True
        return self._parent is not None and self._parent.has(name)

    def get(self, name: str) -> Any:
        if name in self._components:
            return self._components[name]
        lookup = self._lookups.get(name)
        if lookup is not None:
            return lookup()
        factory = self._factories.get(name)
        if factory is not None:
            component = factory()
            self._components[name] = component
            log.debug("Component %s created: %s", name, type(component).__name__)
            return component
        if self._parent is not None:
            return self._parent.get(name)
        raise ConfigError(f'Component "{name}" does not exist.')

    def set(self, name: str, component: Any) -> None:
        self._factories.pop(name, None)
        self._lookups.pop(name, None)
        self._components[name] = component

    def names(self) -> List[str]:
        seen = list(self._parent.names()) if self._parent is not None else []
        for name in list(self._components) + list(self._lookups) + list(self._factories):
            if name not in seen:
                seen.append(name)
        return seen

    def scoped(self, **components: Any) -> "ComponentRegistry":
        return ComponentRegistry(components=components, parent=self)

    @classmethod
    def from_settings(cls) -> "ComponentRegistry":
        cfg = get_settings()
        lookups: Dict[str, Factory] = {}
        for alias in getattr(settings, "DATABASES", {}):
            lookups[alias] = _connection_lookup(alias)
        factories: Dict[str, Factory] = {}
        for name, definition in cfg.components.items():
            lookups.pop(name, None)
            factories[name] = build_factory(name, definition)
        return cls(factories=factories, lookups=lookups)


def _connection_lookup(alias: str) -> Factory:
    return lambda: connections[alias]


@lru_cache(maxsize=1)
def default_components() -> ComponentRegistry:
    return ComponentRegistry.from_settings()


@receiver(setting_changed)
def _reset_default_components(sender, setting, **kwargs) -> None:
    if setting in _WATCHED_SETTINGS:
        default_components.cache_clear()
