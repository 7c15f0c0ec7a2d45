# apps/extensions/resolver.py
from __future__ import annotations

import importlib
import importlib.util
import logging
from typing import Dict, Optional, Tuple

from django.utils.module_loading import import_string

from .errors import ResolutionError

log = logging.getLogger("extensions.resolver")

WILDCARD = "*"


class ModuleResolver:
    """
    Résout un alias pointé vers un nom de classe/module ou un dossier de package.

      "apps.demo.widgets.Gallery" -> "Gallery"
      "apps.demo.widgets"         -> "widgets"
      "apps.demo.widgets.*"       -> "/.../apps/demo/widgets"
    """

    def __init__(self) -> None:
        self._resolved: Dict[str, str] = {}
        self._loaded: set[str] = set()

    def resolve(self, alias: str, force_load: bool = False) -> str:
        key = (alias or "").strip()
        if key in self._resolved and (not force_load or key in self._loaded):
            return self._resolved[key]

        parts = self._split(key)
        if parts[-1] == WILDCARD:
            result = self._resolve_package_dir(key, ".".join(parts[:-1]), force_load)
        else:
            result = self._resolve_name(key, parts, force_load)

        self._resolved[key] = result
        if force_load:
            self._loaded.add(key)
        log.debug("Alias %s resolved to %s (force_load=%s)", key, result, force_load)
        return result

    @staticmethod
    def _split(alias: str) -> Tuple[str, ...]:
        if not alias:
            raise ResolutionError(f'Alias "{alias}" is invalid.')
        parts = tuple(alias.split("."))
        for i, part in enumerate(parts):
            if part == WILDCARD and i == len(parts) - 1 and i > 0:
                continue
            if not part.isidentifier():
                raise ResolutionError(f'Alias "{alias}" is invalid.')
        return parts

    @staticmethod
    def _find_spec(module: str):
        try:
            return importlib.util.find_spec(module)
        except (ImportError, ValueError):
            return None
        except Exception as exc:
            # le module parent a échoué à l'import
            raise ResolutionError(f'Module "{module}" cannot be inspected ({exc!r}).') from exc

    def _resolve_package_dir(self, alias: str, package: str, force_load: bool) -> str:
        spec = self._find_spec(package)
        locations = list(spec.submodule_search_locations or []) if spec else []
        if not locations:
            raise ResolutionError(f'Alias "{alias}" is invalid. Make sure it points to an existing package.')
        if force_load:
            importlib.import_module(package)
        return locations[0]

    def _resolve_name(self, alias: str, parts: Tuple[str, ...], force_load: bool) -> str:
        name = parts[-1]
        if self._find_spec(alias) is not None:
            if force_load:
                importlib.import_module(alias)
            return name

        parent: Optional[str] = ".".join(parts[:-1]) or None
        if parent is None or self._find_spec(parent) is None:
            raise ResolutionError(f'Alias "{alias}" is invalid. Make sure it points to an existing module.')
        if force_load:
            try:
                import_string(alias)
            except ImportError as exc:
                raise ResolutionError(f'Alias "{alias}" is invalid ({exc}).') from exc
        return name
