# apps/extensions/behaviors.py
"""
Helpers partagés par les extensions (composants, widgets).

L'hôte garde une instance d'ExtensionBehavior et lui délègue:

    class Gallery:
        def __init__(self, request):
            self.extension = WidgetBehavior(
                PackageLocator("apps.gallery"),
                ExtensionConfig.for_request(request),
            )

        def init(self):
            self.extension.publish("assets")
            self.extension.register_css_file("gallery.css")
            self.extension.register_script_file(
                self.extension.resolve_script_version("gallery.js", minified=True),
                position=POS_END,
            )
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

from django.db import DEFAULT_DB_ALIAS
from django.db.backends.base.base import BaseDatabaseWrapper

from .components import default_components
from .conf import DEFAULT_ASSET_MANAGER, DEFAULT_CLIENT_SCRIPT, get_settings
from .contracts import Components, Locator, ModuleResolver as ModuleResolverProtocol
from .errors import ConfigError, TypeMismatchError
from .resolver import ModuleResolver

log = logging.getLogger("extensions.behaviors")

_default_resolver = ModuleResolver()


@dataclass(frozen=True)
class ExtensionConfig:
    """Collaborateurs injectés dans le behavior."""

    components: Components
    resolver: ModuleResolverProtocol = field(default_factory=lambda: _default_resolver)
    connection_id: str = DEFAULT_DB_ALIAS
    asset_manager_id: str = DEFAULT_ASSET_MANAGER
    client_script_id: str = DEFAULT_CLIENT_SCRIPT

    @classmethod
    def from_settings(cls, components: Optional[Components] = None) -> "ExtensionConfig":
        cfg = get_settings()
        return cls(
            components=components if components is not None else default_components(),
            connection_id=cfg.connection_id,
            asset_manager_id=cfg.asset_manager,
            client_script_id=cfg.client_script,
        )

    @classmethod
    def for_request(cls, request) -> "ExtensionConfig":
        """Utilise le registre posé par ClientScriptMiddleware (s'il est actif)."""
        return cls.from_settings(getattr(request, "extension_components", None))


@dataclass
class ExtensionHandle:
    base_path: Optional[str] = None
    alias_prefix: Optional[str] = None
    connection_id: str = DEFAULT_DB_ALIAS
    published_assets_url: Optional[str] = None


class ExtensionBehavior:
    def __init__(self, locator: Locator, config: ExtensionConfig) -> None:
        self.locator = locator
        self.config = config
        self.handle = ExtensionHandle(
            base_path=locator.path(),
            alias_prefix=locator.alias(),
            connection_id=config.connection_id,
        )

    @property
    def connection_id(self) -> str:
        return self.handle.connection_id

    @connection_id.setter
    def connection_id(self, value: str) -> None:
        self.handle.connection_id = value

    @property
    def assets_url(self) -> Optional[str]:
        return self.handle.published_assets_url

    # ---------------------------
    # Alias / import
    # ---------------------------
    def resolve_alias(self, alias: str) -> str:
        if self.handle.alias_prefix is not None:
            return f"{self.handle.alias_prefix}.{alias}"
        return alias

    def import_(self, alias: str, force_load: bool = False) -> str:
        """
        Importe une classe ou un package; le préfixe d'alias de l'extension est
        ajouté automatiquement. Lève ResolutionError si l'alias est invalide.
        """
        return self.config.resolver.resolve(self.resolve_alias(alias), force_load)

    # ---------------------------
    # Base de données
    # ---------------------------
    def get_db_connection(self, connection_id: Optional[str] = None) -> BaseDatabaseWrapper:
        name = connection_id or self.handle.connection_id
        components = self.config.components
        if not components.has(name):
            raise ConfigError(f'Connection component "{name}" does not exist.')
        db = components.get(name)
        if not isinstance(db, BaseDatabaseWrapper):
            raise TypeMismatchError(f'Connection component "{name}" is not a database connection.')
        return db

    # ---------------------------
    # Assets
    # ---------------------------
    def publish(self, path: str, force_copy: bool = False) -> Optional[str]:
        """
        Publie les assets de l'extension et mémorise l'URL obtenue.
        Retourne None quand aucun asset manager n'est disponible.
        """
        components = self.config.components
        if not components.has(self.config.asset_manager_id):
            log.debug("No asset manager, publish(%s) skipped", path)
            return None
        asset_manager = components.get(self.config.asset_manager_id)
        if self.handle.base_path is not None:
            path = self.handle.base_path + os.sep + path
        url = asset_manager.publish(path, False, -1, force_copy)
        self.handle.published_assets_url = url
        return url

    def get_client_script(self) -> Optional[Any]:
        components = self.config.components
        if not components.has(self.config.client_script_id):
            return None
        return components.get(self.config.client_script_id)

    def _asset_url(self, url: str) -> str:
        if self.handle.published_assets_url is not None:
            return f"{self.handle.published_assets_url}/{url.lstrip('/')}"
        return url

    def register_css_file(self, url: str, media: str = "") -> Optional[Any]:
        cs = self.get_client_script()
        if cs is None:
            return None
        return cs.register_css_file(self._asset_url(url), media)

    def register_script_file(self, url: str, position: Optional[str] = None) -> Optional[Any]:
        cs = self.get_client_script()
        if cs is None:
            return None
        return cs.register_script_file(self._asset_url(url), position)

    @staticmethod
    def resolve_script_version(filename: str, minified: bool = False) -> str:
        # Le point reste avec le nom: "app.js" -> "app." + "js".
        cut = filename.rfind(".") + 1
        name, extension = filename[:cut], filename[cut:]
        return name + extension if not minified else name + "min." + extension


class ComponentBehavior(ExtensionBehavior):
    pass


class WidgetBehavior(ComponentBehavior):
    pass
