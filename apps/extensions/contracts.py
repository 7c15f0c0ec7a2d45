# apps/extensions/contracts.py
"""
Interfaces consumed by ExtensionBehavior.

The behavior never reaches for a global application object: every
collaborator is handed to it through ExtensionConfig and only needs to
match one of the protocols below.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

__all__ = [
    "Locator",
    "ModuleResolver",
    "Components",
    "AssetManager",
    "ClientScriptRegistry",
]


@runtime_checkable
class Locator(Protocol):
    """Where an extension lives: dotted alias prefix and filesystem base path."""

    def alias(self) -> Optional[str]: ...

    def path(self) -> Optional[str]: ...


class ModuleResolver(Protocol):
    def resolve(self, alias: str, force_load: bool = False) -> str: ...


class Components(Protocol):
    def has(self, name: str) -> bool: ...

    def get(self, name: str) -> Any: ...


class AssetManager(Protocol):
    def publish(
        self,
        path: str,
        use_timestamp: bool = False,
        copy_depth: int = -1,
        force_copy: bool = False,
    ) -> str: ...


class ClientScriptRegistry(Protocol):
    def register_css_file(self, url: str, media: str = "") -> Any: ...

    def register_script_file(self, url: str, position: Optional[str] = None) -> Any: ...
