# apps/extensions/errors.py
from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

__all__ = [
    "ExtensionError",
    "ConfigError",
    "TypeMismatchError",
    "ResolutionError",
    "PublishError",
]


class ExtensionError(Exception):
    """Base error of the extensions app."""


class ConfigError(ExtensionError, ImproperlyConfigured):
    """A named component is missing or its definition cannot be loaded."""


class TypeMismatchError(ExtensionError, TypeError):
    """A component exists but does not provide the expected capability."""


class ResolutionError(ExtensionError, ImportError):
    """An alias cannot be resolved to a module, class or package directory."""


class PublishError(ExtensionError):
    """The asset manager could not publish the requested path."""
