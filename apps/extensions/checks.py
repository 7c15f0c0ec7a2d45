from __future__ import annotations

import inspect

from django.conf import settings
from django.core.checks import Error, Warning, register

from .components import import_backend, parse_definition
from .conf import get_settings
from .errors import ConfigError


@register()
def components_config_check(app_configs, **kwargs):
    """
    Chaque composant déclaré doit avoir un BACKEND importable dont la signature
    accepte ses OPTIONS. Le BACKEND n'est pas instancié.
    """
    errors = []
    for name, definition in get_settings().components.items():
        try:
            backend, options = parse_definition(name, definition)
            cls = import_backend(name, backend)
        except ConfigError as exc:
            errors.append(Error(
                str(exc),
                hint='Déclare {"BACKEND": "dotted.path", "OPTIONS": {...}} dans EXTENSIONS["COMPONENTS"].',
                id="extensions.E001",
            ))
            continue
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            # signature introuvable (builtin/extension C): rien à vérifier
            continue
        try:
            signature.bind(**options)
        except TypeError as exc:
            errors.append(Error(
                f'Component "{name}": OPTIONS invalides ({exc}).',
                hint="Vérifie les arguments acceptés par le BACKEND.",
                id="extensions.E002",
            ))
    return errors


@register()
def connection_alias_check(app_configs, **kwargs):
    cfg = get_settings()
    if cfg.connection_id in getattr(settings, "DATABASES", {}) or cfg.connection_id in cfg.components:
        return []
    return [Warning(
        f'EXTENSIONS["CONNECTION_ID"]="{cfg.connection_id}" ne correspond à aucune base ni composant.',
        hint="Ajoute l'alias dans DATABASES ou corrige CONNECTION_ID.",
        id="extensions.W001",
    )]
