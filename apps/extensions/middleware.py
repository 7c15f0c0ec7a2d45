# apps/extensions/middleware.py
from __future__ import annotations

from .client_script import ClientScript
from .components import default_components
from .conf import get_settings


class ClientScriptMiddleware:
    """Pose un ClientScript par requête et le registre de composants associé."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        cs = ClientScript()
        request.client_script = cs
        request.extension_components = default_components().scoped(**{get_settings().client_script: cs})
        return self.get_response(request)
