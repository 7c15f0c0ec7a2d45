from __future__ import annotations

from django import template

from apps.extensions.client_script import POS_HEAD

register = template.Library()


def _client_script(context):
    request = context.get("request")
    return getattr(request, "client_script", None)


@register.simple_tag(takes_context=True)
def extension_css(context):
    cs = _client_script(context)
    if cs is None:
        return ""
    return cs.render_css()


@register.simple_tag(takes_context=True)
def extension_scripts(context, position: str = POS_HEAD):
    cs = _client_script(context)
    if cs is None:
        return ""
    return cs.render_scripts(position)
