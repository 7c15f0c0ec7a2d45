# extkit/settings/test_cli.py
import tempfile

from .dev import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Les tests publient dans un STATIC_ROOT jetable
STATIC_ROOT = tempfile.mkdtemp(prefix="extkit-static-")

WHITENOISE_AUTOREFRESH = True
WHITENOISE_USE_FINDERS = False

LOGGING['loggers']['extensions']['level'] = 'WARNING'
