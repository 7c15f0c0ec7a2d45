# extkit/settings/dev.py
# export DJANGO_SETTINGS_MODULE=extkit.settings.dev

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

LOGGING['loggers']['extensions']['level'] = 'DEBUG'

# Dev: permettre la recherche disque et relire les assets publiés
WHITENOISE_AUTOREFRESH = True
WHITENOISE_USE_FINDERS = True

STORAGES["staticfiles"] = {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"}
