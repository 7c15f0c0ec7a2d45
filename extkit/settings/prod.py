# extkit/settings/prod.py
from .base import *

DEBUG = False

if DATABASES['default']['ENGINE'].endswith('sqlite3') and not env_flag("ALLOW_SQLITE"):
    raise RuntimeError("SQLite est interdit en production. Configure DB_ENGINE/DB_NAME/...")
if not ALLOWED_HOSTS:
    raise RuntimeError("ALLOWED_HOSTS n'est pas défini en production.")

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOGGING['root']['level'] = LOG_LEVEL
LOGGING['loggers']['django.request']['level'] = 'ERROR'
