"""WSGI config for the rental center project.

Used by Django's runserver and production WSGI servers (gunicorn and the
like). Points to the settings package; production sets
DJANGO_SETTINGS_MODULE=config.settings.prod.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
