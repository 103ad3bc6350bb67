"""Django configuration package for the rental center portal.

Holds the environment settings modules, URL routing, the Celery
application and the WSGI/ASGI entry points.
"""

# Import the Celery application as soon as Django starts so that
# @shared_task functions bind to it.
from .celery import app as celery_app  # noqa: F401
