"""Production settings for the rental center.

Secrets, hosts and the database come from the environment; a missing
required variable stops start-up with ImproperlyConfigured.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)  # noqa: F405
ALLOWED_HOSTS = get_env('DJANGO_ALLOWED_HOSTS', required=True).split(',')  # noqa: F405

DATABASES['default'].update(  # noqa: F405
    {
        'ENGINE': get_env('DB_ENGINE', 'django.db.backends.postgresql'),  # noqa: F405
        'NAME': get_env('DB_NAME', required=True),  # noqa: F405
        'CONN_MAX_AGE': int(get_env('DB_CONN_MAX_AGE', '60')),  # noqa: F405
    }
)

# Behind the reverse proxy that terminates TLS
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_SSL_REDIRECT = get_env('DJANGO_SSL_REDIRECT', 'true').lower() == 'true'  # noqa: F405
SECURE_HSTS_SECONDS = int(get_env('DJANGO_HSTS_SECONDS', '3600'))  # noqa: F405
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
