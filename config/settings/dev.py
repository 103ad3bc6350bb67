"""Development settings for the rental center.

Debug on, any host, CORS open for the local front end, and verbose
application logging so store subscriptions show up in the console.
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

CORS_ALLOW_ALL_ORIGINS = True

# Short holds make the expiration task easy to watch locally
BOOKING_HOLD_TIMEOUT = timedelta(minutes=int(get_env('BOOKING_HOLD_MINUTES', '5')))  # noqa: F405

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'DEBUG'  # noqa: F405
LOGGING['handlers']['console']['level'] = 'DEBUG'  # noqa: F405
