"""ASGI config for the rental center project.

Exposes the ASGI application for async-capable servers. The delivery feed
does not depend on it: live snapshots are pushed in-process by the
document store.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
