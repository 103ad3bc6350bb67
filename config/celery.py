import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("rental_center")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Expire unpaid, unsigned bookings - every 5 minutes
    "expire-pending-bookings": {
        "task": "bookings.expire_pending_bookings",
        "schedule": 300.0,
        "options": {"expires": 240},
    },
}

app.conf.timezone = "Europe/Madrid"
