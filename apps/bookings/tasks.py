"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Booking

logger = logging.getLogger(__name__)


@shared_task(name="bookings.expire_pending_bookings")
def expire_pending_bookings() -> dict[str, int]:
    """
    Expire pending bookings whose hold ran out.

    A booking expires when it is still pending, its ``expiracion`` has
    passed, and it was neither paid nor signed. Runs every five minutes
    through Celery Beat.

    Returns:
        dict: {"expired": number of bookings expired}
    """
    now = timezone.now()
    expired_count = 0

    candidates = Booking.objects.filter(
        estado=Booking.Status.PENDING,
        expirado=False,
        expiracion__lt=now,
        pago_realizado=False,
        acuerdo_firmado=False,
    )

    for booking in candidates:
        if not booking.should_expire(now):
            continue
        try:
            with transaction.atomic():
                booking.estado = Booking.Status.EXPIRED
                booking.expirado = True
                booking.save(update_fields=["estado", "expirado", "actualizado_en"])
            expired_count += 1
            logger.info(f"Booking {booking.numero_reserva} expired automatically")
        except Exception as e:
            logger.error(f"Error expiring booking {booking.id}: {e}", exc_info=True)

    if expired_count > 0:
        logger.info(f"Expired {expired_count} pending bookings")

    return {"expired": expired_count}
