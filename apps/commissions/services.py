"""Commission services: persisted booking totals and partner summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable

from apps.bookings.models import Booking
from apps.products.models import Product

from .calculator import calculate_booking_commission, calculate_commission_total

logger = logging.getLogger(__name__)

PARTNER_FIELDS = {
    "broker": "broker_id",
    "agency": "agency_id",
}
COMMISSIONABLE_STATUSES = (Booking.Status.CONFIRMED, Booking.Status.COMPLETED)


def _product_ids(items: Iterable[Any]) -> set[str]:
    return {str(item.get("producto_id")) for item in items if item.get("producto_id") is not None}


def booking_commission(booking: Booking) -> float:
    """Commission of a stored booking priced at catalog daily rates."""
    items = booking.booking_items
    products = Product.lookup_table({item.producto_id for item in items})
    return calculate_booking_commission(items, products)


def refresh_commission_total(booking: Booking) -> Decimal:
    """
    Recalculate ``comision_total`` from the booking's items and dates.

    The booking is updated in memory only; the caller saves it.
    """
    products = Product.lookup_table(_product_ids(booking.items or []))
    total = calculate_commission_total(booking, products)
    booking.comision_total = Decimal(str(round(total, 2)))
    logger.debug(f"Commission for booking {booking.numero_reserva or 'new'}: {booking.comision_total}")
    return booking.comision_total


@dataclass
class PartnerCommissionSummary:
    """Totales de comisión de un broker o agencia."""

    total_comisiones: float = 0.0
    total_pagado: float = 0.0
    pendiente: float = 0.0
    num_reservas: int = 0
    reservas_pendientes: list[Booking] = field(default_factory=list)


def summarize_partner_commissions(bookings: Iterable[Booking]) -> PartnerCommissionSummary:
    """
    Sum earned and paid commission over bookings.

    Bookings with commission still owed are listed newest first.
    """
    summary = PartnerCommissionSummary()
    for booking in bookings:
        comision_total = float(booking.comision_total or 0)
        comision_pagada = float(booking.comision_pagada or 0)

        summary.total_comisiones += comision_total
        summary.total_pagado += comision_pagada
        summary.num_reservas += 1
        if comision_total - comision_pagada > 0:
            summary.reservas_pendientes.append(booking)

    summary.pendiente = summary.total_comisiones - summary.total_pagado
    summary.reservas_pendientes.sort(key=lambda booking: booking.creado_en, reverse=True)
    return summary


def partner_commissions(partner_id: str, partner_type: str) -> PartnerCommissionSummary:
    """Summary over a partner's confirmed and completed bookings."""
    try:
        field_name = PARTNER_FIELDS[partner_type]
    except KeyError:
        raise ValueError(f"Unknown partner type: {partner_type}") from None

    bookings = Booking.objects.filter(
        **{field_name: partner_id},
        estado__in=COMMISSIONABLE_STATUSES,
    )
    return summarize_partner_commissions(bookings)
