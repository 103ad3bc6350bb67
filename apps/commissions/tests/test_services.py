"""Tests for partner commission summaries and stored commission totals."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.utils import timezone

from apps.bookings.models import Booking
from apps.commissions.services import (
    booking_commission,
    partner_commissions,
    refresh_commission_total,
    summarize_partner_commissions,
)
from apps.products.models import Product


def _summary_booking(total: str, paid: str, created_days_ago: int) -> SimpleNamespace:
    return SimpleNamespace(
        comision_total=Decimal(total),
        comision_pagada=Decimal(paid),
        creado_en=timezone.now() - timedelta(days=created_days_ago),
    )


def test_summary_totals_and_pending_order():
    old = _summary_booking("100.00", "40.00", created_days_ago=5)
    settled = _summary_booking("50.00", "50.00", created_days_ago=3)
    recent = _summary_booking("80.00", "0.00", created_days_ago=1)

    summary = summarize_partner_commissions([old, settled, recent])

    assert summary.total_comisiones == pytest.approx(230.0)
    assert summary.total_pagado == pytest.approx(90.0)
    assert summary.pendiente == pytest.approx(140.0)
    assert summary.num_reservas == 3
    assert summary.reservas_pendientes == [recent, old]


def test_summary_of_no_bookings_is_zero():
    summary = summarize_partner_commissions([])

    assert summary.total_comisiones == 0
    assert summary.pendiente == 0
    assert summary.num_reservas == 0
    assert summary.reservas_pendientes == []


def _stored_booking(**extra) -> Booking:
    defaults = {
        "fecha_inicio": date(2026, 7, 1),
        "fecha_fin": date(2026, 7, 2),
        "items": [{"producto_id": "1", "cantidad": 1, "duracion": 1}],
        "estado": Booking.Status.CONFIRMED,
    }
    defaults.update(extra)
    return Booking.objects.create(**defaults)


@pytest.mark.django_db
def test_partner_commissions_only_counts_commissionable_bookings():
    _stored_booking(broker_id="b-7", comision_total=Decimal("60.00"), comision_pagada=Decimal("20.00"))
    _stored_booking(broker_id="b-7", comision_total=Decimal("40.00"), estado=Booking.Status.COMPLETED)
    _stored_booking(broker_id="b-7", comision_total=Decimal("500.00"), estado=Booking.Status.PENDING)
    _stored_booking(broker_id="b-7", comision_total=Decimal("500.00"), estado=Booking.Status.CANCELLED)
    _stored_booking(broker_id="b-8", comision_total=Decimal("500.00"))
    _stored_booking(agency_id="b-7", comision_total=Decimal("500.00"))

    summary = partner_commissions("b-7", "broker")

    assert summary.num_reservas == 2
    assert summary.total_comisiones == pytest.approx(100.0)
    assert summary.total_pagado == pytest.approx(20.0)
    assert summary.pendiente == pytest.approx(80.0)
    assert len(summary.reservas_pendientes) == 2


@pytest.mark.django_db
def test_partner_commissions_by_agency():
    _stored_booking(agency_id="ag-1", comision_total=Decimal("25.50"))

    summary = partner_commissions("ag-1", "agency")

    assert summary.num_reservas == 1
    assert summary.total_comisiones == pytest.approx(25.5)


def test_unknown_partner_type_is_rejected():
    with pytest.raises(ValueError):
        partner_commissions("x", "colaborador")


@pytest.mark.django_db
def test_refresh_commission_total_uses_dates_and_catalog():
    product = Product.objects.create(nombre="Jetski", precio_diario=Decimal("200.00"), comision=Decimal("15.00"))
    booking = Booking(
        fecha_inicio=date(2026, 8, 10),
        fecha_fin=date(2026, 8, 12),
        items=[{"producto_id": str(product.pk), "cantidad": 1, "duracion": 1}],
    )

    total = refresh_commission_total(booking)

    # 200 € × 2 days × 15 %
    assert total == Decimal("60.00")
    assert booking.comision_total == Decimal("60.00")
    assert booking.pk is None


@pytest.mark.django_db
def test_booking_commission_prices_items_at_daily_rate():
    product = Product.objects.create(nombre="Seabob", precio_diario=Decimal("100.00"), comision=Decimal("10.00"))
    booking = _stored_booking(
        items=[
            {"producto_id": str(product.pk), "cantidad": 3, "duracion": 2},
            {"producto_id": "9999", "cantidad": 1, "duracion": 1},
        ]
    )

    assert booking_commission(booking) == pytest.approx(60.0)
