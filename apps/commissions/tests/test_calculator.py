"""Tests for commission arithmetic and euro formatting."""

from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest

from apps.bookings.domain.entities import BookingItem
from apps.commissions.calculator import (
    calculate_booking_commission,
    calculate_commission_total,
    calculate_item_commission,
    format_currency,
)


@pytest.mark.parametrize(
    "price, quantity, duration, percent",
    [
        (10, 2, 3, 20),
        (49.9, 1, 4, 12.5),
        (0, 5, 5, 10),
        (150, 3, 2, 0),
        (1200, 1, 1, 100),
    ],
)
def test_item_commission_matches_formula(price, quantity, duration, percent):
    assert calculate_item_commission(price, quantity, duration, percent) == price * quantity * duration * percent / 100


def test_empty_booking_has_no_commission():
    assert calculate_booking_commission([], {"p1": {"precio_diario": 10, "comision": 20}}) == 0


def test_single_item_booking_commission():
    items = [{"producto_id": "p1", "cantidad": 2, "duracion": 3}]
    products = {"p1": {"precio_diario": 10, "comision": 20}}

    assert calculate_booking_commission(items, products) == pytest.approx(12)


def test_unknown_product_is_skipped():
    items = [
        {"producto_id": "p1", "cantidad": 1, "duracion": 1},
        {"producto_id": "missing", "cantidad": 5, "duracion": 5},
    ]
    products = {"p1": {"precio_diario": 50, "comision": 10}}

    assert calculate_booking_commission(items, products) == pytest.approx(5)


def test_only_unknown_products_give_zero():
    items = [{"producto_id": "missing", "cantidad": 99, "duracion": 30}]
    assert calculate_booking_commission(items, {}) == 0


def test_product_without_commission_rate_contributes_nothing():
    items = [{"producto_id": "p1", "cantidad": 4, "duracion": 2}]
    assert calculate_booking_commission(items, {"p1": {"precio_diario": 80}}) == 0
    assert calculate_booking_commission(items, {"p1": {"precio_diario": 80, "comision": 0}}) == 0


def test_booking_commission_accepts_records_and_model_like_products():
    items = [BookingItem(producto_id="7", cantidad=2, duracion=2)]
    products = {"7": SimpleNamespace(precio_diario=Decimal("95.00"), comision=Decimal("15.00"))}

    assert calculate_booking_commission(items, products) == pytest.approx(57)


def test_booking_commission_is_repeatable():
    items = [
        {"producto_id": "p1", "cantidad": 3, "duracion": 2},
        {"producto_id": "p2", "cantidad": 1, "duracion": 7},
    ]
    products = {
        "p1": {"precio_diario": 33.3, "comision": 12.5},
        "p2": {"precio_diario": 210, "comision": 8},
    }

    first = calculate_booking_commission(items, products)
    second = calculate_booking_commission(items, products)

    assert first == second


def test_commission_total_daily_items_use_booking_days():
    booking = {
        "fecha_inicio": "2026-07-01",
        "fecha_fin": "2026-07-04",
        "items": [{"producto_id": "1", "cantidad": 2, "duracion": 1, "tipo_alquiler": "dia"}],
    }
    products = {"1": {"precio_diario": 100, "precio_hora": 30, "comision": 10}}

    # 100 € × 3 days × 2 units × 10 %
    assert calculate_commission_total(booking, products) == pytest.approx(60)


def test_commission_total_same_day_counts_one_day():
    booking = {
        "fecha_inicio": "2026-07-01",
        "fecha_fin": "2026-07-01",
        "items": [{"producto_id": "1", "cantidad": 1, "duracion": 1}],
    }
    products = {"1": {"precio_diario": 200, "comision": 25}}

    assert calculate_commission_total(booking, products) == pytest.approx(50)


def test_commission_total_hourly_items_use_their_duration():
    booking = {
        "fecha_inicio": "2026-07-01",
        "fecha_fin": "2026-07-05",
        "items": [{"producto_id": "1", "cantidad": 1, "duracion": 3, "tipo_alquiler": "hora"}],
    }
    products = {"1": {"precio_diario": 400, "precio_hora": 90, "comision": 20}}

    assert calculate_commission_total(booking, products) == pytest.approx(54)


def test_commission_total_item_overrides_win_over_catalog():
    booking = {
        "fecha_inicio": "2026-07-01",
        "fecha_fin": "2026-07-03",
        "items": [
            {"producto_id": "1", "cantidad": 1, "duracion": 1, "precio_unitario": 150, "comision_percent": 30},
            {"producto_id": "ghost", "cantidad": 1, "duracion": 1, "precio_unitario": 100, "comision_percent": 10},
            {"producto_id": "ghost", "cantidad": 1, "duracion": 1},
        ],
    }
    products = {"1": {"precio_diario": 500, "comision": 5}}

    # 150 × 2 × 30 % + 100 × 2 × 10 %, the last item has no rate at all
    assert calculate_commission_total(booking, products) == pytest.approx(110)


def test_commission_total_reversed_dates_count_one_day():
    booking = {
        "fecha_inicio": "2026-07-05",
        "fecha_fin": "2026-07-01",
        "items": [{"producto_id": "1", "cantidad": 1, "duracion": 1}],
    }
    products = {"1": {"precio_diario": 100, "comision": 10}}

    assert calculate_commission_total(booking, products) == pytest.approx(10)


def test_commission_total_without_end_date_counts_one_day():
    booking = {"fecha_inicio": "2026-07-05", "items": [{"producto_id": "1", "cantidad": 2, "duracion": 4}]}
    products = {"1": {"precio_diario": 100, "comision": 10}}

    assert calculate_commission_total(booking, products) == pytest.approx(20)


def test_commission_total_without_items_is_zero():
    assert calculate_commission_total({"fecha_inicio": "2026-07-01", "items": []}, {}) == 0


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.5, "1.234,50\u00a0€"),
        (12, "12,00\u00a0€"),
        (0, "0,00\u00a0€"),
        (1234567.891, "1.234.567,89\u00a0€"),
        (Decimal("99.995"), "100,00\u00a0€"),
        (-250.4, "-250,40\u00a0€"),
    ],
)
def test_format_currency_spanish_euro(amount, expected):
    assert format_currency(amount) == expected
