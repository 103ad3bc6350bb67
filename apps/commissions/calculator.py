"""
Commission arithmetic and currency formatting.

All functions are pure. Items and products may be mappings (store
documents) or objects exposing the same attribute names (Product model
instances, BookingItem records).

Product lookup is permissive: an item whose producto_id is missing from the
lookup table contributes zero and raises nothing. Callers that need strict
validation check product existence before calling.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping

from django.utils import numberformat  # type: ignore

CURRENCY_SYMBOL = "€"
# es-ES puts a no-break space between amount and symbol
CURRENCY_SPACING = "\u00a0"
CENT = Decimal("0.01")


def _field(source: Any, name: str, default: Any = None) -> Any:
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def _first_number(*candidates: Any) -> float:
    for candidate in candidates:
        if candidate is not None:
            return float(candidate)
    return 0.0


def _as_date(value: Any) -> date:
    return date.fromisoformat(str(value)[:10])


def _rental_days(fecha_inicio: Any, fecha_fin: Any) -> int:
    # A missing or reversed end date still bills one day
    if not fecha_fin:
        return 1
    return max(1, (_as_date(fecha_fin) - _as_date(fecha_inicio)).days)


def calculate_item_commission(
    price: float, quantity: float, duration: float, commission_percent: float
) -> float:
    """Commission for one line: price × quantity × duration × percent / 100."""
    return price * quantity * duration * commission_percent / 100


def calculate_booking_commission(items: Iterable[Any], products_by_key: Mapping[Any, Any]) -> float:
    """
    Total commission for a booking's items.

    Each item resolves its product through ``products_by_key[producto_id]``;
    unresolved items are skipped. The daily price and the product's
    commission rate (0 when unset) apply to every item. No rounding.
    """
    total = 0.0
    for item in items:
        product = products_by_key.get(_field(item, "producto_id"))
        if product is None:
            continue
        precio_diario = float(_field(product, "precio_diario") or 0)
        comision = float(_field(product, "comision") or 0)
        cantidad = _field(item, "cantidad") or 0
        duracion = _field(item, "duracion") or 0
        total += precio_diario * cantidad * duracion * (comision / 100)
    return total


def calculate_commission_total(booking: Any, products_by_id: Mapping[Any, Any]) -> float:
    """
    Commission for a booking using its date range.

    Daily items are billed for the booking's day count (at least one);
    hourly items for their own duracion (at least one hour). Item-level
    comision_percent and precio_unitario take precedence over the product's
    values, and items with a zero rate are skipped.
    """
    items = _field(booking, "items") or []
    if not items:
        return 0.0

    days = _rental_days(_field(booking, "fecha_inicio"), _field(booking, "fecha_fin"))

    total = 0.0
    for item in items:
        product = products_by_id.get(_field(item, "producto_id"))
        product_rate = None if product is None else _field(product, "comision")
        rate = _first_number(_field(item, "comision_percent"), product_rate) / 100
        if not rate:
            continue

        hourly = _field(item, "tipo_alquiler") == "hora"
        catalog_price = None
        if product is not None:
            catalog_price = _field(product, "precio_hora" if hourly else "precio_diario")
        unit_price = _first_number(_field(item, "precio_unitario"), catalog_price)
        quantity = _field(item, "cantidad") or 0
        periods = max(1, _field(item, "duracion") or 1) if hourly else days

        total += unit_price * periods * quantity * rate
    return total


def format_currency(amount) -> str:
    """
    Euro amount in Spanish formatting.

    Thousands are always grouped with '.', decimals use ',' and the symbol
    follows the amount: ``format_currency(1234.5) == "1.234,50\\u00a0€"``.
    """
    rounded = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    number = numberformat.format(
        rounded,
        decimal_sep=",",
        decimal_pos=2,
        grouping=3,
        thousand_sep=".",
        force_grouping=True,
    )
    return f"{number}{CURRENCY_SPACING}{CURRENCY_SYMBOL}"
