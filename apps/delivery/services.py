"""Delivery list filtering."""

from __future__ import annotations

from typing import Iterable, List

from apps.bookings.domain.entities import BookingRecord
from apps.bookings.models import Booking
from shared.infrastructure.document_store import DjangoDocumentStore, DocumentStore

INACTIVE_STATUSES = {Booking.Status.CANCELLED.value, Booking.Status.EXPIRED.value}

LOCATION_LABELS = dict(Booking.DeliveryLocation.choices)


def booking_document_store() -> DocumentStore:
    """Document store over the project's database."""
    return DjangoDocumentStore({"bookings": Booking})


def is_pending_delivery(record: BookingRecord) -> bool:
    return record.get("estado") not in INACTIVE_STATUSES and not record.get("expirado")


def search_text(record: BookingRecord) -> str:
    cliente = record.get("cliente") or {}
    location = record.get("ubicacion_entrega") or ""
    parts = [
        record.get("numero_reserva"),
        cliente.get("nombre"),
        cliente.get("telefono"),
        record.get("nombre_barco"),
        record.get("numero_amarre"),
        location,
        str(LOCATION_LABELS.get(location, "")),
        " ".join(item.producto_nombre for item in record.items),
    ]
    return " ".join(str(part) for part in parts if part).lower()


def filter_for_delivery(records: Iterable[BookingRecord], term: str = "") -> List[BookingRecord]:
    """Active bookings, optionally narrowed by a case-insensitive search term."""
    term = term.strip().lower()
    return [
        record
        for record in records
        if is_pending_delivery(record) and (not term or term in search_text(record))
    ]
