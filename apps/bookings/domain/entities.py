"""
Booking Domain Records

Typed, immutable views over booking documents:
- BookingItem: one line of a booking (product, quantity, duration)
- BookingRecord: a booking as read from the document store, with every
  stored field carried through verbatim
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from shared.domain.base import ValueObject
from shared.infrastructure.document_store import Document

RENTAL_BY_DAY = 'dia'
RENTAL_BY_HOUR = 'hora'


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class BookingItem(ValueObject):
    """
    Booking line item

    duracion counts rental periods: hours for hourly rentals, days
    otherwise. precio_unitario and comision_percent, when present,
    override the product's catalog values.
    """
    producto_id: str
    cantidad: int
    duracion: int
    tipo_alquiler: str = RENTAL_BY_DAY
    precio_unitario: Optional[float] = None
    comision_percent: Optional[float] = None
    producto_nombre: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'BookingItem':
        return cls(
            producto_id=str(data.get('producto_id', '')),
            cantidad=int(data.get('cantidad') or 0),
            duracion=int(data.get('duracion') or 0),
            tipo_alquiler=data.get('tipo_alquiler') or RENTAL_BY_DAY,
            precio_unitario=_optional_float(data.get('precio_unitario')),
            comision_percent=_optional_float(data.get('comision_percent')),
            producto_nombre=data.get('producto_nombre') or '',
        )

    @property
    def is_hourly(self) -> bool:
        return self.tipo_alquiler == RENTAL_BY_HOUR


@dataclass(frozen=True)
class BookingRecord(ValueObject):
    """Booking projected from a store document."""
    id: str
    fecha_inicio: str
    items: Tuple[BookingItem, ...] = ()
    fields: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_document(cls, document: Document) -> 'BookingRecord':
        data = dict(document.data)
        items = tuple(
            BookingItem.from_dict(item)
            for item in data.get('items') or ()
            if isinstance(item, Mapping)
        )
        return cls(
            id=document.id,
            fecha_inicio=str(data.get('fecha_inicio', '')),
            items=items,
            fields=data,
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """The original document: id plus all stored fields."""
        return {'id': self.id, **self.fields}
