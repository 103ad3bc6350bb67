"""Booking domain models for the rental center."""

from __future__ import annotations

import secrets
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import BookingItem


def generate_booking_reference(created: date | None = None) -> str:
    """Reference in REF-DDMMYYYY-XXXX form."""
    created = created or timezone.localdate()
    return f"REF-{created.strftime('%d%m%Y')}-{secrets.randbelow(10_000):04d}"


class Booking(models.Model):
    """Reserva de productos del centro de alquiler."""

    class Status(models.TextChoices):
        PENDING = "pendiente", _("Pendiente")
        CONFIRMED = "confirmada", _("Confirmada")
        COMPLETED = "completada", _("Completada")
        CANCELLED = "cancelada", _("Cancelada")
        EXPIRED = "expirada", _("Expirada")

    class DeliveryLocation(models.TextChoices):
        MARINA_IBIZA = "marina_ibiza", _("Marina Ibiza")
        MARINA_BOTAFOCH = "marina_botafoch", _("Marina Botafoch")
        CLUB_NAUTICO = "club_nautico", _("Club Náutico")
        OTHER = "otro", _("Otro")

    numero_reserva = models.CharField(max_length=20, unique=True, editable=False)
    cliente = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("Datos del cliente: nombre, email, telefono, whatsapp."),
    )
    broker_id = models.CharField(max_length=64, blank=True, db_index=True)
    agency_id = models.CharField(max_length=64, blank=True, db_index=True)
    colaborador_id = models.CharField(max_length=64, blank=True)
    items = models.JSONField(default=list, help_text=_("Líneas de la reserva."))
    fecha_inicio = models.DateField()
    fecha_fin = models.DateField()
    ubicacion_entrega = models.CharField(max_length=20, choices=DeliveryLocation.choices, blank=True)
    nombre_barco = models.CharField(max_length=120, blank=True)
    numero_amarre = models.CharField(max_length=32, blank=True)
    hora_entrega = models.CharField(max_length=5, blank=True, help_text=_("Formato HH:mm."))
    token_acceso = models.CharField(max_length=32, blank=True, editable=False)
    precio_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    estado = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    acuerdo_firmado = models.BooleanField(default=False)
    pago_realizado = models.BooleanField(default=False)
    pago_realizado_en = models.DateTimeField(null=True, blank=True)
    comision_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    comision_pagada = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    expiracion = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("Momento en que la reserva sin pago ni firma caduca."),
    )
    expirado = models.BooleanField(default=False)
    notas = models.TextField(blank=True)
    creado_por = models.CharField(max_length=64, blank=True)
    creado_en = models.DateTimeField(auto_now_add=True)
    actualizado_en = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Reserva")
        verbose_name_plural = _("Reservas")
        ordering = ["fecha_inicio", "id"]
        indexes = [
            models.Index(fields=["fecha_inicio"], name="booking_fecha_inicio_idx"),
            models.Index(fields=["estado"], name="booking_estado_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.numero_reserva} ({self.estado})"

    def save(self, *args, **kwargs):  # type: ignore
        if not self.numero_reserva:
            self.numero_reserva = self._unique_reference()
        if not self.token_acceso:
            self.token_acceso = secrets.token_urlsafe(18)[:24]
        super().save(*args, **kwargs)

    def _unique_reference(self) -> str:
        while True:
            reference = generate_booking_reference()
            if not Booking.objects.filter(numero_reserva=reference).exists():
                return reference

    @property
    def booking_items(self) -> list[BookingItem]:
        return [BookingItem.from_dict(item) for item in self.items or []]

    @property
    def comision_pendiente(self) -> Decimal:
        return (self.comision_total or Decimal("0")) - (self.comision_pagada or Decimal("0"))

    def should_expire(self, now: datetime | None = None) -> bool:
        """Pending, past its hold deadline, and neither paid nor signed."""
        if self.estado != self.Status.PENDING or self.expirado:
            return False
        if self.expiracion is None or self.pago_realizado or self.acuerdo_firmado:
            return False
        return (now or timezone.now()) > self.expiracion

    def to_document(self) -> dict[str, Any]:
        """Stored fields as a JSON-ready document (dates as ISO strings, amounts as numbers)."""
        document: dict[str, Any] = {}
        for model_field in self._meta.concrete_fields:
            if model_field.primary_key:
                continue
            value = getattr(self, model_field.attname)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, date):
                value = value.strftime("%Y-%m-%d")
            elif isinstance(value, Decimal):
                value = float(value)
            document[model_field.name] = value
        return document
