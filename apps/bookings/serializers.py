"""Serializers for the booking domain."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from rest_framework import serializers  # type: ignore

from apps.commissions.services import refresh_commission_total
from shared.domain.value_objects import DateRange

from .domain.entities import RENTAL_BY_DAY, RENTAL_BY_HOUR
from .models import Booking


class BookingItemSerializer(serializers.Serializer):
    """Línea de reserva."""

    producto_id = serializers.CharField(max_length=64)
    cantidad = serializers.IntegerField(min_value=1)
    duracion = serializers.IntegerField(min_value=1)
    tipo_alquiler = serializers.ChoiceField(choices=[RENTAL_BY_DAY, RENTAL_BY_HOUR], default=RENTAL_BY_DAY)
    precio_unitario = serializers.FloatField(min_value=0, required=False)
    comision_percent = serializers.FloatField(min_value=0, max_value=100, required=False)
    producto_nombre = serializers.CharField(max_length=120, required=False, allow_blank=True)


class ClientSerializer(serializers.Serializer):
    nombre = serializers.CharField(max_length=120)
    email = serializers.EmailField()
    telefono = serializers.CharField(max_length=32, required=False, allow_blank=True)
    whatsapp = serializers.CharField(max_length=32, required=False, allow_blank=True)


class BookingSerializer(serializers.ModelSerializer):
    """Reserva completa; la comisión se recalcula en cada escritura."""

    items = BookingItemSerializer(many=True)
    cliente = ClientSerializer()

    class Meta:
        model = Booking
        fields = [
            "id",
            "numero_reserva",
            "cliente",
            "broker_id",
            "agency_id",
            "colaborador_id",
            "items",
            "fecha_inicio",
            "fecha_fin",
            "ubicacion_entrega",
            "nombre_barco",
            "numero_amarre",
            "hora_entrega",
            "precio_total",
            "estado",
            "acuerdo_firmado",
            "pago_realizado",
            "pago_realizado_en",
            "comision_total",
            "comision_pagada",
            "expiracion",
            "expirado",
            "notas",
            "creado_por",
            "creado_en",
            "actualizado_en",
        ]
        read_only_fields = [
            "id",
            "numero_reserva",
            "comision_total",
            "expiracion",
            "expirado",
            "creado_en",
            "actualizado_en",
        ]

    def validate_items(self, items):  # type: ignore
        if not items:
            raise serializers.ValidationError("Debes añadir al menos un producto.")
        return items

    def validate(self, attrs):  # type: ignore
        fecha_inicio = attrs.get("fecha_inicio", getattr(self.instance, "fecha_inicio", None))
        fecha_fin = attrs.get("fecha_fin", getattr(self.instance, "fecha_fin", None))
        if fecha_inicio and fecha_fin:
            try:
                DateRange(fecha_inicio, fecha_fin)
            except ValueError:
                raise serializers.ValidationError(
                    "La fecha de fin no puede ser anterior a la fecha de inicio."
                ) from None
        return attrs

    def _normalise(self, validated_data):  # type: ignore
        data = dict(validated_data)
        if "items" in data:
            data["items"] = [dict(item) for item in data["items"]]
        if "cliente" in data:
            data["cliente"] = dict(data["cliente"])
        return data

    def create(self, validated_data):  # type: ignore
        booking = Booking(**self._normalise(validated_data))
        if booking.estado == Booking.Status.PENDING and not booking.pago_realizado:
            booking.expiracion = timezone.now() + settings.BOOKING_HOLD_TIMEOUT
        refresh_commission_total(booking)
        with transaction.atomic():
            booking.save()
        return booking

    def update(self, instance, validated_data):  # type: ignore
        for attr, value in self._normalise(validated_data).items():
            setattr(instance, attr, value)
        refresh_commission_total(instance)
        with transaction.atomic():
            instance.save()
        return instance
