"""Serializers for commission summaries."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.models import Booking


class PendingCommissionBookingSerializer(serializers.ModelSerializer):
    comision_pendiente = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "numero_reserva",
            "fecha_inicio",
            "estado",
            "comision_total",
            "comision_pagada",
            "comision_pendiente",
            "creado_en",
        ]


class PartnerCommissionSummarySerializer(serializers.Serializer):
    total_comisiones = serializers.FloatField()
    total_pagado = serializers.FloatField()
    pendiente = serializers.FloatField()
    num_reservas = serializers.IntegerField()
    reservas_pendientes = PendingCommissionBookingSerializer(many=True)
