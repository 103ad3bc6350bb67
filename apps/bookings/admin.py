"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "numero_reserva",
        "fecha_inicio",
        "fecha_fin",
        "estado",
        "pago_realizado",
        "precio_total",
        "comision_total",
        "comision_pagada",
        "creado_en",
    )
    list_filter = ("estado", "pago_realizado", "acuerdo_firmado", "ubicacion_entrega", "fecha_inicio")
    search_fields = ("numero_reserva", "nombre_barco", "broker_id", "agency_id")
    readonly_fields = (
        "numero_reserva",
        "token_acceso",
        "comision_total",
        "creado_en",
        "actualizado_en",
    )
