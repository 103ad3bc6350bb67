"""Admin registration for the catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("nombre", "tipo", "precio_diario", "precio_hora", "comision", "activo")
    list_filter = ("tipo", "activo")
    search_fields = ("nombre", "descripcion")
    readonly_fields = ("creado_en", "actualizado_en")
