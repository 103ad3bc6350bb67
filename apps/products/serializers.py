"""Serializers for the catalog."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "nombre",
            "descripcion",
            "tipo",
            "precio_diario",
            "precio_hora",
            "comision",
            "imagen_url",
            "activo",
            "creado_en",
        ]
        read_only_fields = ["id", "creado_en"]
