"""Catalog models for the rental center."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Product(models.Model):
    """Producto alquilable del catálogo."""

    class Type(models.TextChoices):
        SEABOB = "seabob", _("Seabob")
        JETSKI = "jetski", _("Moto de agua")
        SERVICE = "servicio", _("Servicio")

    nombre = models.CharField(max_length=120)
    descripcion = models.TextField(blank=True)
    tipo = models.CharField(max_length=20, choices=Type.choices, default=Type.SEABOB)
    precio_diario = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    precio_hora = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    comision = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        help_text=_("Porcentaje de comisión para brokers y agencias (0-100)."),
    )
    imagen_url = models.URLField(blank=True)
    activo = models.BooleanField(default=True)
    creado_por = models.CharField(max_length=64, blank=True)
    creado_en = models.DateTimeField(auto_now_add=True)
    actualizado_en = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Producto")
        verbose_name_plural = _("Productos")
        ordering = ["nombre"]

    def __str__(self) -> str:
        return self.nombre

    @classmethod
    def lookup_table(cls, product_ids=None) -> dict[str, "Product"]:
        """Products keyed by string id, as booking items reference them."""
        queryset = cls.objects.all()
        if product_ids is not None:
            numeric_ids = [pid for pid in product_ids if str(pid).isdigit()]
            queryset = queryset.filter(pk__in=numeric_ids)
        return {str(product.pk): product for product in queryset}
