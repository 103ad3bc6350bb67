"""API views for the catalog."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore

from .models import Product
from .serializers import ProductSerializer


class ProductViewSet(viewsets.ModelViewSet):
    """Catálogo: lectura pública, escritura para usuarios autenticados."""

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    filterset_fields = ["tipo", "activo"]
