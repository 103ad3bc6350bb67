"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Filters used by the admin and partner booking lists."""

    desde = django_filters.DateFilter(field_name="fecha_inicio", lookup_expr="gte")
    hasta = django_filters.DateFilter(field_name="fecha_inicio", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = [
            "estado",
            "broker_id",
            "agency_id",
            "pago_realizado",
        ]
