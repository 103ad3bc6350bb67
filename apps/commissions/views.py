"""API views for commissions."""

from __future__ import annotations

import logging

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.models import Booking

from .calculator import format_currency
from .serializers import PartnerCommissionSummarySerializer
from .services import booking_commission, partner_commissions

logger = logging.getLogger(__name__)


class PartnerCommissionView(APIView):
    """Resumen de comisiones de un broker o agencia."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, partner_type: str, partner_id: str):  # type: ignore
        try:
            summary = partner_commissions(partner_id, partner_type)
        except ValueError as exc:
            logger.warning(f"Partner commission lookup rejected: {exc}")
            return Response({"detail": "Tipo de partner desconocido."}, status=status.HTTP_400_BAD_REQUEST)
        return Response(PartnerCommissionSummarySerializer(summary).data)


class BookingCommissionView(APIView):
    """Comisión de una reserva según el precio diario del catálogo."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, pk: int):  # type: ignore
        booking = get_object_or_404(Booking, pk=pk)
        amount = booking_commission(booking)
        return Response(
            {
                "booking": booking.pk,
                "numero_reserva": booking.numero_reserva,
                "comision": amount,
                "comision_formateada": format_currency(amount),
            }
        )
