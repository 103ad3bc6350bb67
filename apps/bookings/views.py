"""API views for the booking domain."""

from __future__ import annotations

import logging

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import BookingFilterSet
from .models import Booking
from .serializers import BookingSerializer

logger = logging.getLogger(__name__)


class BookingViewSet(viewsets.ModelViewSet):
    """Viewset para crear y gestionar reservas."""

    queryset = Booking.objects.all()
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = BookingFilterSet

    def perform_create(self, serializer):  # type: ignore
        user = self.request.user
        booking = serializer.save(creado_por=str(user.pk))
        logger.info(f"Booking {booking.numero_reserva} created by user {user.pk}")

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        booking: Booking = self.get_object()  # type: ignore
        if booking.estado in [Booking.Status.COMPLETED, Booking.Status.EXPIRED, Booking.Status.CANCELLED]:
            return Response(
                {"detail": "No se puede cancelar una reserva completada, expirada o ya cancelada."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        booking.estado = Booking.Status.CANCELLED
        booking.save(update_fields=["estado", "actualizado_en"])
        logger.info(f"Booking {booking.numero_reserva} cancelled by user {request.user.pk}")
        return Response({"estado": booking.estado}, status=status.HTTP_200_OK)
