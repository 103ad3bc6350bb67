"""API views for the delivery team."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .feed import DeliveryBookingFeed
from .services import booking_document_store, filter_for_delivery


class DeliveryBookingListView(APIView):
    """Reservas próximas pendientes de entrega."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        feed = DeliveryBookingFeed(booking_document_store())
        with feed:
            state = feed.state
        records = filter_for_delivery(state.bookings, request.query_params.get("q", ""))
        return Response(
            {
                "today": state.today_str,
                "loading": state.loading,
                "results": [record.to_dict() for record in records],
            }
        )
