"""URL routing for the delivery team."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import DeliveryBookingListView

urlpatterns = [
    path("bookings/", DeliveryBookingListView.as_view(), name="delivery-bookings"),
]
