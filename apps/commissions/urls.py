"""URL routing for commissions."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCommissionView, PartnerCommissionView

urlpatterns = [
    path(
        "partners/<str:partner_type>/<str:partner_id>/",
        PartnerCommissionView.as_view(),
        name="partner-commissions",
    ),
    path("bookings/<int:pk>/", BookingCommissionView.as_view(), name="booking-commission"),
]
