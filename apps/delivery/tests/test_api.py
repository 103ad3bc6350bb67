"""Tests for the delivery list endpoint."""

from __future__ import annotations

from datetime import date, timedelta

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking


class DeliveryBookingListTests(APITestCase):
    """Listado de entregas: solo reservas activas desde hoy."""

    def setUp(self) -> None:
        self.staff = get_user_model().objects.create_user(username="reparto", password="RepartoPass123")
        self.url = reverse("delivery-bookings")
        self.today = timezone.localdate()

    def _booking(self, offset_days: int, **extra) -> Booking:
        start = self.today + timedelta(days=offset_days)
        defaults = {
            "fecha_inicio": start,
            "fecha_fin": start + timedelta(days=1),
            "items": [{"producto_id": "1", "cantidad": 2, "duracion": 1, "producto_nombre": "Seabob F5"}],
            "cliente": {"nombre": "Marta Ruiz", "email": "marta@example.com", "telefono": "+34600111222"},
            "ubicacion_entrega": Booking.DeliveryLocation.MARINA_IBIZA,
        }
        defaults.update(extra)
        return Booking.objects.create(**defaults)

    def test_requires_authentication(self) -> None:
        response = self.client.get(self.url)
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_lists_upcoming_active_bookings_in_date_order(self) -> None:
        self._booking(-1)
        later = self._booking(5)
        today = self._booking(0)
        self._booking(2, estado=Booking.Status.CANCELLED)
        self._booking(3, estado=Booking.Status.EXPIRED)
        self._booking(4, expirado=True)
        self.client.force_authenticate(self.staff)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["today"], self.today.strftime("%Y-%m-%d"))
        self.assertFalse(response.data["loading"])
        self.assertEqual([row["id"] for row in response.data["results"]], [str(today.pk), str(later.pk)])
        first = response.data["results"][0]
        self.assertEqual(first["numero_reserva"], today.numero_reserva)
        self.assertEqual(first["fecha_inicio"], self.today.strftime("%Y-%m-%d"))
        self.assertEqual(first["cliente"]["nombre"], "Marta Ruiz")

    def test_search_matches_boat_client_and_location(self) -> None:
        boat = self._booking(1, nombre_barco="Lady Nerea", cliente={"nombre": "Iván Costa", "email": "ivan@example.com"})
        botafoch = self._booking(2, ubicacion_entrega=Booking.DeliveryLocation.MARINA_BOTAFOCH)
        self.client.force_authenticate(self.staff)

        by_boat = self.client.get(self.url, {"q": "nerea"})
        by_client = self.client.get(self.url, {"q": "  IVÁN "})
        by_location = self.client.get(self.url, {"q": "botafoch"})
        by_product = self.client.get(self.url, {"q": "seabob"})

        self.assertEqual([row["id"] for row in by_boat.data["results"]], [str(boat.pk)])
        self.assertEqual([row["id"] for row in by_client.data["results"]], [str(boat.pk)])
        self.assertEqual([row["id"] for row in by_location.data["results"]], [str(botafoch.pk)])
        self.assertEqual(len(by_product.data["results"]), 2)

    def test_feed_subscription_is_released_after_request(self) -> None:
        self.client.force_authenticate(self.staff)
        self.client.get(self.url)
        self._booking(1)

        response = self.client.get(self.url)

        self.assertEqual(len(response.data["results"]), 1)
