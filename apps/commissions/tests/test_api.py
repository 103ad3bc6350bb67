"""API tests for commission endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.products.models import Product


class CommissionAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = get_user_model().objects.create_user(username="broker-admin", password="BrokerPass123")
        self.client.force_authenticate(self.user)
        self.product = Product.objects.create(
            nombre="Seabob F5",
            precio_diario=Decimal("1000.00"),
            comision=Decimal("10.00"),
        )

    def _booking(self, **extra) -> Booking:
        defaults = {
            "fecha_inicio": date(2026, 6, 1),
            "fecha_fin": date(2026, 6, 2),
            "items": [{"producto_id": str(self.product.pk), "cantidad": 1, "duracion": 1}],
            "estado": Booking.Status.CONFIRMED,
        }
        defaults.update(extra)
        return Booking.objects.create(**defaults)

    def test_partner_summary(self) -> None:
        owed = self._booking(broker_id="br-1", comision_total=Decimal("120.00"), comision_pagada=Decimal("20.00"))
        self._booking(broker_id="br-1", comision_total=Decimal("30.00"), comision_pagada=Decimal("30.00"))
        url = reverse("partner-commissions", args=["broker", "br-1"])

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["num_reservas"], 2)
        self.assertAlmostEqual(response.data["total_comisiones"], 150.0)
        self.assertAlmostEqual(response.data["total_pagado"], 50.0)
        self.assertAlmostEqual(response.data["pendiente"], 100.0)
        pending = response.data["reservas_pendientes"]
        self.assertEqual([row["id"] for row in pending], [owed.pk])
        self.assertEqual(pending[0]["comision_pendiente"], "100.00")

    def test_unknown_partner_type_returns_400(self) -> None:
        url = reverse("partner-commissions", args=["colaborador", "c-1"])

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Tipo de partner desconocido.")

    def test_booking_commission_is_formatted_in_euros(self) -> None:
        booking = self._booking(
            items=[{"producto_id": str(self.product.pk), "cantidad": 1, "duracion": 1}],
        )
        url = reverse("booking-commission", args=[booking.pk])

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertAlmostEqual(response.data["comision"], 100.0)
        self.assertEqual(response.data["comision_formateada"], "100,00\u00a0€")
        self.assertEqual(response.data["numero_reserva"], booking.numero_reserva)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("partner-commissions", args=["agency", "a-1"]))

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
