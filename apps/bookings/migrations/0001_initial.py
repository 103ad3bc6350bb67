from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("numero_reserva", models.CharField(editable=False, max_length=20, unique=True)),
                (
                    "cliente",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Datos del cliente: nombre, email, telefono, whatsapp.",
                    ),
                ),
                ("broker_id", models.CharField(blank=True, db_index=True, max_length=64)),
                ("agency_id", models.CharField(blank=True, db_index=True, max_length=64)),
                ("colaborador_id", models.CharField(blank=True, max_length=64)),
                ("items", models.JSONField(default=list, help_text="Líneas de la reserva.")),
                ("fecha_inicio", models.DateField()),
                ("fecha_fin", models.DateField()),
                (
                    "ubicacion_entrega",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("marina_ibiza", "Marina Ibiza"),
                            ("marina_botafoch", "Marina Botafoch"),
                            ("club_nautico", "Club Náutico"),
                            ("otro", "Otro"),
                        ],
                        max_length=20,
                    ),
                ),
                ("nombre_barco", models.CharField(blank=True, max_length=120)),
                ("numero_amarre", models.CharField(blank=True, max_length=32)),
                ("hora_entrega", models.CharField(blank=True, help_text="Formato HH:mm.", max_length=5)),
                ("token_acceso", models.CharField(blank=True, editable=False, max_length=32)),
                ("precio_total", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                (
                    "estado",
                    models.CharField(
                        choices=[
                            ("pendiente", "Pendiente"),
                            ("confirmada", "Confirmada"),
                            ("completada", "Completada"),
                            ("cancelada", "Cancelada"),
                            ("expirada", "Expirada"),
                        ],
                        default="pendiente",
                        max_length=20,
                    ),
                ),
                ("acuerdo_firmado", models.BooleanField(default=False)),
                ("pago_realizado", models.BooleanField(default=False)),
                ("pago_realizado_en", models.DateTimeField(blank=True, null=True)),
                ("comision_total", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("comision_pagada", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                (
                    "expiracion",
                    models.DateTimeField(
                        blank=True,
                        help_text="Momento en que la reserva sin pago ni firma caduca.",
                        null=True,
                    ),
                ),
                ("expirado", models.BooleanField(default=False)),
                ("notas", models.TextField(blank=True)),
                ("creado_por", models.CharField(blank=True, max_length=64)),
                ("creado_en", models.DateTimeField(auto_now_add=True)),
                ("actualizado_en", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Reserva",
                "verbose_name_plural": "Reservas",
                "ordering": ["fecha_inicio", "id"],
                "indexes": [
                    models.Index(fields=["fecha_inicio"], name="booking_fecha_inicio_idx"),
                    models.Index(fields=["estado"], name="booking_estado_idx"),
                ],
            },
        ),
    ]
