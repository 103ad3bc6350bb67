from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=120)),
                ("descripcion", models.TextField(blank=True)),
                (
                    "tipo",
                    models.CharField(
                        choices=[("seabob", "Seabob"), ("jetski", "Moto de agua"), ("servicio", "Servicio")],
                        default="seabob",
                        max_length=20,
                    ),
                ),
                ("precio_diario", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("precio_hora", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                (
                    "comision",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Porcentaje de comisión para brokers y agencias (0-100).",
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                ("imagen_url", models.URLField(blank=True)),
                ("activo", models.BooleanField(default=True)),
                ("creado_por", models.CharField(blank=True, max_length=64)),
                ("creado_en", models.DateTimeField(auto_now_add=True)),
                ("actualizado_en", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Producto",
                "verbose_name_plural": "Productos",
                "ordering": ["nombre"],
            },
        ),
    ]
