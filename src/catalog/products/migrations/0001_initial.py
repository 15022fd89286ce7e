from decimal import Decimal

import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("product_name", models.CharField(max_length=255)),
                ("category_id", models.UUIDField()),
                ("supplier_id", models.UUIDField()),
                (
                    "unit_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=18,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(
                                Decimal("9999999999999.99")
                            ),
                        ],
                    ),
                ),
                ("units_in_stock", models.PositiveIntegerField()),
                ("discontinued", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "product",
                "indexes": [
                    models.Index(
                        fields=["product_name", "discontinued"],
                        name="product_name_active_idx",
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(unit_price__gte=0),
                        name="product_unit_price_non_negative",
                    )
                ],
            },
        ),
    ]
