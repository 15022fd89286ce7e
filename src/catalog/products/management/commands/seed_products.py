from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from django.core.management.base import BaseCommand

from catalog.products.dtos import ProductCreateDTO
from catalog.products.models import Product
from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.services import ProductService

PHONES = UUID("63d14238-8362-4242-a4a9-ef2d9b1ce7e8")
ACCESSORIES = UUID("6258e123-bd24-441c-857f-cb2764ecf8f7")

GOOGLE = UUID("235f43c8-6202-47d1-9954-154f0607191b")
SPIGEN = UUID("eadfe4c9-731d-4556-978c-2f9105a1550b")
SAMSUNG = UUID("7487fb0d-09b1-4580-a470-66cc74bb3282")

CATALOG = [
    # (id, name, category, supplier, unit price, units in stock, discontinued)
    (
        UUID("5784d3df-e2da-4be7-b6e7-4a17d51ec2ac"),
        "Google Pixel 7 Pro (128 GB Storage, 12 GB RAM)",
        PHONES,
        GOOGLE,
        Decimal("80000.00"),
        10000,
        False,
    ),
    (
        UUID("330b834a-ce6a-4db4-86f6-9f6ae94b8280"),
        "Spigen Liquid Case for Google Pixel 7 Pro",
        ACCESSORIES,
        SPIGEN,
        Decimal("1000.00"),
        1000,
        False,
    ),
    (
        UUID("120af4f8-69f8-4a41-9c3e-dd2357b4baee"),
        "Samsung Galaxy Note 20",
        PHONES,
        SAMSUNG,
        Decimal("120000.00"),
        0,
        True,
    ),
]


class Command(BaseCommand):
    help = "Seed the product table with a small development catalog."

    def handle(self, *args, **options):
        if Product.objects.exists():
            self.stdout.write(
                self.style.WARNING("Products already present, skipping seed.")
            )
            return

        self.stdout.write("Creating products...")
        products = [
            ProductCreateDTO(
                id=product_id,
                product_name=name,
                category_id=category,
                supplier_id=supplier,
                unit_price=price,
                units_in_stock=stock,
                discontinued=discontinued,
            )
            for product_id, name, category, supplier, price, stock, discontinued in CATALOG
        ]
        service = ProductService(repository=ProductDjangoRepository())
        created = service.add_products(products)

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(created)}")
        )
