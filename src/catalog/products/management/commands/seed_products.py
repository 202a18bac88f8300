from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.products.models import Product

SEED_PRODUCTS = [
    ("Laptop", "Gaming laptop model X", Decimal("1999.99"), 5, "Electronics"),
    ("Wireless Mouse", "Ergonomic wireless mouse", Decimal("29.90"), 120, "Electronics"),
    ("Desk Lamp", "LED desk lamp with dimmer", Decimal("45.00"), 8, "Home"),
    ("Office Chair", "Adjustable mesh office chair", Decimal("249.50"), 15, "Furniture"),
    ("Notebook A5", "Dotted notebook, 120 pages", Decimal("6.75"), 300, "Stationery"),
    ("Coffee Grinder", "Burr coffee grinder, 15 settings", Decimal("89.00"), 3, "Kitchen"),
]


class Command(BaseCommand):
    help = "Seed the catalogue with demo products (skips names that already exist)."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, description, price, quantity, category in SEED_PRODUCTS:
            if Product.objects.filter(name__iexact=name).exists():
                continue
            Product.objects.create(
                name=name,
                description=description,
                price=price,
                quantity=quantity,
                category=category,
            )
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, skipped={len(SEED_PRODUCTS) - created}"
            )
        )
