"""
Management command to seed the product catalog.

Usage:
    python manage.py seed_products
    python manage.py seed_products --force
    python manage.py seed_products --file path/to/products.json

The catalog is only seeded while it is empty, so the command is safe to
run on every deploy. ``--force`` replaces the existing catalog.
"""

import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.catalog.models import Product

DEFAULT_FIXTURE = Path(__file__).resolve().parents[2] / 'fixtures' / 'products.json'

PRODUCT_FIELDS = (
    'name_ka', 'name_en', 'name_ru',
    'category_ka', 'category_en', 'category_ru',
    'default_unit', 'restaurants',
)


class Command(BaseCommand):
    help = 'Seed the product catalog when it is empty'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Delete existing products and seed again',
        )
        parser.add_argument(
            '--file',
            default=str(DEFAULT_FIXTURE),
            help='JSON file with a list of products',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if Product.objects.exists():
            if not options['force']:
                self.stdout.write('Catalog already has products, nothing to seed.')
                return
            self.stdout.write('Clearing existing products...')
            Product.objects.all().delete()

        products = self.load_products(options['file'])
        Product.objects.bulk_create(products)

        self.stdout.write(self.style.SUCCESS(f'Seeded {len(products)} products.'))

    def load_products(self, path):
        try:
            with open(path, encoding='utf-8') as fh:
                rows = json.load(fh)
        except (OSError, ValueError) as e:
            raise CommandError(f'Cannot read product file {path}: {e}')

        products = []
        for row in rows:
            fields = {field: row[field] for field in PRODUCT_FIELDS if field in row}
            if 'id' in row:
                fields['id'] = row['id']
            products.append(Product(**fields))
        return products
