# ==========================================
# apps/catalog/models.py
# ==========================================

from django.db import models
import uuid


class Restaurant(models.TextChoices):
    MIDIEBI = 'midiebi', 'მიდიები'
    SAKHINKLE = 'sakhinkle', 'სახინკლე'


class Unit(models.TextChoices):
    KILOGRAM = 'კგ', 'კგ'
    LITRE = 'ლიტრი', 'ლიტრი'
    PIECE = 'ცალი', 'ცალი'
    BUNDLE = 'შეკვრა', 'შეკვრა'


class Language(models.TextChoices):
    GEORGIAN = 'ka', 'ქართული'
    ENGLISH = 'en', 'English'
    RUSSIAN = 'ru', 'Русский'


class Product(models.Model):
    """Orderable catalog item, localized in Georgian, English and Russian."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name_ka = models.CharField(max_length=200, db_index=True)
    name_en = models.CharField(max_length=200, blank=True)
    name_ru = models.CharField(max_length=200, blank=True)
    category_ka = models.CharField(max_length=200, db_index=True)
    category_en = models.CharField(max_length=200, blank=True)
    category_ru = models.CharField(max_length=200, blank=True)
    default_unit = models.CharField(max_length=20, choices=Unit.choices, default=Unit.KILOGRAM)
    restaurants = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name_ka']

    def __str__(self):
        return self.name_ka

    def name(self, language=Language.GEORGIAN):
        return getattr(self, f'name_{language}', '') or self.name_ka

    def category(self, language=Language.GEORGIAN):
        return getattr(self, f'category_{language}', '') or self.category_ka

    def is_available_to(self, restaurant):
        return restaurant in (self.restaurants or [])

    def snapshot(self):
        """Embedded copy stored on order items and archive records."""
        return {
            'id': str(self.id),
            'name_ka': self.name_ka,
            'name_en': self.name_en,
            'name_ru': self.name_ru,
            'category_ka': self.category_ka,
            'category_en': self.category_en,
            'category_ru': self.category_ru,
            'default_unit': self.default_unit,
            'restaurants': list(self.restaurants or []),
        }
