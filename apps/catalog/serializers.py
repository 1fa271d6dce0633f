from rest_framework import serializers
from .models import Product, Restaurant, Unit, Language


class ProductSerializer(serializers.ModelSerializer):
    """Main serializer for catalog products."""

    class Meta:
        model = Product
        fields = [
            'id',
            'name_ka',
            'name_en',
            'name_ru',
            'category_ka',
            'category_en',
            'category_ru',
            'default_unit',
            'restaurants',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """Administrator input for creating or updating a product."""

    name_ka = serializers.CharField(max_length=200)
    name_en = serializers.CharField(max_length=200, required=False, allow_blank=True)
    name_ru = serializers.CharField(max_length=200, required=False, allow_blank=True)
    category_ka = serializers.CharField(max_length=200)
    category_en = serializers.CharField(max_length=200, required=False, allow_blank=True)
    category_ru = serializers.CharField(max_length=200, required=False, allow_blank=True)
    default_unit = serializers.ChoiceField(choices=Unit.choices, default=Unit.KILOGRAM)
    restaurants = serializers.ListField(
        child=serializers.ChoiceField(choices=Restaurant.choices),
        required=False,
        allow_empty=True,
    )


class AdHocProductSerializer(serializers.Serializer):
    """Chef input for a product the catalog is missing."""

    name = serializers.CharField(max_length=200)
    category = serializers.CharField(max_length=200)
    default_unit = serializers.ChoiceField(choices=Unit.choices, default=Unit.KILOGRAM)


class ProductQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default='')
    restaurant = serializers.ChoiceField(choices=Restaurant.choices, required=False)


class LanguageQuerySerializer(serializers.Serializer):
    language = serializers.ChoiceField(choices=Language.choices, default=Language.GEORGIAN)


class CategoryGroupSerializer(serializers.Serializer):
    category = serializers.CharField()
    products = ProductSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
