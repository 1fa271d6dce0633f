"""
Serializers for analytics app.

Input Serializers:
    PriceCheckQuerySerializer - Validates price comparison parameters
    AskQuestionSerializer - Validates analyst questions

Response Serializers:
    ProductPriceHistorySerializer - Price history and average per product
    LastPricesSerializer - Last price per product
    PriceCheckSerializer - Entered price compared with the last one
    CommonItemsSerializer - Products requested by every restaurant
    ShoppingTotalSerializer - Open shopping list total
    AnalystAnswerSerializer - Analyst answer text
"""

from decimal import ROUND_HALF_UP

from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class PriceCheckQuerySerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class AskQuestionSerializer(serializers.Serializer):
    question = serializers.CharField(max_length=2000, allow_blank=True)


# =============================================================================
# Response Serializers
# =============================================================================

class PricePointSerializer(serializers.Serializer):
    date = serializers.DateTimeField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    restaurant = serializers.CharField()


class ProductPriceHistorySerializer(serializers.Serializer):
    product_id = serializers.CharField()
    product = serializers.JSONField()
    average_price = serializers.DecimalField(max_digits=12, decimal_places=2, rounding=ROUND_HALF_UP)
    purchase_count = serializers.IntegerField()
    history = PricePointSerializer(many=True)


class LastPricesSerializer(serializers.Serializer):
    prices = serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=2)
    )


class PriceCheckSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    last_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    trend = serializers.ChoiceField(
        choices=['higher', 'lower', 'same'], allow_null=True
    )


class CommonItemsSerializer(serializers.Serializer):
    product_ids = serializers.ListField(child=serializers.CharField())


class ShoppingTotalSerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=14, decimal_places=2)


class ExampleQuestionsSerializer(serializers.Serializer):
    questions = serializers.ListField(child=serializers.CharField())


class AnalystAnswerSerializer(serializers.Serializer):
    answer = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    """Error response."""
    error = serializers.CharField()
