from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdministrator

from .analytics import PriceAnalytics
from .analyst import ask_analyst, EXAMPLE_QUESTIONS
from .serializers import (
    # Input serializers
    PriceCheckQuerySerializer,
    AskQuestionSerializer,
    # Response serializers
    ProductPriceHistorySerializer,
    LastPricesSerializer,
    PriceCheckSerializer,
    CommonItemsSerializer,
    ShoppingTotalSerializer,
    ExampleQuestionsSerializer,
    AnalystAnswerSerializer,
    ErrorSerializer,
)
from .exceptions import EmptyQuestionError, AnalystUnavailableError


@extend_schema(
    responses={200: ProductPriceHistorySerializer(many=True)},
    description="Unit price history and average price per product, sorted by Georgian name.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdministrator])
def price_history(request):
    """Finance view - thin HTTP handler."""
    data = PriceAnalytics.price_history()
    return Response(ProductPriceHistorySerializer(data, many=True).data)


@extend_schema(
    responses={200: LastPricesSerializer},
    description="Most recent positive unit price per product id.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdministrator])
def last_prices(request):
    return Response(LastPricesSerializer({'prices': PriceAnalytics.last_prices()}).data)


@extend_schema(
    parameters=[
        OpenApiParameter('product_id', OpenApiTypes.UUID, description='Catalog product id'),
        OpenApiParameter('price', OpenApiTypes.NUMBER, description='Entered unit price'),
    ],
    responses={200: PriceCheckSerializer, 400: ErrorSerializer},
    description="Compare an entered unit price with the last price paid for the product.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdministrator])
def price_check(request):
    query = PriceCheckQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    product_id = query.validated_data['product_id']
    price = query.validated_data['price']

    last_price = PriceAnalytics.last_prices().get(str(product_id))
    return Response(PriceCheckSerializer({
        'product_id': product_id,
        'price': price,
        'last_price': last_price,
        'trend': PriceAnalytics.price_trend(price, last_price),
    }).data)


@extend_schema(
    responses={200: CommonItemsSerializer},
    description="Products currently requested by every restaurant.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdministrator])
def common_items(request):
    return Response({'product_ids': PriceAnalytics.common_product_ids()})


@extend_schema(
    responses={200: ShoppingTotalSerializer},
    description="Sum of actual quantity times unit price over pending lines with both recorded.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdministrator])
def shopping_total(request):
    return Response(ShoppingTotalSerializer({'total': PriceAnalytics.shopping_list_total()}).data)


@extend_schema(
    methods=['GET'],
    responses={200: ExampleQuestionsSerializer},
    description="Example questions for the analyst.",
    tags=['analytics'],
)
@extend_schema(
    methods=['POST'],
    request=AskQuestionSerializer,
    responses={
        200: AnalystAnswerSerializer,
        400: ErrorSerializer,
        502: ErrorSerializer,
    },
    description="Ask the AI analyst a question about completed orders. Answers are in Georgian.",
    tags=['analytics'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAdministrator])
def ask(request):
    """AI analyst - thin HTTP handler."""
    if request.method == 'GET':
        return Response({'questions': EXAMPLE_QUESTIONS})

    serializer = AskQuestionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        answer = ask_analyst(serializer.validated_data['question'])
    except EmptyQuestionError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except AnalystUnavailableError as e:
        return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

    return Response({'answer': answer})
