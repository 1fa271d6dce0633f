from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdministrator, IsChef

from .models import Order, DispatchRecord
from .serializers import (
    OrderSerializer,
    OrderItemSerializer,
    CompletedOrderSerializer,
    UnavailableItemSerializer,
    DispatchRecordSerializer,
    DayGroupSerializer,
    ShoppingListSerializer,
    ErrorSerializer,
    OrderSubmitSerializer,
    ItemStatusSerializer,
    ItemActualsSerializer,
    SelectionListSerializer,
    SupplierAssignmentSerializer,
    HistoryQuerySerializer,
)
from .services import (
    submit_order,
    get_order_by_id,
    list_active_orders,
    set_item_status,
    set_item_actuals,
    complete_order,
    dispatch_items,
    set_dispatch_supplier,
    build_shopping_list_text,
    list_completed_orders,
    list_unavailable_items,
    list_dispatch_records,
    group_by_day,
    # Exceptions
    OrderNotFoundError,
    OrderItemNotFoundError,
    EmptyOrderError,
    DuplicateOrderItemError,
    UnknownProductError,
    ProductNotAvailableError,
    InvalidStatusError,
    OrderHasPendingItemsError,
    NothingToDispatchError,
    DispatchRecordNotFoundError,
    DispatchEntryNotFoundError,
    UnknownSupplierError,
)

UUID_PATTERN = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

HISTORY_PARAMETERS = [
    OpenApiParameter('restaurant', OpenApiTypes.STR, description='Filter by restaurant code'),
    OpenApiParameter('grouped', OpenApiTypes.STR, description="'day' to group records by calendar day"),
]


class HistoryPagination(PageNumberPagination):
    """Custom pagination for archive listings."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


def _selection_pairs(validated_data):
    return [(line['order_id'], line['product_id']) for line in validated_data['items']]


def _history_response(request, records, serializer_class, date_field):
    """Paginated list, or all records grouped by day when ``?grouped=day``."""
    query = HistoryQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    if query.validated_data.get('grouped') == 'day':
        groups = [
            {'day': group['day'], 'records': serializer_class(group['records'], many=True).data}
            for group in group_by_day(records, date_field)
        ]
        return Response(DayGroupSerializer(groups, many=True).data)

    paginator = HistoryPagination()
    page = paginator.paginate_queryset(records, request)
    return paginator.get_paginated_response(serializer_class(page, many=True).data)


class ActiveOrderViewSet(mixins.ListModelMixin,
                         mixins.RetrieveModelMixin,
                         viewsets.GenericViewSet):
    """
    ViewSet for active orders.

    Chefs submit orders; everything else is the administrator's
    reconciliation work. Views are thin HTTP handlers only.

    list: Active orders, newest first
    create: Chef submits an order for their restaurant
    retrieve: One active order
    set_status: Toggle the status of one line
    set_actuals: Record actual quantity and unit price of one line
    complete: Archive the order once no line is pending
    """

    queryset = Order.objects.prefetch_related('items')
    serializer_class = OrderSerializer
    pagination_class = None
    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action == 'create':
            return [IsChef()]
        return [IsAdministrator()]

    def get_queryset(self):
        restaurant = self.request.query_params.get('restaurant')
        return list_active_orders(restaurant=restaurant)

    @extend_schema(
        request=OrderSubmitSerializer,
        responses={201: OrderSerializer, 400: ErrorSerializer},
        description="Submit a purchase request for the chef's restaurant.",
        tags=['orders'],
    )
    def create(self, request, *args, **kwargs):
        """Submit a new order."""
        serializer = OrderSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = submit_order(
                restaurant=request.user.restaurant,
                chef=request.user.chef,
                items=serializer.validated_data['items'],
            )
        except (EmptyOrderError, DuplicateOrderItemError,
                UnknownProductError, ProductNotAvailableError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        order = get_order_by_id(order_id=order.id)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ItemStatusSerializer,
        responses={200: OrderItemSerializer, 404: ErrorSerializer},
        description="Toggle a line's status. Sending the current status returns it to pending.",
        tags=['orders'],
    )
    @action(detail=True, methods=['post'], url_path='status', url_name='status')
    def set_status(self, request, pk=None):
        serializer = ItemStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = set_item_status(
                order_id=pk,
                product_id=serializer.validated_data['product_id'],
                status=serializer.validated_data['status'],
            )
        except (OrderNotFoundError, OrderItemNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderItemSerializer(item).data)

    @extend_schema(
        request=ItemActualsSerializer,
        responses={200: OrderItemSerializer, 404: ErrorSerializer},
        description="Record actual quantity and/or unit price. Values that are not numbers are ignored.",
        tags=['orders'],
    )
    @action(detail=True, methods=['post'], url_path='actuals', url_name='actuals')
    def set_actuals(self, request, pk=None):
        serializer = ItemActualsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = set_item_actuals(
                order_id=pk,
                product_id=serializer.validated_data['product_id'],
                actual_quantity=serializer.validated_data.get('actual_quantity'),
                price_per_unit=serializer.validated_data.get('price_per_unit'),
            )
        except (OrderNotFoundError, OrderItemNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(OrderItemSerializer(item).data)

    @extend_schema(
        request=None,
        responses={201: CompletedOrderSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        description="Archive the order. Fails while any line is still pending.",
        tags=['orders'],
    )
    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        try:
            completed = complete_order(order_id=pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except OrderHasPendingItemsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CompletedOrderSerializer(completed).data, status=status.HTTP_201_CREATED)


class DispatchRecordViewSet(viewsets.GenericViewSet):
    """
    Dispatch history.

    list: Dispatch records newest first (``?grouped=day`` for day groups)
    supplier: Assign a supplier to one line of a record
    """

    queryset = DispatchRecord.objects.all()
    serializer_class = DispatchRecordSerializer
    permission_classes = [IsAdministrator]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(parameters=HISTORY_PARAMETERS, tags=['dispatch'])
    def list(self, request):
        return _history_response(request, list_dispatch_records(), DispatchRecordSerializer, 'date')

    @extend_schema(
        request=SupplierAssignmentSerializer,
        responses={200: DispatchRecordSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        description="Set the supplier of the line at ``index``. An empty supplier clears it.",
        tags=['dispatch'],
    )
    @action(detail=True, methods=['post'])
    def supplier(self, request, pk=None):
        serializer = SupplierAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = set_dispatch_supplier(
                record_id=pk,
                index=serializer.validated_data['index'],
                supplier=serializer.validated_data.get('supplier'),
            )
        except (DispatchRecordNotFoundError, DispatchEntryNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnknownSupplierError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DispatchRecordSerializer(record).data)


@extend_schema(
    request=SelectionListSerializer,
    responses={201: DispatchRecordSerializer, 400: ErrorSerializer},
    description="Move the selected order lines to suppliers as one dispatch record.",
    tags=['dispatch'],
)
@api_view(['POST'])
@permission_classes([IsAdministrator])
def dispatch_selected(request):
    """Dispatch selected items - thin HTTP handler."""
    serializer = SelectionListSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        record = dispatch_items(selections=_selection_pairs(serializer.validated_data))
    except NothingToDispatchError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DispatchRecordSerializer(record).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=SelectionListSerializer,
    responses={200: ShoppingListSerializer},
    description="Plain-text shopping list for the selected order lines.",
    tags=['dispatch'],
)
@api_view(['POST'])
@permission_classes([IsAdministrator])
def shopping_list(request):
    serializer = SelectionListSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    text = build_shopping_list_text(selections=_selection_pairs(serializer.validated_data))
    return Response({'text': text})


@extend_schema(parameters=HISTORY_PARAMETERS, responses={200: CompletedOrderSerializer(many=True)}, tags=['history'])
@api_view(['GET'])
@permission_classes([IsAdministrator])
def completed_orders(request):
    """Completed orders, newest first."""
    records = list_completed_orders(restaurant=request.query_params.get('restaurant'))
    return _history_response(request, records, CompletedOrderSerializer, 'completion_date')


@extend_schema(parameters=HISTORY_PARAMETERS, responses={200: UnavailableItemSerializer(many=True)}, tags=['history'])
@api_view(['GET'])
@permission_classes([IsAdministrator])
def unavailable_items(request):
    """Products that could not be bought, newest first."""
    records = list_unavailable_items(restaurant=request.query_params.get('restaurant'))
    return _history_response(request, records, UnavailableItemSerializer, 'date')
