from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsKitchenMember, IsAdministrator

from .models import Product
from .categories import group_by_category
from .serializers import (
    ProductSerializer,
    ProductWriteSerializer,
    AdHocProductSerializer,
    ProductQuerySerializer,
    LanguageQuerySerializer,
    CategoryGroupSerializer,
    ErrorSerializer,
)
from .services import (
    list_products,
    create_product,
    create_adhoc_product,
    update_product,
    delete_product,
    ProductNotFoundError,
    InvalidRestaurantError,
)


class ProductPagination(PageNumberPagination):
    """Custom pagination for the catalog."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 500


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the product catalog.

    Chefs see only products offered to their restaurant and may add ad-hoc
    products for it. Full catalog management is for the administrator.

    list: Products (chef: eligible only)
    create: Administrator creates a product, chef adds an ad-hoc item
    retrieve/update/partial_update/destroy: Administrator only
    categories: Products grouped by localized category
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = ProductPagination
    lookup_value_regex = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['list', 'create', 'categories']:
            return [IsKitchenMember()]
        return [IsAdministrator()]

    def _visible_products(self, search=''):
        user = self.request.user
        if user.is_chef:
            return list_products(restaurant=user.restaurant, search=search)

        query = ProductQuerySerializer(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        return list_products(
            restaurant=query.validated_data.get('restaurant'),
            search=search,
        )

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Substring of any localized name'),
            OpenApiParameter('restaurant', OpenApiTypes.STR, description='Administrator filter by restaurant'),
        ],
        tags=['products'],
    )
    def list(self, request, *args, **kwargs):
        products = self._visible_products(search=request.query_params.get('search', ''))
        page = self.paginate_queryset(products)
        if page is not None:
            return self.get_paginated_response(ProductSerializer(page, many=True).data)
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        request=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: ErrorSerializer},
        description="Administrator: create a product. Chef: add an ad-hoc product "
                    "(name, category, default_unit) for their own restaurant.",
        tags=['products'],
    )
    def create(self, request, *args, **kwargs):
        """Create a product."""
        if request.user.is_chef:
            serializer = AdHocProductSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            product = create_adhoc_product(
                restaurant=request.user.restaurant,
                **serializer.validated_data,
            )
        else:
            serializer = ProductWriteSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            try:
                product = create_product(**serializer.validated_data)
            except InvalidRestaurantError as e:
                return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductWriteSerializer, responses={200: ProductSerializer}, tags=['products'])
    def update(self, request, *args, **kwargs):
        """Update a product (administrator only)."""
        partial = kwargs.pop('partial', False)
        serializer = ProductWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            product = update_product(product_id=self.kwargs['pk'], **serializer.validated_data)
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRestaurantError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ProductSerializer(product).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a product (administrator only)."""
        try:
            delete_product(product_id=self.kwargs['pk'])
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('language', OpenApiTypes.STR, description='ka, en or ru (default ka)'),
        ],
        responses={200: CategoryGroupSerializer(many=True)},
        tags=['products'],
    )
    @action(detail=False, methods=['get'])
    def categories(self, request):
        """Products grouped by category in display order."""
        query = LanguageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        language = query.validated_data['language']

        products = self._visible_products(search=request.query_params.get('search', ''))
        groups = [
            {'category': category, 'products': items}
            for category, items in group_by_category(products, language)
        ]
        return Response(CategoryGroupSerializer(groups, many=True).data)
