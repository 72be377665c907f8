from django.db.models import ProtectedError, Q
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from .models import Product
from .serializers import ProductSerializer, ProductFilterSerializer


class ProductPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's product catalog.

    list: Products owned by the caller (filterable by category, search)
    create: Add a product
    retrieve / update / partial_update: Owner only
    destroy: Owner only; refused while orders reference the product
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ProductPagination

    def get_queryset(self):
        queryset = Product.objects.filter(user=self.request.user)

        filter_serializer = ProductFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('category'):
            queryset = queryset.filter(category__iexact=params['category'])
        if params.get('search'):
            queryset = queryset.filter(
                Q(name__icontains=params['search']) |
                Q(description__icontains=params['search'])
            )
        return queryset

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    def destroy(self, request, *args, **kwargs):
        product = self.get_object()
        try:
            product.delete()
        except ProtectedError:
            return Response(
                {'error': 'Product is used by existing orders'},
                status=status.HTTP_400_BAD_REQUEST
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
