from django.apps import apps
from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .serializers import (
    OrderSerializer,
    OrderInputSerializer,
    OrderFilterSerializer,
    TrackingResultSerializer,
    NotifyInputSerializer,
)
from .services import (
    NOT_FOUND,
    create_order,
    update_order,
    delete_order,
    get_order,
    list_orders,
    validate_required_fields,
    lookup_tracking_number,
    # Exceptions
    OrderValidationError,
    OrderNotFoundError,
    ProductNotFoundError,
    OrderPersistenceError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class OkResponseSerializer(drf_serializers.Serializer):
    ok = drf_serializers.BooleanField()


class OrderPagination(PageNumberPagination):
    """Custom pagination for orders."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _error(message, status_code):
    return Response({'error': message}, status=status_code)


class OrderViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's orders.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Orders owned by the caller, newest first (filterable by status)
    create: Record an order (tracking number + WhatsApp notice as needed)
    retrieve: Get one order
    update / partial_update: Change any field, including status
    destroy: Delete an order
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = OrderPagination

    def get_queryset(self):
        filter_serializer = OrderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_orders(
            user=self.request.user,
            status=filter_serializer.validated_data.get('status'),
        )

    @extend_schema(request=OrderInputSerializer, responses={201: OrderSerializer, 400: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        """Create a new order."""
        serializer = OrderInputSerializer(data=request.data)

        if not serializer.is_valid():
            # Missing product/customer is reported before any other field error
            try:
                validate_required_fields(
                    request.data.get('product'),
                    request.data.get('customer_name'),
                )
            except OrderValidationError as e:
                return _error(str(e), status.HTTP_400_BAD_REQUEST)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        changes = serializer.to_changes()

        try:
            order = create_order(
                user=request.user,
                product_id=changes.pop('product_id', None),
                customer_name=changes.pop('customer_name', None),
                wa_note=serializer.validated_data.get('wa_note', ''),
                **changes
            )
        except (OrderValidationError, ProductNotFoundError) as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)
        except OrderPersistenceError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OrderInputSerializer, responses={200: OrderSerializer, 400: ErrorResponseSerializer})
    def update(self, request, *args, **kwargs):
        """Update an order; PUT and PATCH both apply the fields sent."""
        serializer = OrderInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = update_order(
                order_id=self.kwargs['pk'],
                user=request.user,
                changes=serializer.to_changes(),
                wa_note=serializer.validated_data.get('wa_note', ''),
            )
        except OrderNotFoundError as e:
            return _error(str(e), status.HTTP_404_NOT_FOUND)
        except (OrderValidationError, ProductNotFoundError) as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)
        except OrderPersistenceError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(OrderSerializer(order).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def retrieve(self, request, *args, **kwargs):
        """Get one of the caller's orders."""
        try:
            order = get_order(order_id=self.kwargs['pk'], user=request.user)
        except OrderNotFoundError as e:
            return _error(str(e), status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an order."""
        try:
            delete_order(order_id=self.kwargs['pk'], user=request.user)
        except OrderNotFoundError as e:
            return _error(str(e), status.HTTP_404_NOT_FOUND)
        except OrderPersistenceError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={
        200: TrackingResultSerializer,
        404: ErrorResponseSerializer,
        503: ErrorResponseSerializer,
    },
    description="Public shipment lookup by tracking number. No authentication.",
    tags=['tracking'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def track_order(request, tracking_number):
    """Public "track my package" endpoint."""
    try:
        result = lookup_tracking_number(tracking_number=tracking_number)
    except OrderPersistenceError as e:
        return _error(str(e), status.HTTP_503_SERVICE_UNAVAILABLE)

    if result is NOT_FOUND:
        return _error('Order not found', status.HTTP_404_NOT_FOUND)
    return Response(TrackingResultSerializer(result).data)


@extend_schema(
    request=NotifyInputSerializer,
    responses={
        200: OkResponseSerializer,
        400: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Send a WhatsApp message through the configured gateway.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send_notification(request):
    """Send one WhatsApp message synchronously and report the outcome."""
    serializer = NotifyInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    phone = serializer.validated_data.get('phone')
    message = serializer.validated_data.get('message')

    if not phone or not message:
        return _error('phone and message required', status.HTTP_400_BAD_REQUEST)

    result = apps.get_app_config('orders').get_gateway().send(phone, message)
    if not result.ok:
        return _error(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response({'ok': True})
