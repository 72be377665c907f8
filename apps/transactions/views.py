from django.http import HttpResponse
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .models import Transaction
from .serializers import (
    TransactionSerializer,
    TransactionFilterSerializer,
    SummaryQuerySerializer,
    ReportQuerySerializer,
    SummarySerializer,
    ReportSerializer,
)
from .services import (
    filter_transactions,
    summarize,
    build_report,
    export_csv,
    export_filename,
    InvalidDateRangeError,
)


class TransactionPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


RANGE_PARAMETERS = [
    OpenApiParameter('date_from', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD), default first of month'),
    OpenApiParameter('date_to', OpenApiTypes.DATE, description='End date (YYYY-MM-DD), default today'),
]


class TransactionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's ledger.

    list: Transactions owned by the caller (filter by type, date range, search)
    create / retrieve / update / partial_update / destroy: Owner only
    summary: Dashboard totals and monthly income/expense
    report: Period totals and per-category breakdown
    export: Period entries as a CSV download
    """

    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = TransactionPagination

    def get_queryset(self):
        if self.action != 'list':
            return Transaction.objects.filter(user=self.request.user)

        filter_serializer = TransactionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return filter_transactions(user=self.request.user, **filter_serializer.validated_data)

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    @extend_schema(
        parameters=[OpenApiParameter('months', OpenApiTypes.INT, description='Months in the breakdown (default 6)')],
        responses={200: SummarySerializer},
    )
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Dashboard figures."""
        query = SummaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        data = summarize(user=request.user, months=query.validated_data['months'])
        return Response(SummarySerializer(data).data)

    @extend_schema(parameters=RANGE_PARAMETERS, responses={200: ReportSerializer})
    @action(detail=False, methods=['get'])
    def report(self, request):
        """Totals and per-category breakdown for a date range."""
        query = ReportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            data = build_report(user=request.user, **query.validated_data)
        except InvalidDateRangeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(ReportSerializer(data).data)

    @extend_schema(parameters=RANGE_PARAMETERS, responses={(200, 'text/csv'): OpenApiTypes.STR})
    @action(detail=False, methods=['get'])
    def export(self, request):
        """Download the range as CSV."""
        query = ReportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        try:
            content = export_csv(user=request.user, **params)
        except InvalidDateRangeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        response = HttpResponse(content, content_type='text/csv; charset=utf-8')
        filename = export_filename(params['date_from'], params['date_to'])
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response
