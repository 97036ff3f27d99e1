from django.utils import timezone
from django.utils.translation import gettext as _
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.throttling import UserRateThrottle

from canteen_backend.csv_utils import csv_response, money
from canteen_backend.error_utils import validation_error_response
from inventory.services import low_stock_items
from .insights import generate_insights
from .services import summary, cost_trend, recent_entries


def _positive_int(value, default):
    if value in (None, ''):
        return default
    value = int(value)
    if value < 1:
        raise ValueError(value)
    return value


class DashboardSummaryView(APIView):
    """
    Provides the headline figures for the latest day with cost sheets.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request, *args, **kwargs):
        return Response(summary(), status=status.HTTP_200_OK)


class CostTrendView(APIView):
    """
    Per-day cost and per-head cost for the chart (last 30 dates by default).
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request, *args, **kwargs):
        try:
            days = _positive_int(request.query_params.get('days'), 30)
        except ValueError:
            return validation_error_response(_('Days must be a positive whole number.'), field='days')
        return Response(cost_trend(days), status=status.HTTP_200_OK)


class LowStockItemsView(APIView):
    """
    Provides a list of ingredients that are at or below their threshold.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request, *args, **kwargs):
        return Response(low_stock_items(), status=status.HTTP_200_OK)


class RecentEntriesView(APIView):
    """
    The daily costing table: cost sheets newest first with a review status.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request, *args, **kwargs):
        try:
            limit = _positive_int(request.query_params.get('limit'), None)
        except ValueError:
            return validation_error_response(_('Limit must be a positive whole number.'), field='limit')
        return Response(recent_entries(limit), status=status.HTTP_200_OK)


class RecentEntriesExportView(APIView):
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request, *args, **kwargs):
        response, writer = csv_response(f"Daily_Costing_Report_{timezone.localdate()}.csv")
        writer.writerow(['Date', 'Participants', 'Total Cost', 'Per Head', 'Status'])
        for row in recent_entries():
            writer.writerow([
                row['date'],
                row['participant_count'],
                money(row['total_cost']),
                money(row['per_head_cost']),
                row['status'],
            ])
        return response


class InsightsView(APIView):
    """
    Generates an AI executive summary of the latest metrics and trend.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def post(self, request, *args, **kwargs):
        return Response({'insight': generate_insights()}, status=status.HTTP_200_OK)
