from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.throttling import UserRateThrottle
from rest_framework import status

from canteen_backend.csv_utils import csv_response, money
from .services import resolve_period, consumption_report


def _period_from_request(request):
    params = request.query_params
    return resolve_period(
        params.get('timeframe', 'month'),
        start_date=params.get('start_date'),
        end_date=params.get('end_date'),
    )


class ConsumptionReportView(APIView):
    """
    Consumption, purchase and daily trend analytics for a time frame.
    Query params: timeframe (week|month|quarter|year|custom, default month),
    start_date / end_date for custom ranges.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request):
        period = _period_from_request(request)
        return Response(consumption_report(period), status=status.HTTP_200_OK)


class ConsumptionReportExportView(APIView):
    """
    The same report as a CSV download.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request):
        period = _period_from_request(request)
        report = consumption_report(period)
        consumption = report['consumption']
        purchases = report['purchases']

        response, writer = csv_response(f"Canteen_Report_{period.timeframe}_{timezone.localdate()}.csv")

        writer.writerow(['REPORT SUMMARY'])
        writer.writerow(['Report Type', 'Canteen Analytics'])
        writer.writerow(['Period', period.label])
        writer.writerow(['Start Date', period.start])
        writer.writerow(['End Date', period.end])
        writer.writerow([])

        writer.writerow(['KEY METRICS'])
        writer.writerow(['Total Consumption Cost', money(consumption['total_cost'])])
        writer.writerow(['Total Participants', consumption['total_participants']])
        writer.writerow(['Avg Cost Per Head', money(consumption['avg_cost_per_head'])])
        writer.writerow(['Avg Daily Cost', money(consumption['avg_daily_cost'])])
        writer.writerow(['Total Purchase Est.', money(purchases['total_purchase_est'])])
        writer.writerow([])

        writer.writerow(['VENDOR / SUPPLIER ANALYSIS'])
        writer.writerow(['Supplier Name', 'Total Purchase Amount (Est.)'])
        for vendor in purchases['vendors']:
            writer.writerow([vendor['name'], money(vendor['value'])])
        writer.writerow([])

        writer.writerow(['DAILY CONSUMPTION BREAKDOWN'])
        writer.writerow(['Date', 'Participants', 'Total Cost', 'Cost Per Head', 'Menu'])
        for row in report['daily_trend']:
            writer.writerow([
                row['date'],
                row['participants'],
                money(row['cost']),
                money(row['per_head']),
                row['menu'],
            ])

        return response
