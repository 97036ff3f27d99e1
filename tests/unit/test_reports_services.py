"""
Unit tests for report periods and period analytics.
"""
from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from auditing.models import ActivityLog
from canteen_backend.exceptions import CanteenError
from costing.models import DailyEntry
from inventory.services import adjust_stock
from reports.services import resolve_period, consumption_report, consumption_stats


@pytest.mark.unit
class TestResolvePeriod:

    today = date(2024, 8, 20)

    def test_week(self):
        period = resolve_period('week', today=self.today)
        assert (period.start, period.end, period.label) == (date(2024, 8, 13), self.today, 'Last 7 Days')

    def test_month(self):
        period = resolve_period('month', today=self.today)
        assert (period.start, period.label) == (date(2024, 8, 1), 'This Month')

    def test_quarter(self):
        period = resolve_period('quarter', today=self.today)
        assert (period.start, period.label) == (date(2024, 7, 1), 'This Quarter')

        assert resolve_period('quarter', today=date(2024, 3, 31)).start == date(2024, 1, 1)
        assert resolve_period('quarter', today=date(2024, 12, 1)).start == date(2024, 10, 1)

    def test_year(self):
        period = resolve_period('year', today=self.today)
        assert (period.start, period.label) == (date(2024, 1, 1), 'This Year')

    def test_custom_defaults(self):
        period = resolve_period('custom', today=self.today)
        assert period.start == date(1970, 1, 1)
        assert period.end == self.today
        assert period.label == '1970-01-01 to 2024-08-20'

    def test_custom_range(self):
        period = resolve_period('custom', '2024-02-01', '2024-02-29', today=self.today)
        assert (period.start, period.end) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_invalid_timeframe(self):
        with pytest.raises(CanteenError) as excinfo:
            resolve_period('decade', today=self.today)
        assert excinfo.value.code == 'INVALID_TIMEFRAME'

    def test_invalid_custom_date(self):
        with pytest.raises(CanteenError) as excinfo:
            resolve_period('custom', '20-02-2024', today=self.today)
        assert excinfo.value.code == 'INVALID_DATE'


@pytest.mark.unit
class TestConsumptionStats:

    def test_empty_period(self):
        stats = consumption_stats([])
        assert stats == {
            'total_cost': 0.0,
            'total_participants': 0,
            'avg_cost_per_head': 0.0,
            'avg_daily_cost': 0.0,
            'avg_daily_participants': 0,
        }

    def test_averages(self):
        entries = [
            DailyEntry(total_cost=Decimal('100.00'), participant_count=50),
            DailyEntry(total_cost=Decimal('200.00'), participant_count=75),
        ]
        stats = consumption_stats(entries)

        assert stats['total_cost'] == 300.0
        assert stats['total_participants'] == 125
        assert stats['avg_cost_per_head'] == 2.4
        assert stats['avg_daily_cost'] == 150.0
        # 62.5 rounds half up
        assert stats['avg_daily_participants'] == 63


@pytest.mark.django_db
@pytest.mark.unit
class TestConsumptionReport:

    def test_purchases_from_stock_in_logs(self, rice, chicken, admin_user):
        adjust_stock(rice.pk, Decimal('100'), 'add', user=admin_user)
        adjust_stock(chicken.pk, Decimal('10'), 'add', user=admin_user, supplier='Kazi Farms')
        adjust_stock(chicken.pk, Decimal('5'), 'subtract', user=admin_user)

        report = consumption_report(resolve_period('week'))
        purchases = report['purchases']

        # 100 * 0.70 + 10 * 2.50
        assert purchases['total_purchase_est'] == 95.0
        assert purchases['purchase_count'] == 2
        assert purchases['vendors'] == [
            {'name': 'City Rice Traders', 'value': 70.0},
            {'name': 'Kazi Farms', 'value': 25.0},
        ]

    def test_purchases_outside_period_are_ignored(self, rice, admin_user):
        adjust_stock(rice.pk, Decimal('100'), 'add', user=admin_user)
        ActivityLog.objects.update(timestamp=timezone.now() - timedelta(days=30))

        report = consumption_report(resolve_period('week'))

        assert report['purchases']['total_purchase_est'] == 0.0
        assert report['purchases']['vendors'] == []

    def test_daily_trend_in_date_order(self, office):
        today = timezone.localdate()
        DailyEntry.objects.create(date=today, office=office, participant_count=40, total_cost=Decimal('80.00'))
        DailyEntry.objects.create(date=today - timedelta(days=2), office=office, participant_count=20, total_cost=Decimal('30.00'))
        DailyEntry.objects.create(date=today - timedelta(days=20), office=office, participant_count=20, total_cost=Decimal('30.00'))

        report = consumption_report(resolve_period('week'))

        assert [row['date'] for row in report['daily_trend']] == [today - timedelta(days=2), today]
        assert report['daily_trend'][1]['per_head'] == 2.0
        assert report['consumption']['total_cost'] == 110.0
        assert report['period']['label'] == 'Last 7 Days'
