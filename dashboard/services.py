"""
Overview analytics computed from recorded cost sheets.
"""
from decimal import Decimal

from django.conf import settings
from django.db.models import Sum
from django.utils import timezone

from costing.models import DailyEntry
from costing.services import per_head
from inventory.models import Ingredient


def _day_totals(entry_date):
    totals = DailyEntry.objects.filter(date=entry_date).aggregate(
        cost=Sum('total_cost'), participants=Sum('participant_count')
    )
    return totals['cost'] or Decimal('0'), totals['participants'] or 0


def latest_entry_date():
    """The most recent date with a cost sheet, or today when there is none."""
    latest = DailyEntry.objects.order_by('-date').values_list('date', flat=True).first()
    return latest or timezone.localdate()


def low_stock_count():
    return sum(1 for ingredient in Ingredient.objects.all() if ingredient.is_low_stock)


def summary():
    """
    Headline figures for the latest day with entries.
    """
    latest = latest_entry_date()
    total_cost, participants = _day_totals(latest)
    alerts = low_stock_count()
    return {
        'date': latest,
        'total_daily_cost': float(total_cost),
        'total_participants': participants,
        'global_per_head_cost': float(per_head(total_cost, participants)),
        'low_stock_count': alerts,
        'stock_health': 'Action Needed' if alerts > 0 else 'Healthy',
    }


def cost_trend(days=30):
    """Per-day cost and per-head cost for the last `days` dates that have entries."""
    rows = (
        DailyEntry.objects.values('date')
        .annotate(cost=Sum('total_cost'), participants=Sum('participant_count'))
        .order_by('-date')[:days]
    )
    trend = []
    for row in reversed(list(rows)):
        cost = row['cost'] or Decimal('0')
        trend.append({
            'date': row['date'].strftime('%m-%d'),
            'per_head_cost': float(per_head(cost, row['participants'])),
            'total_cost': float(cost),
        })
    return trend


def entry_status(per_head_cost):
    return 'Review' if per_head_cost > settings.PER_HEAD_REVIEW_THRESHOLD else 'Optimal'


def recent_entries(limit=None):
    """Cost sheets newest first with their per-head cost and review status."""
    queryset = DailyEntry.objects.select_related('office').order_by('-date', '-created_at')
    if limit:
        queryset = queryset[:limit]

    rows = []
    for entry in queryset:
        cost_per_head = float(entry.per_head_cost)
        rows.append({
            'id': entry.pk,
            'date': entry.date,
            'office': entry.office.name,
            'participant_count': entry.participant_count,
            'total_cost': float(entry.total_cost),
            'per_head_cost': cost_per_head,
            'status': entry_status(cost_per_head),
        })
    return rows
