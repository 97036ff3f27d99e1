"""
Period analytics: consumption from cost sheets, purchases from stock-in logs.
"""
from collections import namedtuple
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone

from auditing.models import ActivityLog
from canteen_backend.error_codes import ReportErrors
from canteen_backend.exceptions import CanteenError
from costing.models import DailyEntry
from costing.services import parse_date_filter, per_head
from inventory.defaults import UNASSIGNED_SUPPLIER
from inventory.models import Ingredient
from inventory.services import round_money

TIMEFRAMES = ('week', 'month', 'quarter', 'year', 'custom')

Period = namedtuple('Period', ['timeframe', 'start', 'end', 'label'])


def resolve_period(timeframe, start_date=None, end_date=None, today=None):
    """
    Turn a time frame name into an inclusive date range with its label.
    start_date / end_date (YYYY-MM-DD) only apply to 'custom'.
    """
    today = today or timezone.localdate()

    if timeframe not in TIMEFRAMES:
        raise CanteenError.from_catalog(ReportErrors.INVALID_TIMEFRAME)

    if timeframe == 'custom':
        start = parse_date_filter(start_date, 'start_date') or date(1970, 1, 1)
        end = parse_date_filter(end_date, 'end_date') or today
        return Period(timeframe, start, end, f"{start} to {end}")

    if timeframe == 'week':
        return Period(timeframe, today - timedelta(days=7), today, 'Last 7 Days')
    if timeframe == 'month':
        return Period(timeframe, today.replace(day=1), today, 'This Month')
    if timeframe == 'quarter':
        first_month = (today.month - 1) // 3 * 3 + 1
        return Period(timeframe, today.replace(month=first_month, day=1), today, 'This Quarter')
    return Period(timeframe, today.replace(month=1, day=1), today, 'This Year')


def consumption_stats(entries):
    total_cost = sum((e.total_cost for e in entries), Decimal('0'))
    total_participants = sum(e.participant_count for e in entries)
    count = len(entries) or 1
    return {
        'total_cost': float(total_cost),
        'total_participants': total_participants,
        'avg_cost_per_head': float(per_head(total_cost, total_participants)),
        'avg_daily_cost': float(round_money(total_cost / count)),
        'avg_daily_participants': int((Decimal(total_participants) / count).quantize(Decimal('1'), rounding=ROUND_HALF_UP)),
    }


def purchase_stats(period):
    """
    Estimate purchase spend from stock-in logs, priced at today's unit prices.
    """
    logs = ActivityLog.objects.filter(
        action=ActivityLog.ACTION_UPDATE_STOCK,
        metadata__type='add',
        timestamp__date__gte=period.start,
        timestamp__date__lte=period.end,
    )

    purchases = []
    for log in logs:
        try:
            quantity = Decimal(str(log.metadata.get('quantity') or 0))
        except ArithmeticError:
            continue
        if quantity > 0:
            purchases.append((log.metadata, quantity))

    ingredients = Ingredient.objects.in_bulk(
        [meta.get('ingredient_id') for meta, _ in purchases if meta.get('ingredient_id')]
    )

    total = Decimal('0')
    vendors = {}
    for meta, quantity in purchases:
        ingredient = ingredients.get(meta.get('ingredient_id'))
        cost = quantity * (ingredient.unit_price if ingredient else Decimal('0'))
        supplier = (
            meta.get('supplier')
            or (ingredient.supplier_name if ingredient else '')
            or UNASSIGNED_SUPPLIER
        )
        total += cost
        vendors[supplier] = vendors.get(supplier, Decimal('0')) + cost

    vendor_rows = [
        {'name': name, 'value': float(round_money(value))}
        for name, value in sorted(vendors.items(), key=lambda item: item[1], reverse=True)
    ]
    return {
        'total_purchase_est': float(round_money(total)),
        'purchase_count': len(purchases),
        'vendors': vendor_rows,
    }


def daily_trend(entries):
    return [
        {
            'date': entry.date,
            'office': entry.office.name,
            'participants': entry.participant_count,
            'cost': float(entry.total_cost),
            'per_head': float(per_head(entry.total_cost, entry.participant_count)),
            'menu': entry.menu_description,
        }
        for entry in entries
    ]


def consumption_report(period):
    entries = list(
        DailyEntry.objects.filter(date__gte=period.start, date__lte=period.end)
        .select_related('office')
        .order_by('date', 'created_at')
    )
    return {
        'period': {
            'timeframe': period.timeframe,
            'label': period.label,
            'start_date': period.start,
            'end_date': period.end,
        },
        'consumption': consumption_stats(entries),
        'purchases': purchase_stats(period),
        'daily_trend': daily_trend(entries),
    }
