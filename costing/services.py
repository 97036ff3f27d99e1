"""
Cost sheet operations.

Creating a sheet deducts its quantities from stock and deleting it puts them
back; both happen in one transaction with the touched ingredients locked.
"""
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from django.db import transaction
from django.utils import timezone
from rest_framework import status

from auditing.models import ActivityLog
from auditing.services import log_activity
from canteen_backend.error_codes import CostingErrors, InventoryErrors, ReportErrors
from canteen_backend.exceptions import CostingError
from inventory.models import Ingredient
from inventory.services import change_stock, lock_ingredients, round_money, round_stock
from .models import Office, DailyEntry, ConsumptionItem

logger = logging.getLogger(__name__)

UNKNOWN_ITEM = 'Unknown Item'


def parse_date_filter(value, field):
    """Parse a YYYY-MM-DD query parameter, or None when absent."""
    if not value:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise CostingError.from_catalog(ReportErrors.INVALID_DATE, details={'field': field})


def per_head(total, participants):
    if not participants:
        return Decimal('0.00')
    return (Decimal(total) / participants).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def filter_entries(queryset, start_date=None, end_date=None, office=None):
    if start_date:
        queryset = queryset.filter(date__gte=start_date)
    if end_date:
        queryset = queryset.filter(date__lte=end_date)
    if office:
        if not str(office).isdigit():
            raise CostingError.from_catalog(CostingErrors.OFFICE_NOT_FOUND, office_id=office)
        queryset = queryset.filter(office_id=int(office))
    return queryset


def clean_draft_items(items):
    """Keep only rows that name an ingredient and a positive quantity."""
    cleaned = []
    for row in items or []:
        ingredient_id = row.get('ingredient')
        try:
            quantity = Decimal(str(row.get('quantity') or 0))
        except InvalidOperation:
            continue
        if not ingredient_id or quantity <= 0:
            continue
        cleaned.append({
            'ingredient': ingredient_id,
            'quantity': round_stock(quantity),
            'remarks': (row.get('remarks') or '').strip(),
        })
    return cleaned


def price_lines(items, ingredients):
    """
    Price each row at the ingredient's current unit price.
    Returns (lines, total) where total is rounded to 2 decimals.
    """
    lines = []
    total = Decimal('0')
    for row in items:
        ingredient = ingredients.get(row['ingredient'])
        if ingredient is None:
            raise CostingError.from_catalog(
                InventoryErrors.INGREDIENT_NOT_FOUND,
                ingredient_id=row['ingredient'],
            )
        amount = ingredient.unit_price * row['quantity']
        total += amount
        lines.append({
            'ingredient': ingredient,
            'ingredient_id': ingredient.pk,
            'name': ingredient.name,
            'unit': ingredient.unit,
            'quantity': row['quantity'],
            'rate': ingredient.unit_price,
            'amount': round_money(amount),
            'remarks': row['remarks'],
        })
    return lines, round_money(total)


def resolve_office(office_id):
    if office_id:
        office = Office.objects.filter(pk=office_id).first()
        if office is None:
            raise CostingError.from_catalog(CostingErrors.OFFICE_NOT_FOUND, office_id=office_id)
        return office

    office = Office.objects.order_by('code').first()
    if office is None:
        raise CostingError.from_catalog(CostingErrors.NO_OFFICE)
    return office


def preview_entry(draft):
    """Compute lines, total and per-person cost of an unsaved cost sheet."""
    items = clean_draft_items(draft.get('items'))
    ingredients = Ingredient.objects.in_bulk([row['ingredient'] for row in items])
    lines, total = price_lines(items, ingredients)
    participants = draft.get('participant_count') or 0

    office = None
    if draft.get('office'):
        office = Office.objects.filter(pk=draft['office']).first()

    return {
        'date': draft.get('date') or timezone.localdate(),
        'office': office,
        'participant_count': participants,
        'menu_description': draft.get('menu_description') or '',
        'stock_remarks': draft.get('stock_remarks') or '',
        'lines': lines,
        'total_cost': total,
        'per_head_cost': per_head(total, participants),
    }


def create_entry(draft, user=None):
    """
    Record a cost sheet and deduct its quantities from stock (clamped at zero).
    """
    participants = draft.get('participant_count') or 0
    if participants < 1:
        raise CostingError.from_catalog(CostingErrors.PARTICIPANTS_REQUIRED)

    items = clean_draft_items(draft.get('items'))
    if not items:
        raise CostingError.from_catalog(CostingErrors.NO_ITEMS)

    office = resolve_office(draft.get('office'))
    entry_date = draft.get('date') or timezone.localdate()

    with transaction.atomic():
        ingredients = lock_ingredients([row['ingredient'] for row in items])
        lines, total = price_lines(items, ingredients)

        entry = DailyEntry.objects.create(
            date=entry_date,
            office=office,
            participant_count=participants,
            total_cost=total,
            menu_description=draft.get('menu_description') or '',
            stock_remarks=draft.get('stock_remarks') or '',
            created_by=user if user is not None and user.is_authenticated else None,
        )
        ConsumptionItem.objects.bulk_create([
            ConsumptionItem(
                entry=entry,
                ingredient=line['ingredient'],
                quantity=line['quantity'],
                rate=line['rate'],
                remarks=line['remarks'],
            )
            for line in lines
        ])

        for line in lines:
            change_stock(line['ingredient'], -line['quantity'])

        log_activity(
            user,
            ActivityLog.ACTION_CREATE_ENTRY,
            f"Created cost sheet for {entry_date} at {office.name}: "
            f"{participants} participants, total {total}",
            metadata={
                'entry_id': entry.pk,
                'date': str(entry_date),
                'office': office.code,
                'participants': participants,
                'total_cost': float(total),
                'item_count': len(lines),
            },
        )

    logger.info(f"Cost sheet {entry.pk} recorded for {entry_date} ({len(lines)} items, total {total})")
    return entry


def delete_entry(entry, user=None):
    """
    Delete a cost sheet and return its quantities to stock.
    Lines whose ingredient no longer exists are skipped.
    """
    with transaction.atomic():
        locked = DailyEntry.objects.select_for_update().filter(pk=entry.pk).first()
        if locked is None:
            raise CostingError.from_catalog(
                CostingErrors.ENTRY_NOT_FOUND,
                status_code=status.HTTP_404_NOT_FOUND,
                entry_id=entry.pk,
            )
        entry = locked

        items = list(entry.items.all())
        ingredients = lock_ingredients([item.ingredient_id for item in items if item.ingredient_id])

        for item in items:
            ingredient = ingredients.get(item.ingredient_id)
            if ingredient is not None:
                change_stock(ingredient, item.quantity)

        snapshot = {
            'entry_id': entry.pk,
            'original_date': str(entry.date),
            'office': entry.office.name,
            'menu': entry.menu_description,
            'total_cost': float(entry.total_cost),
            'participants': entry.participant_count,
            'deleted_by': user.username if user is not None and user.is_authenticated else 'System',
            'deleted_at': timezone.now().isoformat(),
        }
        entry.delete()

        log_activity(
            user,
            ActivityLog.ACTION_DELETE_ENTRY,
            f"Deleted cost sheet for {snapshot['original_date']} (total {snapshot['total_cost']:.2f})",
            metadata=snapshot,
        )

    logger.info(f"Cost sheet {snapshot['entry_id']} deleted; stock reverted for {len(ingredients)} ingredient(s)")
    return snapshot
