"""
Stock and ingredient operations.

Every stock movement goes through change_stock() on a row locked with
select_for_update(), inside the caller's transaction.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.utils import timezone
from rest_framework import status

from auditing.models import ActivityLog
from auditing.services import log_activity
from canteen_backend.error_codes import InventoryErrors
from canteen_backend.exceptions import InventoryError
from .defaults import DEFAULT_INGREDIENTS, UNASSIGNED_SUPPLIER
from .models import Ingredient

logger = logging.getLogger(__name__)

STOCK_PLACES = Decimal('0.001')
MONEY_PLACES = Decimal('0.01')

ADJUST_ADD = 'add'
ADJUST_SUBTRACT = 'subtract'


def round_stock(value):
    return Decimal(value).quantize(STOCK_PLACES, rounding=ROUND_HALF_UP)


def round_money(value):
    return Decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def lock_ingredients(ingredient_ids):
    """Lock the given ingredient rows for the current transaction, keyed by id."""
    queryset = Ingredient.objects.select_for_update().filter(pk__in=set(ingredient_ids))
    return {ingredient.pk: ingredient for ingredient in queryset}


def change_stock(ingredient, delta):
    """
    Apply a signed delta to an ingredient's stock, clamping at zero.
    Returns (old_stock, new_stock).
    """
    old_stock = ingredient.current_stock
    new_stock = max(Decimal('0'), old_stock + Decimal(delta))
    ingredient.current_stock = round_stock(new_stock)
    ingredient.last_updated = timezone.now()
    ingredient.save(update_fields=['current_stock', 'last_updated'])
    return old_stock, ingredient.current_stock


@transaction.atomic
def adjust_stock(ingredient_id, quantity, adjustment_type, user=None, supplier='', reason=''):
    """
    Receive stock into the store ('add') or write it off ('subtract').
    """
    if adjustment_type not in (ADJUST_ADD, ADJUST_SUBTRACT):
        raise InventoryError.from_catalog(InventoryErrors.INVALID_ADJUSTMENT_TYPE)

    quantity = Decimal(quantity)
    if quantity <= 0:
        raise InventoryError.from_catalog(InventoryErrors.INVALID_QUANTITY)

    ingredient = lock_ingredients([ingredient_id]).get(int(ingredient_id))
    if ingredient is None:
        raise InventoryError.from_catalog(
            InventoryErrors.INGREDIENT_NOT_FOUND,
            status_code=status.HTTP_404_NOT_FOUND,
            ingredient_id=ingredient_id,
        )

    delta = quantity if adjustment_type == ADJUST_ADD else -quantity
    old_stock, new_stock = change_stock(ingredient, delta)

    logger.info(
        f"Stock {adjustment_type} for {ingredient.name}: {old_stock} -> {new_stock} {ingredient.unit}"
    )

    verb = 'Added' if adjustment_type == ADJUST_ADD else 'Removed'
    details = f"{verb} {quantity} {ingredient.unit} of {ingredient.name}"
    if supplier:
        details += f" from {supplier}"
    if reason:
        details += f" ({reason})"

    log_activity(
        user,
        ActivityLog.ACTION_UPDATE_STOCK,
        details,
        metadata={
            'type': adjustment_type,
            'quantity': float(quantity),
            'ingredient_id': ingredient.pk,
            'ingredient_name': ingredient.name,
            'old_stock': float(old_stock),
            'new_stock': float(new_stock),
            'supplier': supplier or '',
        },
    )
    return ingredient


def low_stock_items():
    """Ingredients at or below their threshold, with their fill percentage."""
    items = []
    for ingredient in Ingredient.objects.order_by('name'):
        if ingredient.is_low_stock:
            items.append({
                'id': ingredient.pk,
                'name': ingredient.name,
                'unit': ingredient.unit,
                'current_stock': float(ingredient.current_stock),
                'min_stock_threshold': float(ingredient.min_stock_threshold),
                'fill_percentage': ingredient.fill_percentage,
                'stock_status': ingredient.stock_status,
            })
    return items


def supplier_report(search=None):
    """
    Group ingredients by supplier with per-group and overall stock value.
    The search term filters groups by supplier name; totals cover every group.
    """
    groups = {}
    total_value = Decimal('0')
    total_items = 0

    for ingredient in Ingredient.objects.order_by('name'):
        supplier = (ingredient.supplier_name or '').strip() or UNASSIGNED_SUPPLIER
        groups.setdefault(supplier, []).append(ingredient)
        total_value += ingredient.current_stock * ingredient.unit_price
        total_items += 1

    stats = {
        'total_suppliers': len(groups),
        'total_items': total_items,
        'total_value': float(round_money(total_value)),
    }

    needle = (search or '').strip().lower()
    suppliers = []
    for name in sorted(groups):
        if needle and needle not in name.lower():
            continue
        items = groups[name]
        group_value = sum((i.current_stock * i.unit_price for i in items), Decimal('0'))
        suppliers.append({
            'supplier_name': name,
            'contact': items[0].supplier_contact or '',
            'item_count': len(items),
            'stock_value': float(round_money(group_value)),
            'items': [
                {
                    'id': i.pk,
                    'name': i.name,
                    'unit': i.unit,
                    'unit_price': float(i.unit_price),
                    'current_stock': float(i.current_stock),
                    'stock_value': float(round_money(i.current_stock * i.unit_price)),
                    'is_low_stock': i.is_low_stock,
                }
                for i in items
            ],
        })

    return {'stats': stats, 'suppliers': suppliers}


@transaction.atomic
def restore_default_ingredients(user=None):
    """
    Re-create catalog ingredients whose code is missing.
    Existing rows are left untouched. Returns how many were restored.
    """
    existing = set(Ingredient.objects.filter(code__isnull=False).values_list('code', flat=True))
    missing = [Ingredient(**fields) for fields in DEFAULT_INGREDIENTS if fields['code'] not in existing]
    Ingredient.objects.bulk_create(missing)

    restored = len(missing)
    logger.info(f"Restored {restored} default ingredient(s)")
    log_activity(
        user,
        ActivityLog.ACTION_RESTORE_DATA,
        f"Restored {restored} missing default ingredient(s)",
        metadata={'restored': restored, 'codes': [i.code for i in missing]},
    )
    return restored
