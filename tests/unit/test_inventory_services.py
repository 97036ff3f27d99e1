"""
Unit tests for stock arithmetic and ingredient reports.
"""
from decimal import Decimal

import pytest

from auditing.models import ActivityLog
from canteen_backend.exceptions import InventoryError
from inventory.defaults import DEFAULT_INGREDIENTS
from inventory.models import Ingredient
from inventory.services import (
    adjust_stock, low_stock_items, supplier_report, restore_default_ingredients
)


@pytest.mark.unit
class TestIngredientFlags:

    def test_stock_status(self):
        ingredient = Ingredient(current_stock=Decimal('0'), min_stock_threshold=Decimal('10'))
        assert ingredient.stock_status == 'Out of Stock'

        ingredient.current_stock = Decimal('10')
        assert ingredient.is_low_stock
        assert ingredient.stock_status == 'Low Stock'

        ingredient.current_stock = Decimal('10.001')
        assert not ingredient.is_low_stock
        assert ingredient.stock_status == 'In Stock'

    def test_fill_percentage_is_capped(self):
        assert Ingredient(current_stock=Decimal('5'), min_stock_threshold=Decimal('20')).fill_percentage == 25.0
        assert Ingredient(current_stock=Decimal('50'), min_stock_threshold=Decimal('20')).fill_percentage == 100.0
        assert Ingredient(current_stock=Decimal('5'), min_stock_threshold=Decimal('0')).fill_percentage == 0.0


@pytest.mark.django_db
@pytest.mark.unit
class TestAdjustStock:

    def test_add_increases_stock_and_logs_movement(self, rice, admin_user):
        adjust_stock(rice.pk, Decimal('25.5'), 'add', user=admin_user, supplier='City Rice Traders')

        rice.refresh_from_db()
        assert rice.current_stock == Decimal('525.500')

        log = ActivityLog.objects.get(action=ActivityLog.ACTION_UPDATE_STOCK)
        assert log.user == admin_user
        assert log.user_role == 'ADMIN'
        assert log.metadata['type'] == 'add'
        assert log.metadata['quantity'] == 25.5
        assert log.metadata['ingredient_id'] == rice.pk
        assert log.metadata['old_stock'] == 500.0
        assert log.metadata['new_stock'] == 525.5
        assert log.metadata['supplier'] == 'City Rice Traders'

    def test_subtract_clamps_at_zero(self, chicken, admin_user):
        adjust_stock(chicken.pk, Decimal('500'), 'subtract', user=admin_user)

        chicken.refresh_from_db()
        assert chicken.current_stock == Decimal('0')

    def test_result_rounded_to_three_decimals(self, rice, admin_user):
        adjust_stock(rice.pk, Decimal('0.0004'), 'add', user=admin_user)

        rice.refresh_from_db()
        assert rice.current_stock == Decimal('500.000')

    def test_refreshes_last_updated(self, rice, admin_user):
        before = rice.last_updated
        adjust_stock(rice.pk, Decimal('1'), 'add', user=admin_user)

        rice.refresh_from_db()
        assert rice.last_updated > before

    def test_rejects_non_positive_quantity(self, rice, admin_user):
        with pytest.raises(InventoryError) as excinfo:
            adjust_stock(rice.pk, Decimal('0'), 'add', user=admin_user)
        assert excinfo.value.code == 'INVALID_QUANTITY'

    def test_rejects_unknown_type(self, rice, admin_user):
        with pytest.raises(InventoryError) as excinfo:
            adjust_stock(rice.pk, Decimal('1'), 'set', user=admin_user)
        assert excinfo.value.code == 'INVALID_ADJUSTMENT_TYPE'

    def test_missing_ingredient(self, admin_user):
        with pytest.raises(InventoryError) as excinfo:
            adjust_stock(9999, Decimal('1'), 'add', user=admin_user)
        assert excinfo.value.status_code == 404


@pytest.mark.django_db
@pytest.mark.unit
class TestInventoryReports:

    def test_low_stock_items(self, rice, chicken):
        chicken.current_stock = Decimal('25')
        chicken.save()

        items = low_stock_items()

        assert [item['name'] for item in items] == ['Chicken (Broiler)']
        assert items[0]['fill_percentage'] == 50.0

    def test_supplier_report_groups_and_totals(self, rice, chicken):
        report = supplier_report()

        names = [group['supplier_name'] for group in report['suppliers']]
        assert names == ['City Rice Traders', 'Unassigned / Local Market']

        rice_group = report['suppliers'][0]
        assert rice_group['contact'] == '01700-000001'
        assert rice_group['stock_value'] == 350.0

        assert report['stats'] == {'total_suppliers': 2, 'total_items': 2, 'total_value': 650.0}

    def test_supplier_report_search(self, rice, chicken):
        report = supplier_report('rice')

        assert [group['supplier_name'] for group in report['suppliers']] == ['City Rice Traders']
        assert report['stats']['total_suppliers'] == 2


@pytest.mark.django_db
@pytest.mark.unit
class TestRestoreDefaults:

    def test_restores_only_missing_codes(self, rice, admin_user):
        rice.current_stock = Decimal('3')
        rice.save()

        restored = restore_default_ingredients(user=admin_user)

        assert restored == len(DEFAULT_INGREDIENTS) - 1
        rice.refresh_from_db()
        assert rice.current_stock == Decimal('3')
        assert ActivityLog.objects.filter(action=ActivityLog.ACTION_RESTORE_DATA).count() == 1

    def test_second_restore_is_a_no_op(self, admin_user):
        restore_default_ingredients(user=admin_user)
        assert restore_default_ingredients(user=admin_user) == 0
        assert Ingredient.objects.count() == len(DEFAULT_INGREDIENTS)
