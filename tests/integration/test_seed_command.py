"""
Integration tests for the seed_canteen management command.
"""
from decimal import Decimal

import pytest
from django.core.management import call_command

from costing.models import Office, DailyEntry
from inventory.defaults import DEFAULT_INGREDIENTS, DEFAULT_OFFICES
from inventory.models import Ingredient


@pytest.mark.django_db
@pytest.mark.integration
class TestSeedCanteen:

    def test_seeds_catalogs(self):
        call_command('seed_canteen')

        assert Ingredient.objects.count() == len(DEFAULT_INGREDIENTS)
        assert Office.objects.count() == len(DEFAULT_OFFICES)
        assert not DailyEntry.objects.exists()

    def test_is_idempotent(self):
        call_command('seed_canteen')
        Ingredient.objects.filter(code='ing_01').update(current_stock=Decimal('1'))

        call_command('seed_canteen')

        assert Ingredient.objects.count() == len(DEFAULT_INGREDIENTS)
        assert Ingredient.objects.get(code='ing_01').current_stock == Decimal('1')

    def test_history(self):
        call_command('seed_canteen', history_days=5, seed=7)

        entries = DailyEntry.objects.all()
        assert 0 < entries.count() <= 5 * len(DEFAULT_OFFICES)
        for entry in entries:
            assert 50 <= entry.participant_count <= 199
            assert entry.items.count() == 3
            assert entry.total_cost == sum(item.amount for item in entry.items.all())

        # History does not move stock
        assert Ingredient.objects.get(code='ing_01').current_stock == Decimal('500')
