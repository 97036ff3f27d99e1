import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from costing.models import Office, DailyEntry, ConsumptionItem
from inventory.defaults import DEFAULT_INGREDIENTS, DEFAULT_OFFICES, HISTORY_CONSUMPTION_PER_HEAD
from inventory.models import Ingredient
from inventory.services import round_money, round_stock


class Command(BaseCommand):
    help = 'Seed default ingredients and offices, optionally with sample cost sheet history'

    def add_arguments(self, parser):
        parser.add_argument(
            '--history-days',
            type=int,
            default=0,
            help='Generate this many days of sample cost sheets when none exist.',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible sample history.',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if Ingredient.objects.exists():
            self.stdout.write(self.style.WARNING('Ingredients already present; skipping ingredient seed.'))
        else:
            Ingredient.objects.bulk_create([Ingredient(**fields) for fields in DEFAULT_INGREDIENTS])
            self.stdout.write(self.style.SUCCESS(f'Seeded {len(DEFAULT_INGREDIENTS)} ingredients.'))

        created_offices = 0
        for code, name, location in DEFAULT_OFFICES:
            _, created = Office.objects.get_or_create(code=code, defaults={'name': name, 'location': location})
            created_offices += int(created)
        self.stdout.write(self.style.SUCCESS(f'Seeded {created_offices} offices.'))

        days = options['history_days']
        if days <= 0:
            return
        if DailyEntry.objects.exists():
            self.stdout.write(self.style.WARNING('Cost sheets already present; skipping sample history.'))
            return

        count = self._generate_history(days, random.Random(options['seed']))
        self.stdout.write(self.style.SUCCESS(f'Generated {count} sample cost sheets over {days} days.'))

    def _generate_history(self, days, rng):
        ingredients = Ingredient.objects.in_bulk(
            [code for code, _ in HISTORY_CONSUMPTION_PER_HEAD], field_name='code'
        )
        if len(ingredients) < len(HISTORY_CONSUMPTION_PER_HEAD):
            self.stdout.write(self.style.WARNING('Default ingredients are missing; cannot generate history.'))
            return 0

        offices = list(Office.objects.order_by('code'))
        today = timezone.localdate()
        count = 0

        # Sample history does not move stock
        for offset in range(days):
            entry_date = today - timedelta(days=offset)
            for office in offices:
                if rng.random() <= 0.2:
                    continue
                participants = rng.randint(50, 199)
                lines = []
                for code, per_head in HISTORY_CONSUMPTION_PER_HEAD:
                    ingredient = ingredients[code]
                    lines.append((ingredient, round_stock(per_head * participants)))

                total = round_money(sum((i.unit_price * qty for i, qty in lines), Decimal('0')))
                entry = DailyEntry.objects.create(
                    date=entry_date,
                    office=office,
                    participant_count=participants,
                    total_cost=total,
                    menu_description='Standard Lunch Menu',
                )
                ConsumptionItem.objects.bulk_create([
                    ConsumptionItem(entry=entry, ingredient=ingredient, quantity=qty, rate=ingredient.unit_price)
                    for ingredient, qty in lines
                ])
                count += 1
        return count
