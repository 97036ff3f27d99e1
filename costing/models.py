from django.db import models
from django.conf import settings
from decimal import Decimal, ROUND_HALF_UP


class Office(models.Model):
    """
    A site whose canteen consumption is recorded. Reference data only.
    """
    code = models.CharField(max_length=20, unique=True)
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ['code']

    def __str__(self):
        return f"{self.name} ({self.location})"


class DailyEntry(models.Model):
    """
    A cost sheet: one day's canteen consumption and what it cost.
    """
    date = models.DateField(db_index=True)
    office = models.ForeignKey(Office, on_delete=models.PROTECT, related_name='entries')
    participant_count = models.PositiveIntegerField()
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    menu_description = models.TextField(blank=True)
    stock_remarks = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cost_sheets'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-date', '-created_at']
        verbose_name_plural = 'daily entries'

    def __str__(self):
        return f"{self.date} - {self.office.name}: {self.total_cost}"

    @property
    def per_head_cost(self):
        if not self.participant_count:
            return Decimal('0.00')
        return (self.total_cost / self.participant_count).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


class ConsumptionItem(models.Model):
    """
    One consumed ingredient on a cost sheet, priced at the rate in force
    when the sheet was recorded.
    """
    entry = models.ForeignKey(DailyEntry, on_delete=models.CASCADE, related_name='items')
    # Cleared when the ingredient is deleted; the line is kept for history
    ingredient = models.ForeignKey(
        'inventory.Ingredient',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='consumption_items'
    )
    quantity = models.DecimalField(max_digits=12, decimal_places=3)
    rate = models.DecimalField(max_digits=10, decimal_places=2)
    remarks = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        name = self.ingredient.name if self.ingredient else 'Unknown Item'
        return f"{name} x {self.quantity}"

    @property
    def amount(self):
        return (self.rate * self.quantity).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
