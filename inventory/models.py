from django.db import models
from django.utils import timezone
from decimal import Decimal


class Ingredient(models.Model):
    """
    A stocked canteen ingredient with its unit price and low-stock threshold.
    """
    code = models.CharField(
        max_length=20, unique=True, null=True, blank=True,
        help_text="Catalog code of a default ingredient, e.g. 'ing_01'."
    )
    name = models.CharField(max_length=255)
    unit = models.CharField(max_length=20, help_text="e.g. 'kg', 'L', 'pcs'")
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    current_stock = models.DecimalField(max_digits=12, decimal_places=3, default=Decimal('0.000'))
    min_stock_threshold = models.DecimalField(
        max_digits=12, decimal_places=3, default=Decimal('0.000'),
        help_text="Stock level at or below which the ingredient is flagged low."
    )
    # Refreshed by stock movements only, not by master edits
    last_updated = models.DateTimeField(default=timezone.now)
    supplier_name = models.CharField(max_length=255, blank=True, default='')
    supplier_contact = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_low_stock(self):
        return self.current_stock <= self.min_stock_threshold

    @property
    def stock_status(self):
        if self.current_stock <= 0:
            return 'Out of Stock'
        elif self.is_low_stock:
            return 'Low Stock'
        return 'In Stock'

    @property
    def fill_percentage(self):
        if self.min_stock_threshold <= 0:
            return 0.0
        return round(min(float(self.current_stock / self.min_stock_threshold * 100), 100.0), 1)
