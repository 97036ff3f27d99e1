from django.contrib import admin
from .models import Ingredient


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ('name', 'code', 'unit', 'unit_price', 'current_stock', 'min_stock_threshold', 'supplier_name')
    search_fields = ('name', 'code', 'supplier_name')
    readonly_fields = ('last_updated',)
