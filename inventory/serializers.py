from decimal import Decimal

from rest_framework import serializers

from .models import Ingredient
from .services import ADJUST_ADD, ADJUST_SUBTRACT


class IngredientSerializer(serializers.ModelSerializer):
    """
    Serializer for the Ingredient model with its calculated stock flags.
    current_stock can be set on create; afterwards it only moves through
    stock adjustments and cost sheets.
    """
    is_low_stock = serializers.BooleanField(read_only=True)
    stock_status = serializers.CharField(read_only=True)

    class Meta:
        model = Ingredient
        fields = [
            'id',
            'code',
            'name',
            'unit',
            'unit_price',
            'current_stock',
            'min_stock_threshold',
            'last_updated',
            'supplier_name',
            'supplier_contact',
            'is_low_stock',
            'stock_status',
        ]
        read_only_fields = ['last_updated']
        extra_kwargs = {
            'unit_price': {'min_value': Decimal('0')},
            'current_stock': {'min_value': Decimal('0'), 'required': False},
            'min_stock_threshold': {'min_value': Decimal('0')},
        }

    def validate_code(self, value):
        return value or None

    def update(self, instance, validated_data):
        validated_data.pop('current_stock', None)
        validated_data.pop('code', None)
        return super().update(instance, validated_data)


class StockAdjustmentSerializer(serializers.Serializer):
    """
    Serializer for receiving or writing off stock of one ingredient.
    """
    ADJUSTMENT_TYPES = (
        (ADJUST_ADD, 'Stock In'),
        (ADJUST_SUBTRACT, 'Stock Out'),
    )

    type = serializers.ChoiceField(choices=ADJUSTMENT_TYPES)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=Decimal('0.001'))
    supplier = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
