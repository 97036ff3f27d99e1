from decimal import Decimal

from rest_framework import serializers

from .models import Office, DailyEntry, ConsumptionItem
from .services import UNKNOWN_ITEM


class OfficeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Office
        fields = ['id', 'code', 'name', 'location']


class ConsumptionItemSerializer(serializers.ModelSerializer):
    """
    A cost sheet line. Lines whose ingredient was deleted show as 'Unknown Item'.
    """
    name = serializers.SerializerMethodField()
    unit = serializers.SerializerMethodField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = ConsumptionItem
        fields = ['id', 'ingredient', 'name', 'unit', 'quantity', 'rate', 'amount', 'remarks']

    def get_name(self, obj):
        return obj.ingredient.name if obj.ingredient else UNKNOWN_ITEM

    def get_unit(self, obj):
        return obj.ingredient.unit if obj.ingredient else '-'


class DailyEntrySerializer(serializers.ModelSerializer):
    office_name = serializers.CharField(source='office.name', read_only=True)
    per_head_cost = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    created_by = serializers.SerializerMethodField()
    items = ConsumptionItemSerializer(many=True, read_only=True)

    class Meta:
        model = DailyEntry
        fields = [
            'id',
            'date',
            'office',
            'office_name',
            'participant_count',
            'total_cost',
            'per_head_cost',
            'menu_description',
            'stock_remarks',
            'created_by',
            'created_at',
            'items',
        ]

    def get_created_by(self, obj):
        return obj.created_by.username if obj.created_by else None


class DraftItemSerializer(serializers.Serializer):
    """
    A row of the cost sheet form. Incomplete rows are accepted here and
    dropped by the service.
    """
    ingredient = serializers.IntegerField(required=False, allow_null=True)
    quantity = serializers.DecimalField(max_digits=None, decimal_places=None, required=False, allow_null=True, default=Decimal('0'))
    remarks = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class DraftEntrySerializer(serializers.Serializer):
    date = serializers.DateField(required=False, allow_null=True)
    office = serializers.IntegerField(required=False, allow_null=True)
    participant_count = serializers.IntegerField(required=False, min_value=0, default=0)
    menu_description = serializers.CharField(required=False, allow_blank=True, default='')
    stock_remarks = serializers.CharField(required=False, allow_blank=True, default='')
    items = DraftItemSerializer(many=True, required=False, default=list)


class PreviewLineSerializer(serializers.Serializer):
    ingredient_id = serializers.IntegerField()
    name = serializers.CharField()
    unit = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3)
    rate = serializers.DecimalField(max_digits=10, decimal_places=2)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    remarks = serializers.CharField(allow_blank=True)


class PreviewSerializer(serializers.Serializer):
    date = serializers.DateField()
    participant_count = serializers.IntegerField()
    lines = PreviewLineSerializer(many=True)
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    per_head_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
