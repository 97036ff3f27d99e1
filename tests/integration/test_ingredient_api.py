"""
Integration tests for the ingredient API.
"""
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from auditing.models import ActivityLog
from costing.models import ConsumptionItem
from inventory.models import Ingredient


@pytest.mark.django_db
@pytest.mark.integration
class TestIngredientAPI:

    def test_list_ordered_by_name(self, viewer_client, ingredients):
        response = viewer_client.get(reverse('ingredient-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [item['name'] for item in response.data] == ['Chicken (Broiler)', 'Rice (Miniket)']
        assert response.data[1]['stock_status'] == 'In Stock'

    def test_admin_creates_ingredient(self, admin_client):
        payload = {
            'name': 'Green Chili',
            'unit': 'kg',
            'unit_price': '1.10',
            'current_stock': '5',
            'min_stock_threshold': '2',
            'supplier_name': 'Kawran Bazar',
        }
        response = admin_client.post(reverse('ingredient-list'), payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.data['current_stock']) == Decimal('5')
        assert response.data['code'] is None
        assert ActivityLog.objects.filter(action=ActivityLog.ACTION_UPDATE_MASTER).count() == 1

    def test_viewer_cannot_create(self, viewer_client):
        response = viewer_client.post(
            reverse('ingredient-list'),
            {'name': 'Salt', 'unit': 'kg', 'unit_price': '0.2', 'min_stock_threshold': '1'},
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error']['code'] == 'PERMISSION_DENIED'
        assert not Ingredient.objects.filter(name='Salt').exists()

    def test_master_edit_never_changes_stock(self, admin_client, rice):
        response = admin_client.patch(
            reverse('ingredient-detail', args=[rice.pk]),
            {'unit_price': '0.75', 'current_stock': '1'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        rice.refresh_from_db()
        assert rice.unit_price == Decimal('0.75')
        assert rice.current_stock == Decimal('500')

        log = ActivityLog.objects.get(action=ActivityLog.ACTION_UPDATE_MASTER)
        assert log.metadata['changed_fields'] == ['unit_price']

    def test_negative_price_rejected(self, admin_client, rice):
        response = admin_client.patch(
            reverse('ingredient-detail', args=[rice.pk]),
            {'unit_price': '-1'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'
        assert response.data['error']['field'] == 'unit_price'

    def test_delete_keeps_cost_sheet_lines(self, admin_client, office, rice, chicken):
        admin_client.post(reverse('entry-list'), {
            'office': office.pk,
            'participant_count': 10,
            'items': [{'ingredient': rice.pk, 'quantity': '2'}],
        }, format='json')

        response = admin_client.delete(reverse('ingredient-detail', args=[rice.pk]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        line = ConsumptionItem.objects.get()
        assert line.ingredient is None
        assert line.rate == Decimal('0.70')

    def test_adjust_stock(self, admin_client, rice):
        response = admin_client.post(
            reverse('ingredient-adjust-stock', args=[rice.pk]),
            {'type': 'subtract', 'quantity': '12.345', 'reason': 'spoilage'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.data['current_stock']) == Decimal('487.655')

    def test_adjust_stock_validation(self, admin_client, rice):
        response = admin_client.post(
            reverse('ingredient-adjust-stock', args=[rice.pk]),
            {'type': 'add', 'quantity': '0'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['field'] == 'quantity'

    def test_viewer_cannot_adjust_stock(self, viewer_client, rice):
        response = viewer_client.post(
            reverse('ingredient-adjust-stock', args=[rice.pk]),
            {'type': 'add', 'quantity': '1'},
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_adjust_unknown_ingredient(self, admin_client):
        response = admin_client.post(
            reverse('ingredient-adjust-stock', args=[9999]),
            {'type': 'add', 'quantity': '1'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['code'] == 'NOT_FOUND'

    def test_low_stock_and_suppliers(self, viewer_client, rice, chicken):
        chicken.current_stock = Decimal('10')
        chicken.save()

        low = viewer_client.get(reverse('ingredient-low-stock'))
        suppliers = viewer_client.get(reverse('ingredient-suppliers'), {'search': 'unassigned'})

        assert [item['name'] for item in low.data] == ['Chicken (Broiler)']
        assert low.data[0]['fill_percentage'] == 20.0
        assert [group['supplier_name'] for group in suppliers.data['suppliers']] == ['Unassigned / Local Market']

    def test_restore_defaults(self, admin_client, rice):
        response = admin_client.post(reverse('ingredient-restore-defaults'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'success'
        assert response.data['data']['restored'] == 11
        assert Ingredient.objects.count() == 12
