"""
Pytest configuration and shared fixtures.
This file is automatically loaded by pytest.
"""
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from costing.models import Office
from inventory.models import Ingredient

User = get_user_model()


@pytest.fixture
def api_client():
    """Returns a DRF API client for testing API endpoints."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Creates and returns a canteen admin."""
    return User.objects.create_user(
        username='admin',
        password='adminpass123',
        first_name='Admin',
        last_name='User',
        role=User.ROLE_ADMIN
    )


@pytest.fixture
def viewer_user(db):
    """Creates and returns a read-only viewer."""
    return User.objects.create_user(
        username='viewer',
        password='viewerpass123',
        role=User.ROLE_VIEWER
    )


@pytest.fixture
def admin_client(admin_user):
    """Returns an API client authenticated as the admin."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def viewer_client(viewer_user):
    """Returns an API client authenticated as the viewer."""
    client = APIClient()
    client.force_authenticate(user=viewer_user)
    return client


@pytest.fixture
def office(db):
    return Office.objects.create(code='off_01', name='ACI Centre (HQ)', location='Tejgaon')


@pytest.fixture
def rice(db):
    return Ingredient.objects.create(
        code='ing_01',
        name='Rice (Miniket)',
        unit='kg',
        unit_price=Decimal('0.70'),
        current_stock=Decimal('500'),
        min_stock_threshold=Decimal('100'),
        supplier_name='City Rice Traders',
        supplier_contact='01700-000001'
    )


@pytest.fixture
def chicken(db):
    return Ingredient.objects.create(
        code='ing_02',
        name='Chicken (Broiler)',
        unit='kg',
        unit_price=Decimal('2.50'),
        current_stock=Decimal('120'),
        min_stock_threshold=Decimal('50')
    )


@pytest.fixture
def ingredients(rice, chicken):
    return [rice, chicken]
