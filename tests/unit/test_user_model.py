"""
Unit tests for User model.
These are fast tests that don't require complex setup.
"""
import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

User = get_user_model()


@pytest.mark.django_db
@pytest.mark.unit
class TestUserModel:
    """Test User model creation and roles."""

    def test_new_user_defaults_to_viewer(self):
        user = User.objects.create_user(username='clerk', password='testpass123')

        assert user.role == User.ROLE_VIEWER
        assert not user.is_canteen_admin
        assert user.check_password('testpass123')

    def test_admin_role(self, admin_user):
        assert admin_user.is_canteen_admin
        assert str(admin_user) == 'admin (ADMIN)'


@pytest.mark.django_db
@pytest.mark.unit
class TestCreateAdminCommand:

    def test_creates_admin_from_environment(self, monkeypatch):
        monkeypatch.setenv('CANTEEN_ADMIN_USERNAME', 'manager')
        monkeypatch.setenv('CANTEEN_ADMIN_PASSWORD', 'S3cure-pass!')

        call_command('create_admin')

        user = User.objects.get(username='manager')
        assert user.role == User.ROLE_ADMIN
        assert user.is_superuser

    def test_skips_when_environment_missing(self, monkeypatch):
        monkeypatch.delenv('CANTEEN_ADMIN_USERNAME', raising=False)
        monkeypatch.delenv('CANTEEN_ADMIN_PASSWORD', raising=False)

        call_command('create_admin')

        assert not User.objects.exists()

    def test_existing_user_is_left_alone(self, monkeypatch, viewer_user):
        monkeypatch.setenv('CANTEEN_ADMIN_USERNAME', 'viewer')
        monkeypatch.setenv('CANTEEN_ADMIN_PASSWORD', 'S3cure-pass!')

        call_command('create_admin')

        viewer_user.refresh_from_db()
        assert viewer_user.role == User.ROLE_VIEWER
        assert User.objects.count() == 1
