"""
Unit tests for the activity log helpers.
"""
import pytest
from django.contrib.auth.models import AnonymousUser

from auditing.models import ActivityLog
from auditing.services import log_activity, recent_activity


@pytest.mark.django_db
@pytest.mark.unit
class TestLogActivity:

    def test_records_user_and_role(self, viewer_user):
        log = log_activity(viewer_user, ActivityLog.ACTION_LOGIN, 'viewer logged in')

        assert log.user == viewer_user
        assert log.user_role == 'VIEWER'
        assert log.metadata == {}

    def test_anonymous_user_is_stored_as_system(self):
        log = log_activity(AnonymousUser(), ActivityLog.ACTION_RESTORE_DATA, 'restore')

        assert log.user is None
        assert log.user_role == ''

    def test_failure_does_not_raise(self, admin_user, mocker):
        mocker.patch.object(ActivityLog.objects, 'create', side_effect=RuntimeError('disk full'))

        assert log_activity(admin_user, ActivityLog.ACTION_LOGIN) is None

    def test_recent_activity_newest_first_and_filtered(self, admin_user):
        log_activity(admin_user, ActivityLog.ACTION_LOGIN, 'first')
        log_activity(admin_user, ActivityLog.ACTION_UPDATE_STOCK, 'second')
        log_activity(admin_user, ActivityLog.ACTION_LOGOUT, 'third')

        assert [log.details for log in recent_activity()] == ['third', 'second', 'first']
        assert [log.details for log in recent_activity(limit=1)] == ['third']
        assert [log.details for log in recent_activity(action='UPDATE_STOCK')] == ['second']
