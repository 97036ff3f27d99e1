import logging

from dj_rest_auth.views import LoginView, LogoutView

from auditing.models import ActivityLog
from auditing.services import log_activity

logger = logging.getLogger(__name__)


class CanteenLoginView(LoginView):
    """
    dj-rest-auth login that records a LOGIN entry in the activity log.
    """
    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)

        if response.status_code == 200:
            user = self.user
            logger.info(f"User {user.username} logged in as {user.role}")
            log_activity(user, ActivityLog.ACTION_LOGIN, f"{user.username} logged in")

        return response


class CanteenLogoutView(LogoutView):
    """
    dj-rest-auth logout that records a LOGOUT entry before the session ends.
    """
    def post(self, request, *args, **kwargs):
        user = request.user
        if user and user.is_authenticated:
            log_activity(user, ActivityLog.ACTION_LOGOUT, f"{user.username} logged out")
        return super().post(request, *args, **kwargs)
