"""
Activity logging helpers shared by every app.
"""
import logging

from django.db import transaction

from .models import ActivityLog

logger = logging.getLogger(__name__)


def log_activity(user, action, details='', metadata=None):
    """
    Append an entry to the activity log.

    Logging failures are reported and swallowed so that the operation
    being recorded is never rolled back because of its audit trail.
    Returns the created ActivityLog, or None when it could not be written.
    """
    if user is not None and not getattr(user, 'is_authenticated', False):
        user = None

    try:
        # Savepoint so a failed insert does not poison the caller's transaction
        with transaction.atomic():
            return ActivityLog.objects.create(
                user=user,
                user_role=getattr(user, 'role', '') or '',
                action=action,
                details=details,
                metadata=metadata or {},
            )
    except Exception as e:
        logger.error(f"Failed to write activity log ({action}): {e}", exc_info=True)
        return None


def recent_activity(limit=100, action=None):
    """Newest-first activity, optionally filtered to one action."""
    queryset = ActivityLog.objects.select_related('user')
    if action:
        queryset = queryset.filter(action=action)
    return queryset.order_by('-timestamp', '-id')[:limit]
