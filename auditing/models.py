from django.db import models
from django.conf import settings


class ActivityLog(models.Model):
    """
    Records a significant action taken by a user in the system.
    Entries are append-only; nothing in the API edits or deletes them.
    """
    ACTION_LOGIN = 'LOGIN'
    ACTION_LOGOUT = 'LOGOUT'
    ACTION_CREATE_ENTRY = 'CREATE_ENTRY'
    ACTION_DELETE_ENTRY = 'DELETE_ENTRY'
    ACTION_UPDATE_STOCK = 'UPDATE_STOCK'
    ACTION_UPDATE_MASTER = 'UPDATE_MASTER'
    ACTION_RESTORE_DATA = 'RESTORE_DATA'

    ACTION_TYPES = (
        (ACTION_LOGIN, 'Login'),
        (ACTION_LOGOUT, 'Logout'),
        (ACTION_CREATE_ENTRY, 'Cost Sheet Created'),
        (ACTION_DELETE_ENTRY, 'Cost Sheet Deleted'),
        (ACTION_UPDATE_STOCK, 'Stock Adjusted'),
        (ACTION_UPDATE_MASTER, 'Ingredient Master Updated'),
        (ACTION_RESTORE_DATA, 'Default Data Restored'),
    )

    # Keep the log even if the user is deleted
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='activity_logs'
    )
    # Role at the time of the action
    user_role = models.CharField(max_length=20, blank=True)
    action = models.CharField(max_length=50, choices=ACTION_TYPES)
    details = models.TextField(blank=True)
    # Structured data such as stock movements, read back by the purchase report
    metadata = models.JSONField(default=dict, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-timestamp', '-id']

    def __str__(self):
        return f'{self.user} - {self.action} at {self.timestamp.strftime("%Y-%m-%d %H:%M")}'
