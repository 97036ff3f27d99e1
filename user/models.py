from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Custom User model for the canteen dashboard.
    Admins record cost sheets and manage stock; viewers get read-only access.
    """
    ROLE_ADMIN = 'ADMIN'
    ROLE_VIEWER = 'VIEWER'

    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_VIEWER, 'Viewer'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_VIEWER,
        help_text="Admins can write; viewers can only read."
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_canteen_admin(self):
        return self.role == self.ROLE_ADMIN
