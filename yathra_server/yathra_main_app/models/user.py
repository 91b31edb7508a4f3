"""User-related models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import UserRole


class Profile(models.Model):
    """
    Application profile for an identity-provider user.

    The Django username is the identity provider uid. A profile may be
    missing for users who booked before completing registration; the
    booking engine creates a minimal passenger profile in that case.
    """
    user = models.OneToOneField(User, on_delete=models.CASCADE)
    email = models.EmailField(blank=True, default='')
    display_name = models.CharField(max_length=100, blank=True, default='')
    phone_number = models.CharField(max_length=20, blank=True, default='')
    role = models.CharField(max_length=20, choices=UserRole.CHOICES, default=UserRole.PASSENGER, db_index=True)
    booking_ids = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username} ({self.role})"
