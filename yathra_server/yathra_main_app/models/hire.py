"""Private hire negotiation models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import HireRequestStatus


class HireRequest(models.Model):
    passenger = models.ForeignKey(User, on_delete=models.CASCADE, related_name='hire_requests')
    bus = models.ForeignKey('Bus', on_delete=models.CASCADE, related_name='hire_requests')
    pickup_location = models.CharField(max_length=200)
    destination = models.CharField(max_length=200)
    hire_date = models.DateField()
    passenger_count = models.PositiveIntegerField(default=1)
    message = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=HireRequestStatus.CHOICES, default=HireRequestStatus.PENDING)
    final_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    driver_notes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    accepted_at = models.DateTimeField(null=True, blank=True)
    confirmed_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=['passenger', '-created_at'], name='hire_passenger_created_idx'),
            models.Index(fields=['bus', '-created_at'], name='hire_bus_created_idx'),
        ]

    def __str__(self):
        return f"Hire {self.id}: {self.pickup_location} → {self.destination} ({self.status})"
