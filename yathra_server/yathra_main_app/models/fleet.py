"""Fleet-related models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import BusType, BusStatus


class Bus(models.Model):
    """Bus registered by a driver; one bus per driver"""
    driver = models.OneToOneField(User, on_delete=models.CASCADE, related_name='bus')
    bus_name = models.CharField(max_length=100)
    bus_number = models.CharField(max_length=20, unique=True)
    number_of_seats = models.PositiveIntegerField()
    bus_type = models.CharField(max_length=20, choices=BusType.CHOICES, default=BusType.REGULAR_ROUTE)
    available_for_trips = models.BooleanField(default=False)
    route = models.CharField(max_length=200, blank=True, default='')
    operating_days = models.JSONField(default=list, blank=True)

    default_price_per_person = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    booking_commission = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    pricing_updated_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(max_length=20, choices=BusStatus.CHOICES, default=BusStatus.PENDING)
    submitted_at = models.DateTimeField(auto_now_add=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(blank=True, default='')

    class Meta:
        indexes = [
            models.Index(fields=['status', 'submitted_at'], name='bus_status_submitted_idx'),
        ]

    def __str__(self):
        return f"{self.bus_number} - {self.bus_name}"

    def operates_on(self, day_name):
        """Buses without declared operating days run every day"""
        if not self.operating_days:
            return True
        return day_name in [d.lower() for d in self.operating_days]
