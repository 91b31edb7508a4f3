"""Booking-related models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import BookingStatus, PaymentStatus


class Booking(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='bookings')
    bus = models.ForeignKey('Bus', on_delete=models.PROTECT, related_name='bookings')
    trip = models.ForeignKey('Trip', on_delete=models.PROTECT, null=True, blank=True, related_name='bookings')
    hire_request = models.ForeignKey('HireRequest', on_delete=models.SET_NULL, null=True, blank=True, related_name='bookings')
    seats = models.JSONField(default=list)
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    travel_date = models.DateField()
    route = models.CharField(max_length=200, blank=True, default='')
    status = models.CharField(max_length=20, choices=BookingStatus.CHOICES, default=BookingStatus.CONFIRMED)
    payment_status = models.CharField(max_length=20, choices=PaymentStatus.CHOICES, default=PaymentStatus.PENDING)
    is_trip_booking = models.BooleanField(default=False)
    is_private_hire = models.BooleanField(default=False)
    hire_type = models.CharField(max_length=20, blank=True, default='')
    booked_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    confirmed_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', '-booked_at'], name='booking_user_booked_idx'),
            models.Index(fields=['bus', '-booked_at'], name='booking_bus_booked_idx'),
        ]

    def __str__(self):
        return f"Booking {self.id} by {self.user.username} - {self.route} ({self.travel_date})"
