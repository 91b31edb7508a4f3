"""Trip and seat availability models"""
from django.db import models
from django.contrib.auth.models import User
from django.db.models import F, Q

from ..utils.constants import TripStatus


class Trip(models.Model):
    """Single departure of a trip_available bus with a seat counter"""
    bus = models.ForeignKey('Bus', on_delete=models.CASCADE, related_name='trips')
    origin = models.CharField(max_length=100)
    destination = models.CharField(max_length=100)
    departure_time = models.DateTimeField(db_index=True)
    arrival_time = models.DateTimeField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    available_seats = models.PositiveIntegerField()
    booked_seats = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=TripStatus.CHOICES, default=TripStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=Q(booked_seats__lte=F('available_seats')),
                name='trip_booked_within_capacity',
            ),
        ]

    def __str__(self):
        return f"{self.origin} → {self.destination} ({self.departure_time:%Y-%m-%d %H:%M})"

    @property
    def remaining_seats(self):
        return self.available_seats - self.booked_seats


class SeatAvailability(models.Model):
    """
    Seat map for one bus on one travel date.

    seats maps seat id -> {seatNumber, status, bookedBy, bookedAt, price, type}.
    A row only exists once something was booked; before that the default
    layout is synthesized for display.
    """
    bus = models.ForeignKey('Bus', on_delete=models.CASCADE, related_name='seat_availability')
    travel_date = models.DateField()
    route = models.CharField(max_length=200, blank=True, default='')
    seats = models.JSONField(default=dict)
    is_private_hire = models.BooleanField(default=False)
    hired_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True, related_name='hired_seat_maps')
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ['bus', 'travel_date']
        verbose_name_plural = 'seat availability'

    def __str__(self):
        return self.doc_key

    @property
    def doc_key(self):
        return f"{self.bus_id}_{self.travel_date.isoformat()}"
