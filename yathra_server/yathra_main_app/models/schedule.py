"""Recurring routine and daily schedule models"""
from django.core.validators import RegexValidator, MinValueValidator, MaxValueValidator
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import RoutineStatus, RoutineAvailability

time_slot_validator = RegexValidator(
    regex=r'^([01]\d|2[0-3]):[0-5]\d$',
    message='Time must be zero-padded HH:MM',
)


class Routine(models.Model):
    """A driver's weekly time slot on a route, approved by an admin"""
    driver = models.ForeignKey(User, on_delete=models.CASCADE, related_name='routines')
    bus = models.ForeignKey('Bus', on_delete=models.CASCADE, related_name='routines')
    routine_name = models.CharField(max_length=100)
    route = models.CharField(max_length=200)
    # Zero-padded HH:MM, so string order is time order
    start_time = models.CharField(max_length=5, validators=[time_slot_validator])
    end_time = models.CharField(max_length=5, validators=[time_slot_validator])
    price_per_person = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    booking_commission = models.DecimalField(
        max_digits=5, decimal_places=2, default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    days_of_week = models.JSONField(default=list)
    status = models.CharField(max_length=20, choices=RoutineStatus.CHOICES, default=RoutineStatus.PENDING_APPROVAL)
    rejection_reason = models.TextField(blank=True, default='')
    approved_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['driver', '-created_at'], name='routine_driver_created_idx'),
            models.Index(fields=['status', '-created_at'], name='routine_status_created_idx'),
        ]

    def __str__(self):
        return f"{self.routine_name}: {self.route} {self.start_time}-{self.end_time}"

    @property
    def time_slot(self):
        return {'startTime': self.start_time, 'endTime': self.end_time}

    def runs_on(self, day_name):
        return day_name in [d.lower() for d in self.days_of_week or []]


class DailySchedule(models.Model):
    """Per-date override of a routine's availability; no row means available"""
    routine = models.ForeignKey(Routine, on_delete=models.CASCADE, related_name='daily_schedules')
    date = models.DateField()
    availability = models.CharField(
        max_length=20, choices=RoutineAvailability.CHOICES, default=RoutineAvailability.AVAILABLE,
    )
    notes = models.TextField(blank=True, default='')
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ['routine', 'date']

    def __str__(self):
        return f"{self.doc_key}: {self.availability}"

    @property
    def doc_key(self):
        return f"{self.routine_id}_{self.date.isoformat()}"
