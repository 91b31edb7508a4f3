"""Routine and daily schedule serializers"""
from rest_framework import serializers

from ..models import Routine
from ..utils.constants import RoutineAvailability, RoutineStatus


class RoutineSerializer(serializers.ModelSerializer):
    driverId = serializers.CharField(source='driver.username', read_only=True)
    busId = serializers.IntegerField(source='bus_id')
    routineName = serializers.CharField(source='routine_name')
    timeSlot = serializers.DictField(source='time_slot', read_only=True)
    startTime = serializers.CharField(source='start_time', write_only=True)
    endTime = serializers.CharField(source='end_time', write_only=True)
    pricePerPerson = serializers.DecimalField(source='price_per_person', max_digits=10, decimal_places=2)
    bookingCommission = serializers.DecimalField(
        source='booking_commission', max_digits=5, decimal_places=2, required=False, default=0,
    )
    daysOfWeek = serializers.ListField(source='days_of_week', child=serializers.CharField(), allow_empty=False)
    rejectionReason = serializers.CharField(source='rejection_reason', read_only=True)
    approvedAt = serializers.DateTimeField(source='approved_at', read_only=True)
    rejectedAt = serializers.DateTimeField(source='rejected_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Routine
        fields = [
            'id', 'driverId', 'busId', 'routineName', 'route', 'timeSlot', 'startTime', 'endTime',
            'pricePerPerson', 'bookingCommission', 'daysOfWeek', 'status', 'rejectionReason',
            'approvedAt', 'rejectedAt', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['status']


class RoutineUpdateSerializer(serializers.Serializer):
    """Partial routine update; keys map to model field names"""
    routineName = serializers.CharField(source='routine_name', required=False)
    route = serializers.CharField(required=False)
    startTime = serializers.CharField(source='start_time', required=False)
    endTime = serializers.CharField(source='end_time', required=False)
    pricePerPerson = serializers.DecimalField(source='price_per_person', max_digits=10, decimal_places=2, required=False)
    bookingCommission = serializers.DecimalField(source='booking_commission', max_digits=5, decimal_places=2, required=False)
    daysOfWeek = serializers.ListField(source='days_of_week', child=serializers.CharField(), required=False)


class RoutineStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[RoutineStatus.APPROVED, RoutineStatus.REJECTED])
    rejectionReason = serializers.CharField(required=False, allow_blank=True)


class DailyStatusSerializer(serializers.Serializer):
    date = serializers.DateField()
    availability = serializers.ChoiceField(choices=RoutineAvailability.CHOICES)
    notes = serializers.CharField(required=False, allow_blank=True)
