"""Bus and trip serializers"""
from rest_framework import serializers

from ..models import Bus, Trip
from ..utils.constants import BusType


class BusSerializer(serializers.ModelSerializer):
    driverId = serializers.CharField(source='driver.username', read_only=True)
    busName = serializers.CharField(source='bus_name')
    busNumber = serializers.CharField(source='bus_number')
    numberOfSeats = serializers.IntegerField(source='number_of_seats', min_value=1)
    busType = serializers.ChoiceField(source='bus_type', choices=BusType.CHOICES, required=False, default=BusType.REGULAR_ROUTE)
    availableForTrips = serializers.BooleanField(source='available_for_trips', read_only=True)
    operatingDays = serializers.ListField(source='operating_days', child=serializers.CharField(), required=False, default=list)
    rejectionReason = serializers.CharField(source='rejection_reason', read_only=True)
    submittedAt = serializers.DateTimeField(source='submitted_at', read_only=True)
    approvedAt = serializers.DateTimeField(source='approved_at', read_only=True)
    rejectedAt = serializers.DateTimeField(source='rejected_at', read_only=True)

    class Meta:
        model = Bus
        fields = [
            'id', 'driverId', 'busName', 'busNumber', 'numberOfSeats', 'busType', 'availableForTrips',
            'route', 'operatingDays', 'status', 'rejectionReason', 'submittedAt', 'approvedAt', 'rejectedAt',
        ]
        read_only_fields = ['status']


class BusReviewSerializer(serializers.Serializer):
    userId = serializers.CharField()
    reason = serializers.CharField(required=False, allow_blank=True)


class BusPricingSerializer(serializers.Serializer):
    defaultPricePerPerson = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    bookingCommission = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False)


class TripSerializer(serializers.ModelSerializer):
    busId = serializers.IntegerField(source='bus_id')
    # from/to are Python keywords, added in get_fields
    departureTime = serializers.DateTimeField(source='departure_time')
    arrivalTime = serializers.DateTimeField(source='arrival_time')
    availableSeats = serializers.IntegerField(source='available_seats', min_value=1)
    bookedSeats = serializers.IntegerField(source='booked_seats', read_only=True)
    remainingSeats = serializers.IntegerField(source='remaining_seats', read_only=True)

    class Meta:
        model = Trip
        fields = [
            'id', 'busId', 'departureTime', 'arrivalTime', 'price',
            'availableSeats', 'bookedSeats', 'remainingSeats', 'status',
        ]
        read_only_fields = ['status']

    def get_fields(self):
        fields = super().get_fields()
        fields['from'] = serializers.CharField(source='origin')
        fields['to'] = serializers.CharField(source='destination')
        return fields
