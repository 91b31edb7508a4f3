"""Private hire serializers"""
from rest_framework import serializers

from ..models import HireRequest
from ..utils.constants import HireRequestStatus


class HireRequestSerializer(serializers.ModelSerializer):
    passengerId = serializers.CharField(source='passenger.username', read_only=True)
    busId = serializers.IntegerField(source='bus_id')
    pickupLocation = serializers.CharField(source='pickup_location')
    hireDate = serializers.DateField(source='hire_date')
    passengerCount = serializers.IntegerField(source='passenger_count', min_value=1, required=False, default=1)
    message = serializers.CharField(required=False, allow_blank=True, default='')
    finalPrice = serializers.DecimalField(source='final_price', max_digits=10, decimal_places=2, read_only=True)
    driverNotes = serializers.CharField(source='driver_notes', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    respondedAt = serializers.DateTimeField(source='responded_at', read_only=True)
    acceptedAt = serializers.DateTimeField(source='accepted_at', read_only=True)
    confirmedAt = serializers.DateTimeField(source='confirmed_at', read_only=True)
    completedAt = serializers.DateTimeField(source='completed_at', read_only=True)

    class Meta:
        model = HireRequest
        fields = [
            'id', 'passengerId', 'busId', 'pickupLocation', 'destination', 'hireDate', 'passengerCount',
            'message', 'status', 'finalPrice', 'driverNotes', 'createdAt', 'respondedAt', 'acceptedAt',
            'confirmedAt', 'completedAt',
        ]
        read_only_fields = ['status']


class HireStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=HireRequestStatus.UPDATABLE)
    finalPrice = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True)
    driverNotes = serializers.CharField(required=False, allow_blank=True)
