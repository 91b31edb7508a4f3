"""Booking-related serializers"""
from rest_framework import serializers

from ..models import Booking
from ..utils.constants import BookingStatus


class SeatSelectionSerializer(serializers.Serializer):
    seatId = serializers.CharField()
    seatNumber = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)
    type = serializers.CharField(required=False, allow_blank=True)


class BookSeatsSerializer(serializers.Serializer):
    userId = serializers.CharField()
    busId = serializers.IntegerField()
    seats = SeatSelectionSerializer(many=True, required=False, default=list)
    totalPrice = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    travelDate = serializers.DateField()
    route = serializers.CharField(required=False, allow_blank=True, default='')
    tripId = serializers.IntegerField(required=False, allow_null=True)
    isTripBooking = serializers.BooleanField(required=False, default=False)
    isPrivateHire = serializers.BooleanField(required=False, default=False)
    hireRequestId = serializers.IntegerField(required=False, allow_null=True)

    def to_service_kwargs(self):
        data = self.validated_data
        return {
            'user_id': data['userId'],
            'bus_id': data['busId'],
            'seats': [dict(seat) for seat in data['seats']],
            'total_price': data['totalPrice'],
            'travel_date': data['travelDate'],
            'route': data['route'],
            'trip_id': data.get('tripId'),
            'is_trip_booking': data['isTripBooking'],
            'is_private_hire': data['isPrivateHire'],
            'hire_request_id': data.get('hireRequestId'),
        }


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BookingStatus.CHOICES)


class BookingSerializer(serializers.ModelSerializer):
    userId = serializers.CharField(source='user.username', read_only=True)
    busId = serializers.IntegerField(source='bus_id', read_only=True)
    tripId = serializers.IntegerField(source='trip_id', read_only=True)
    hireRequestId = serializers.IntegerField(source='hire_request_id', read_only=True)
    totalPrice = serializers.DecimalField(source='total_price', max_digits=10, decimal_places=2, read_only=True)
    travelDate = serializers.DateField(source='travel_date', read_only=True)
    paymentStatus = serializers.CharField(source='payment_status', read_only=True)
    isTripBooking = serializers.BooleanField(source='is_trip_booking', read_only=True)
    isPrivateHire = serializers.BooleanField(source='is_private_hire', read_only=True)
    hireType = serializers.CharField(source='hire_type', read_only=True)
    bookedAt = serializers.DateTimeField(source='booked_at', read_only=True)
    confirmedAt = serializers.DateTimeField(source='confirmed_at', read_only=True)
    cancelledAt = serializers.DateTimeField(source='cancelled_at', read_only=True)

    class Meta:
        model = Booking
        fields = [
            'id', 'userId', 'busId', 'tripId', 'hireRequestId', 'seats', 'totalPrice', 'travelDate',
            'route', 'status', 'paymentStatus', 'isTripBooking', 'isPrivateHire', 'hireType',
            'bookedAt', 'confirmedAt', 'cancelledAt',
        ]
        read_only_fields = fields
