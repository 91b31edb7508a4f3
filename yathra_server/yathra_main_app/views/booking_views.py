"""Booking-related views using BookingService"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action

from ..permissions import IsDriver, IsAdminRole
from ..serializers import BookSeatsSerializer, BookingSerializer, BookingStatusSerializer
from ..services import BookingService


class BookingViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def create(self, request):
        """Book seats; the booking's userId must be the caller"""
        serializer = BookSeatsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = BookingService().book_seats(
            **serializer.to_service_kwargs(),
            authenticated_uid=request.user.username,
        )
        return Response({
            'bookingId': booking.id,
            'message': 'Seats booked successfully',
            'booking': BookingSerializer(booking).data,
        }, status=status.HTTP_201_CREATED)

    def list(self, request):
        bookings = BookingService().get_passenger_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    @action(detail=False, methods=['get'], url_path='driver', permission_classes=[IsDriver])
    def driver_bookings(self, request):
        bookings = BookingService().get_driver_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    @action(detail=True, methods=['patch'], url_path='status', permission_classes=[IsDriver | IsAdminRole])
    def update_status(self, request, pk=None):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = BookingService().update_booking_status(pk, serializer.validated_data['status'])
        return Response(BookingSerializer(booking).data)
