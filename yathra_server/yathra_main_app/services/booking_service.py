"""Booking service - seat allocation across regular, trip and private hire bookings"""
import logging
from decimal import Decimal, ROUND_DOWN, InvalidOperation

from django.contrib.auth.models import User
from django.db import transaction
from django.utils import timezone

from ..models import Bus, Trip, Booking, HireRequest, Profile
from ..utils.constants import (
    BookingStatus, BusinessRules, HireRequestStatus, PaymentStatus, SeatStatus, SeatType, UserRole,
)
from ..utils.date_utils import parse_date, weekday_name
from ..utils.exceptions import (
    BookingNotFoundError, BusNotFoundError, HireRequestNotFoundError, InsufficientSeatsError,
    OperatingDayError, SeatUnavailableError, TripNotFoundError, UserMismatchError, ValidationFailure,
)
from ..utils.ordered_query import query_ordered
from ..utils.transactions import run_in_transaction
from .availability_repository import AvailabilityRepository

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def split_price(total_price, count):
    """
    Split total_price into count per-seat prices rounded down to cents.

    The last seat absorbs the remainder so the prices always sum to the total.
    """
    total = Decimal(str(total_price))
    share = (total / count).quantize(CENT, rounding=ROUND_DOWN)
    return [share] * (count - 1) + [total - share * (count - 1)]


class BookingService:
    """Service for booking operations"""

    def __init__(self, availability=None):
        self.availability = availability or AvailabilityRepository()

    def book_seats(self, user_id, bus_id, seats, total_price, travel_date, route='',
                   trip_id=None, is_trip_booking=False, is_private_hire=False,
                   hire_request_id=None, authenticated_uid=None):
        """
        Book seats in one atomic transaction.

        Args:
            user_id: uid of the passenger the booking is for
            bus_id: Bus ID
            seats: list of {seatId, seatNumber, price, type}
            total_price: total price of the booking
            travel_date: date or 'YYYY-MM-DD'
            route: route label stored on the booking
            trip_id: Trip ID, required for trip bookings
            is_trip_booking: book against a trip's seat counter
            is_private_hire: book every seat of the bus
            hire_request_id: optional HireRequest confirmed by a private hire
            authenticated_uid: caller identity, must equal user_id when given

        Returns:
            Booking object

        Raises:
            NotFoundError: bus, trip or hire request missing
            ValidationFailure: user mismatch, operating day, seat taken, capacity
            TransientConflictError: concurrent writes kept aborting the transaction
        """
        logger.info(f'[BOOKING] Starting seat booking for user {user_id} on bus {bus_id}')

        if authenticated_uid is not None and authenticated_uid != user_id:
            raise UserMismatchError()

        travel_date = parse_date(travel_date)
        seats = self._normalize_seats(seats)
        total_price = self._to_decimal(total_price, 'totalPrice')

        if not seats and not is_private_hire:
            raise ValidationFailure('At least one seat must be selected')
        if is_trip_booking and not trip_id:
            raise ValidationFailure('tripId is required for trip bookings')

        bus = Bus.objects.filter(id=bus_id).first()
        if not bus:
            raise BusNotFoundError()

        day = weekday_name(travel_date)
        if not bus.operates_on(day):
            allowed = ', '.join(d.capitalize() for d in bus.operating_days)
            raise OperatingDayError(
                f'This bus only operates on: {allowed}. {travel_date.isoformat()} is a {day.capitalize()}.'
            )

        booked = run_in_transaction(
            self.availability.find_booked, bus.id, travel_date, [seat['seatId'] for seat in seats],
            label=f'seat check on bus {bus.id} for {travel_date}',
        )
        if booked:
            logger.info(f'[BOOKING] Seat already booked: {booked[0]["seatNumber"]}')
            raise SeatUnavailableError(f'Seat {booked[0]["seatNumber"]} is no longer available')

        booking = run_in_transaction(
            self._book_in_transaction,
            user_id=user_id,
            bus_id=bus.id,
            seats=seats,
            total_price=total_price,
            travel_date=travel_date,
            route=route or bus.route,
            trip_id=trip_id if is_trip_booking else None,
            is_private_hire=is_private_hire,
            hire_request_id=hire_request_id,
            label=f'booking on bus {bus.id} for {travel_date}',
        )

        logger.info(f'[BOOKING] Booking {booking.id} completed for user {user_id}')
        return booking

    def _book_in_transaction(self, user_id, bus_id, seats, total_price, travel_date, route,
                             trip_id, is_private_hire, hire_request_id):
        user, _ = User.objects.get_or_create(username=user_id)
        # Bookings made before profile completion get a minimal passenger profile
        profile, profile_created = Profile.objects.select_for_update().get_or_create(
            user=user, defaults={'role': UserRole.PASSENGER},
        )
        if profile_created:
            logger.info(f'[BOOKING] Created passenger profile for {user_id}')
        trip = None
        hire_request = None

        if is_private_hire:
            bus = Bus.objects.select_for_update().filter(id=bus_id).first()
            if not bus:
                raise BusNotFoundError()
            if hire_request_id:
                hire_request = HireRequest.objects.select_for_update().filter(id=hire_request_id, bus=bus).first()
                if not hire_request:
                    raise HireRequestNotFoundError()

            seat_entries = self._private_hire_seats(bus.number_of_seats, total_price, user_id)
            self.availability.reserve_all(bus.id, travel_date, seat_entries, hired_by=user, route=route)

            if hire_request:
                hire_request.status = HireRequestStatus.CONFIRMED
                hire_request.confirmed_at = timezone.now()
                hire_request.save(update_fields=['status', 'confirmed_at', 'updated_at'])
            logger.info(f'[BOOKING] Private hire of bus {bus_id} ({bus.number_of_seats} seats)')

        elif trip_id:
            trip = Trip.objects.select_for_update().filter(id=trip_id, bus_id=bus_id).first()
            if not trip:
                raise TripNotFoundError()

            requested = len(seats)
            if trip.remaining_seats < requested:
                raise InsufficientSeatsError(
                    f'Not enough seats available for this trip. Only {trip.remaining_seats} left'
                )
            trip.booked_seats += requested
            trip.save(update_fields=['booked_seats'])
            logger.info(f'[BOOKING] Trip {trip.id}: {trip.booked_seats}/{trip.available_seats} seats booked')

        else:
            booked_at = timezone.now().isoformat()
            seat_updates = {
                seat['seatId']: {
                    'seatNumber': seat['seatNumber'],
                    'status': SeatStatus.BOOKED,
                    'bookedBy': user_id,
                    'bookedAt': booked_at,
                    'price': seat['price'],
                    'type': seat['type'],
                }
                for seat in seats
            }
            self.availability.reserve(bus_id, travel_date, seat_updates, route=route)

        booking = Booking.objects.create(
            user=user,
            bus_id=bus_id,
            trip=trip,
            hire_request=hire_request,
            seats=seats,
            total_price=total_price,
            travel_date=travel_date,
            route=route,
            status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.PENDING,
            is_trip_booking=trip is not None,
            is_private_hire=is_private_hire,
            hire_type=BusinessRules.HIRE_TYPE_FULL_BUS if is_private_hire else '',
        )

        profile.booking_ids = [*profile.booking_ids, booking.id]
        profile.save(update_fields=['booking_ids', 'updated_at'])

        return booking

    def _private_hire_seats(self, capacity, total_price, user_id):
        if capacity < 1:
            raise ValidationFailure('Bus has no seats to hire')

        booked_at = timezone.now().isoformat()
        return {
            f'seat_{number}': {
                'seatNumber': str(number),
                'status': SeatStatus.BOOKED,
                'bookedBy': user_id,
                'bookedAt': booked_at,
                'price': float(price),
                'type': SeatType.PRIVATE_HIRE,
            }
            for number, price in enumerate(split_price(total_price, capacity), start=1)
        }

    def _normalize_seats(self, seats):
        normalized = []
        for seat in seats or []:
            seat_id = seat.get('seatId')
            if not seat_id:
                raise ValidationFailure('Every seat needs a seatId')
            normalized.append({
                'seatId': str(seat_id),
                'seatNumber': str(seat.get('seatNumber') or seat_id),
                'price': float(self._to_decimal(seat.get('price', 0), 'price')),
                'type': seat.get('type') or SeatType.REGULAR,
            })

        seat_ids = [seat['seatId'] for seat in normalized]
        if len(set(seat_ids)) != len(seat_ids):
            raise ValidationFailure('The same seat was selected more than once')
        return normalized

    def _to_decimal(self, value, field):
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationFailure(f'Invalid {field} "{value}"')
        if amount < 0:
            raise ValidationFailure(f'{field} cannot be negative')
        return amount

    @transaction.atomic
    def update_booking_status(self, booking_id, status):
        """Confirm or cancel a booking. Seats stay booked either way."""
        if status not in (BookingStatus.CONFIRMED, BookingStatus.CANCELLED):
            raise ValidationFailure(f'Invalid booking status "{status}"')

        booking = Booking.objects.select_for_update().filter(id=booking_id).first()
        if not booking:
            raise BookingNotFoundError()

        booking.status = status
        update_fields = ['status', 'updated_at']
        if status == BookingStatus.CONFIRMED:
            booking.confirmed_at = timezone.now()
            update_fields.append('confirmed_at')
        else:
            booking.cancelled_at = timezone.now()
            update_fields.append('cancelled_at')
        booking.save(update_fields=update_fields)

        logger.info(f'[BOOKING] Booking {booking_id} status updated to: {status}')
        return booking

    def get_passenger_bookings(self, user):
        return query_ordered(Booking, {'user': user}, 'booked_at', descending=True)

    def get_driver_bookings(self, driver):
        """Bookings on the driver's bus, newest first"""
        bus = Bus.objects.filter(driver=driver).first()
        if not bus:
            return []
        return query_ordered(Booking, {'bus': bus}, 'booked_at', descending=True)
