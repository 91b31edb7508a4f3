"""Tests for booking service"""
import threading
from decimal import Decimal
from unittest import mock

from django.contrib.auth.models import User
from django.db import OperationalError, connection
from django.test import TestCase, TransactionTestCase, override_settings
from ..models import Booking, Profile, SeatAvailability, HireRequest
from ..services.booking_service import BookingService, split_price
from ..utils.constants import BookingStatus, BusType, HireRequestStatus, SeatStatus, SeatType
from ..utils.exceptions import (
    BookingEngineError, BookingNotFoundError, BusNotFoundError, InsufficientSeatsError, OperatingDayError,
    SeatUnavailableError, TransientConflictError, TripNotFoundError, UserMismatchError, ValidationFailure,
)
from .helpers import MONDAY, TUESDAY, make_bus, make_trip, make_user


def seat(seat_id, number, price=850):
    return {'seatId': seat_id, 'seatNumber': number, 'price': price, 'type': 'regular'}


class SplitPriceTest(TestCase):
    def test_sums_to_total(self):
        prices = split_price(Decimal('100'), 3)
        self.assertEqual(prices, [Decimal('33.33'), Decimal('33.33'), Decimal('33.34')])
        self.assertEqual(sum(prices), Decimal('100'))

    def test_even_split(self):
        self.assertEqual(split_price(Decimal('120'), 4), [Decimal('30.00')] * 4)


class BookingServiceTest(TestCase):
    def setUp(self):
        self.service = BookingService()
        self.passenger = make_user('passenger-1')
        self.bus = make_bus(seats=10)

    def book(self, seats, **kwargs):
        params = {
            'user_id': 'passenger-1',
            'bus_id': self.bus.id,
            'seats': seats,
            'total_price': sum(s['price'] for s in seats),
            'travel_date': MONDAY,
        }
        params.update(kwargs)
        return self.service.book_seats(**params)

    def stored_seats(self):
        return SeatAvailability.objects.get(bus=self.bus, travel_date=MONDAY).seats

    def test_regular_booking(self):
        booking = self.book([seat('seat-1-1', '1A'), seat('seat-1-2', '1B')])

        self.assertEqual(booking.status, BookingStatus.CONFIRMED)
        self.assertEqual(booking.route, 'Colombo to Kandy')
        seats = self.stored_seats()
        self.assertEqual(set(seats), {'seat-1-1', 'seat-1-2'})
        self.assertEqual(seats['seat-1-1']['status'], SeatStatus.BOOKED)
        self.assertEqual(seats['seat-1-1']['bookedBy'], 'passenger-1')
        self.assertEqual(Profile.objects.get(user=self.passenger).booking_ids, [booking.id])

    def test_booked_seat_rejects_whole_request(self):
        self.book([seat('seat-1-1', '1A')])

        with self.assertRaises(SeatUnavailableError):
            self.book([seat('seat-1-2', '1B'), seat('seat-1-1', '1A')])

        self.assertEqual(Booking.objects.count(), 1)
        self.assertNotIn('seat-1-2', self.stored_seats())

    def test_conflict_detected_inside_transaction(self):
        self.book([seat('seat-1-1', '1A')])

        # A request that passed the pre-check just before the first booking committed
        with mock.patch.object(self.service.availability, 'find_booked', return_value=[]):
            with self.assertRaises(SeatUnavailableError):
                self.book([seat('seat-1-1', '1A')])

        self.assertEqual(Booking.objects.count(), 1)

    def test_disjoint_bookings_both_succeed(self):
        self.book([seat('seat-1-1', '1A')])
        self.book([seat('seat-1-2', '1B')], user_id='passenger-2')

        self.assertEqual(Booking.objects.count(), 2)
        self.assertEqual(set(self.stored_seats()), {'seat-1-1', 'seat-1-2'})

    def test_operating_day_restriction(self):
        self.bus.operating_days = ['monday', 'wednesday']
        self.bus.save()

        with self.assertRaises(OperatingDayError) as ctx:
            self.book([seat('seat-1-1', '1A')], travel_date=TUESDAY)
        self.assertIn('Monday, Wednesday', ctx.exception.message)

        self.book([seat('seat-1-1', '1A')], travel_date=MONDAY)

    def test_unknown_bus(self):
        with self.assertRaises(BusNotFoundError):
            self.book([seat('seat-1-1', '1A')], bus_id=9999)

    def test_user_mismatch(self):
        with self.assertRaises(UserMismatchError):
            self.book([seat('seat-1-1', '1A')], authenticated_uid='someone-else')
        self.assertFalse(Booking.objects.exists())

    def test_empty_seats_rejected(self):
        with self.assertRaises(ValidationFailure):
            self.book([], total_price=0)

    def test_duplicate_seats_rejected(self):
        with self.assertRaises(ValidationFailure):
            self.book([seat('seat-1-1', '1A'), seat('seat-1-1', '1A')])

    def test_profile_created_for_new_user(self):
        booking = self.book([seat('seat-1-1', '1A')], user_id='fresh-uid')

        profile = Profile.objects.get(user__username='fresh-uid')
        self.assertEqual(profile.role, 'passenger')
        self.assertEqual(profile.booking_ids, [booking.id])

    def test_private_hire_books_every_seat(self):
        bus = make_bus('NB-2002', seats=3)
        booking = self.service.book_seats(
            user_id='passenger-1', bus_id=bus.id, seats=[], total_price=100,
            travel_date=MONDAY, is_private_hire=True,
        )

        record = SeatAvailability.objects.get(bus=bus, travel_date=MONDAY)
        self.assertEqual(len(record.seats), 3)
        self.assertTrue(all(entry['type'] == SeatType.PRIVATE_HIRE for entry in record.seats.values()))
        self.assertAlmostEqual(sum(entry['price'] for entry in record.seats.values()), 100, places=2)
        self.assertTrue(record.is_private_hire)
        self.assertEqual(record.hired_by, self.passenger)
        self.assertEqual(booking.hire_type, 'full_bus')

    def test_private_hire_fails_when_seat_booked(self):
        self.book([seat('seat-1-1', '1A')])

        with mock.patch.object(self.service.availability, 'find_booked', return_value=[]):
            with self.assertRaises(SeatUnavailableError):
                self.book([], total_price=500, is_private_hire=True)
        self.assertEqual(Booking.objects.count(), 1)

    def test_regular_booking_rejected_on_hired_bus(self):
        self.book([], total_price=800, is_private_hire=True)

        with self.assertRaises(SeatUnavailableError):
            self.book([seat('seat-1-1', '1A')], user_id='passenger-2')

        # A request that passed the pre-check just before the hire committed
        with mock.patch.object(self.service.availability, 'find_booked', return_value=[]):
            with self.assertRaises(SeatUnavailableError):
                self.book([seat('seat-1-1', '1A')], user_id='passenger-2')

        self.assertEqual(Booking.objects.count(), 1)
        self.assertNotIn('seat-1-1', self.stored_seats())

    def test_private_hire_confirms_hire_request(self):
        hire_request = HireRequest.objects.create(
            passenger=self.passenger, bus=self.bus, pickup_location='Colombo',
            destination='Kandy', hire_date=MONDAY, final_price=5000,
        )

        booking = self.book([], total_price=5000, is_private_hire=True, hire_request_id=hire_request.id)

        hire_request.refresh_from_db()
        self.assertEqual(hire_request.status, HireRequestStatus.CONFIRMED)
        self.assertIsNotNone(hire_request.confirmed_at)
        self.assertEqual(booking.hire_request, hire_request)

    def test_trip_booking_increments_counter(self):
        bus = make_bus('NB-3003', bus_type=BusType.TRIP_AVAILABLE)
        trip = make_trip(bus, available_seats=3)

        booking = self.service.book_seats(
            user_id='passenger-1', bus_id=bus.id, seats=[seat('t1', '1'), seat('t2', '2')],
            total_price=2400, travel_date=MONDAY, trip_id=trip.id, is_trip_booking=True,
        )

        trip.refresh_from_db()
        self.assertEqual(trip.booked_seats, 2)
        self.assertTrue(booking.is_trip_booking)
        self.assertEqual(booking.trip, trip)

    def test_trip_booking_never_exceeds_capacity(self):
        bus = make_bus('NB-3003', bus_type=BusType.TRIP_AVAILABLE)
        trip = make_trip(bus, available_seats=3, booked_seats=2)

        with self.assertRaises(InsufficientSeatsError):
            self.service.book_seats(
                user_id='passenger-1', bus_id=bus.id, seats=[seat('t1', '1'), seat('t2', '2')],
                total_price=2400, travel_date=MONDAY, trip_id=trip.id, is_trip_booking=True,
            )

        trip.refresh_from_db()
        self.assertEqual(trip.booked_seats, 2)
        self.assertFalse(Booking.objects.exists())

    def test_trip_booking_requires_trip(self):
        with self.assertRaises(ValidationFailure):
            self.book([seat('t1', '1')], is_trip_booking=True)
        with self.assertRaises(TripNotFoundError):
            self.book([seat('t1', '1')], is_trip_booking=True, trip_id=9999)

    def test_conflict_retries_exhausted(self):
        with mock.patch.object(BookingService, '_book_in_transaction',
                               side_effect=OperationalError('database is locked')) as book:
            with self.assertRaises(TransientConflictError):
                self.book([seat('seat-1-1', '1A')])

        self.assertEqual(book.call_count, 5)
        self.assertFalse(Booking.objects.exists())

    def test_update_booking_status(self):
        booking = self.book([seat('seat-1-1', '1A')])

        cancelled = self.service.update_booking_status(booking.id, BookingStatus.CANCELLED)

        self.assertEqual(cancelled.status, BookingStatus.CANCELLED)
        self.assertIsNotNone(cancelled.cancelled_at)
        self.assertEqual(self.stored_seats()['seat-1-1']['status'], SeatStatus.BOOKED)

    def test_update_missing_booking(self):
        with self.assertRaises(BookingNotFoundError):
            self.service.update_booking_status(9999, BookingStatus.CANCELLED)

    def test_booking_listings(self):
        first = self.book([seat('seat-1-1', '1A')])
        second = self.book([seat('seat-1-2', '1B')])
        Booking.objects.filter(id=first.id).update(booked_at=second.booked_at.replace(year=2025))

        self.assertEqual([b.id for b in self.service.get_passenger_bookings(self.passenger)], [second.id, first.id])
        self.assertEqual([b.id for b in self.service.get_driver_bookings(self.bus.driver)], [second.id, first.id])
        self.assertEqual(self.service.get_driver_bookings(User.objects.create_user('no-bus')), [])


@override_settings(BOOKING_TRANSACTION_MAX_ATTEMPTS=20)
class ConcurrentBookingTest(TransactionTestCase):
    """Bookings racing in separate threads, each on its own connection"""

    def setUp(self):
        self.bus = make_bus(seats=10)
        make_user('passenger-1')
        make_user('passenger-2')

    def race(self, *requests):
        barrier = threading.Barrier(len(requests))
        outcomes = [None] * len(requests)

        def run(index, user_id, seats):
            try:
                barrier.wait()
                BookingService().book_seats(
                    user_id=user_id, bus_id=self.bus.id, seats=seats,
                    total_price=sum(s['price'] for s in seats), travel_date=MONDAY,
                )
                outcomes[index] = 'ok'
            except BookingEngineError as e:
                outcomes[index] = e.__class__.__name__
            finally:
                connection.close()

        threads = [threading.Thread(target=run, args=(index, *request)) for index, request in enumerate(requests)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return outcomes

    def test_overlapping_requests_exactly_one_succeeds(self):
        outcomes = self.race(
            ('passenger-1', [seat('seat-2-1', '2A')]),
            ('passenger-2', [seat('seat-2-1', '2A')]),
        )

        self.assertEqual(sorted(outcomes), ['SeatUnavailableError', 'ok'])
        winner = ['passenger-1', 'passenger-2'][outcomes.index('ok')]
        self.assertEqual(Booking.objects.get().user.username, winner)
        seats = SeatAvailability.objects.get(bus=self.bus, travel_date=MONDAY).seats
        self.assertEqual(seats['seat-2-1']['bookedBy'], winner)

    def test_disjoint_requests_both_succeed(self):
        outcomes = self.race(
            ('passenger-1', [seat('seat-2-1', '2A')]),
            ('passenger-2', [seat('seat-2-2', '2B')]),
        )

        self.assertEqual(outcomes, ['ok', 'ok'])
        self.assertEqual(Booking.objects.count(), 2)
        seats = SeatAvailability.objects.get(bus=self.bus, travel_date=MONDAY).seats
        self.assertEqual(set(seats), {'seat-2-1', 'seat-2-2'})

    def test_first_bookings_of_new_user_share_one_profile(self):
        outcomes = self.race(
            ('fresh-uid', [seat('seat-3-1', '3A')]),
            ('fresh-uid', [seat('seat-3-2', '3B')]),
        )

        self.assertEqual(outcomes, ['ok', 'ok'])
        profile = Profile.objects.get(user__username='fresh-uid')
        self.assertEqual(sorted(profile.booking_ids), sorted(Booking.objects.values_list('id', flat=True)))
