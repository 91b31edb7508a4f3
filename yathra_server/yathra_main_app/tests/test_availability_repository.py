"""Tests for the seat availability repository"""

from django.contrib.auth.models import User
from django.db import transaction
from django.test import TestCase
from ..models import SeatAvailability
from ..services.availability_repository import AvailabilityRepository
from ..utils.constants import SeatStatus
from ..utils.exceptions import BusNotFoundError, MalformedDocumentError, SeatUnavailableError
from .helpers import MONDAY, make_bus


def booked(number):
    return {'seatNumber': number, 'status': SeatStatus.BOOKED, 'bookedBy': 'p1', 'price': 850, 'type': 'regular'}


class AvailabilityRepositoryTest(TestCase):
    def setUp(self):
        self.repository = AvailabilityRepository()
        self.bus = make_bus(seats=10)

    def test_default_layout_when_nothing_stored(self):
        document = self.repository.get_availability(self.bus.id, MONDAY)

        self.assertEqual(len(document['seats']), 10)
        self.assertFalse(document['isPrivateHire'])
        self.assertEqual(document['travelDate'], '2026-06-01')
        self.assertFalse(SeatAvailability.objects.exists())

    def test_default_layout_unknown_bus(self):
        with self.assertRaises(BusNotFoundError):
            self.repository.get_availability(9999, MONDAY)

    def test_reserve_merges_without_touching_other_seats(self):
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat-1-1': booked('1A')})

        with transaction.atomic():
            self.repository.reserve(self.bus.id, MONDAY, {'seat-1-2': booked('1B')})

        seats = SeatAvailability.objects.get(bus=self.bus, travel_date=MONDAY).seats
        self.assertEqual(set(seats), {'seat-1-1', 'seat-1-2'})

    def test_reserve_rejects_booked_seat(self):
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat-1-1': booked('1A')})

        with self.assertRaises(SeatUnavailableError):
            with transaction.atomic():
                self.repository.reserve(self.bus.id, MONDAY, {'seat-1-1': booked('1A')})

    def test_reserve_outside_transaction(self):
        with self.assertRaises(RuntimeError):
            self.repository.reserve(self.bus.id, MONDAY, {'seat-1-1': booked('1A')})

    def test_reserve_all_marks_private_hire(self):
        hirer = User.objects.create_user('hirer')
        with transaction.atomic():
            self.repository.reserve_all(self.bus.id, MONDAY, {'seat_1': booked('1')}, hired_by=hirer)

        document = self.repository.get_availability(self.bus.id, MONDAY)
        self.assertTrue(document['isPrivateHire'])
        self.assertEqual(document['hiredBy'], 'hirer')

    def test_hired_bus_takes_no_seat_bookings(self):
        hirer = User.objects.create_user('hirer')
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat_1': booked('1')},
                                        is_private_hire=True, hired_by=hirer)

        found = self.repository.find_booked(self.bus.id, MONDAY, ['seat-1-1'])
        self.assertEqual([seat['seatId'] for seat in found], ['seat-1-1'])
        with self.assertRaises(SeatUnavailableError):
            with transaction.atomic():
                self.repository.reserve(self.bus.id, MONDAY, {'seat-1-1': booked('1A')})

    def test_find_booked(self):
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat-1-1': booked('1A')})
        found = self.repository.find_booked(self.bus.id, MONDAY, ['seat-1-1', 'seat-1-2'])
        self.assertEqual([seat['seatId'] for seat in found], ['seat-1-1'])

    def test_malformed_record(self):
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat-1-1': 'booked'})
        with self.assertRaises(MalformedDocumentError):
            self.repository.get_availability(self.bus.id, MONDAY)

    def test_clear(self):
        SeatAvailability.objects.create(bus=self.bus, travel_date=MONDAY, seats={'seat-1-1': booked('1A')})

        self.assertTrue(self.repository.clear(self.bus.id, MONDAY))
        self.assertFalse(self.repository.clear(self.bus.id, MONDAY))
        self.assertEqual(len(self.repository.get_availability(self.bus.id, MONDAY)['seats']), 10)
