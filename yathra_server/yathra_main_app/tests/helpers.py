"""Shared fixtures for the test suite"""
from datetime import date, datetime

from django.contrib.auth.models import User
from django.utils import timezone

from ..models import Profile, Bus, Trip, Routine
from ..utils.constants import BusStatus, BusType, RoutineStatus, UserRole

MONDAY = date(2026, 6, 1)
TUESDAY = date(2026, 6, 2)


def make_user(uid, role=UserRole.PASSENGER, display_name=''):
    user = User.objects.create_user(uid, email=f'{uid}@example.com')
    Profile.objects.create(user=user, role=role, email=user.email, display_name=display_name)
    return user


def make_bus(number='NB-1001', driver=None, seats=54, bus_type=BusType.REGULAR_ROUTE,
             route='Colombo to Kandy', operating_days=None, status=BusStatus.APPROVED):
    driver = driver or make_user(f'driver-{number}', UserRole.DRIVER, display_name=f'Driver {number}')
    return Bus.objects.create(
        driver=driver,
        bus_name=f'Bus {number}',
        bus_number=number,
        number_of_seats=seats,
        bus_type=bus_type,
        available_for_trips=bus_type == BusType.TRIP_AVAILABLE,
        route=route,
        operating_days=operating_days or [],
        status=status,
    )


def make_trip(bus, available_seats=10, booked_seats=0, day=MONDAY, hour=8):
    return Trip.objects.create(
        bus=bus,
        origin='Colombo',
        destination='Kandy',
        departure_time=timezone.make_aware(datetime(day.year, day.month, day.day, hour, 0)),
        arrival_time=timezone.make_aware(datetime(day.year, day.month, day.day, hour + 3, 0)),
        price=1200,
        available_seats=available_seats,
        booked_seats=booked_seats,
    )


def make_routine(bus, route='Colombo to Kandy', start_time='08:00', end_time='11:00',
                 days=('monday',), status=RoutineStatus.APPROVED, name='Morning run'):
    return Routine.objects.create(
        driver=bus.driver,
        bus=bus,
        routine_name=name,
        route=route,
        start_time=start_time,
        end_time=end_time,
        price_per_person=900,
        days_of_week=list(days),
        status=status,
    )
