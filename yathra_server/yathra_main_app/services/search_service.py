"""Search service - read-only passenger queries over buses, trips and routines"""
import logging

from django.conf import settings

from ..models import Bus, Trip, Routine, DailySchedule, SeatAvailability, Profile
from ..utils.constants import BusinessRules, BusStatus, BusType, RoutineAvailability, RoutineStatus, SeatStatus, TripStatus
from ..utils.date_utils import parse_date, weekday_name
from ..utils.route_utils import route_matches, routes_overlap

logger = logging.getLogger(__name__)


def _driver_profile(user):
    return Profile.objects.filter(user=user).first()


def bus_document(bus):
    profile = _driver_profile(bus.driver)
    return {
        'id': bus.id,
        'busName': bus.bus_name,
        'busNumber': bus.bus_number,
        'route': bus.route,
        'numberOfSeats': bus.number_of_seats,
        'busType': bus.bus_type,
        'operatingDays': bus.operating_days,
        'driverName': profile.display_name if profile else '',
        'driverEmail': profile.email if profile else '',
        'availableForTrips': bus.available_for_trips,
    }


def trip_document(trip):
    return {
        'id': trip.id,
        'busId': trip.bus_id,
        'from': trip.origin,
        'to': trip.destination,
        'departureTime': trip.departure_time,
        'arrivalTime': trip.arrival_time,
        'price': trip.price,
        'availableSeats': trip.available_seats,
        'bookedSeats': trip.booked_seats,
        'remainingSeats': trip.remaining_seats,
        'status': trip.status,
    }


class SearchService:
    """Service for passenger search queries"""

    def search_buses(self, from_city=None, to_city=None, date=None):
        """
        Approved buses whose route matches the origin/destination filters.

        Trip buses are listed only when they have open trips (on date, when
        given). Regular-route buses carry fixed display placeholders for
        times and price; their seat count is the number not yet booked on
        date.
        """
        date = parse_date(date) if date else None
        results = []

        for bus in Bus.objects.filter(status=BusStatus.APPROVED).select_related('driver').order_by('id'):
            if not bus.route or not route_matches(bus.route, from_city, to_city):
                continue

            bus_data = bus_document(bus)
            if bus.bus_type == BusType.TRIP_AVAILABLE:
                trips = self._open_trips(bus, date)
                if trips:
                    results.append({
                        **bus_data,
                        'isTripBooking': True,
                        'availableTrips': [trip_document(trip) for trip in trips],
                    })
            else:
                results.append({
                    **bus_data,
                    'isTripBooking': False,
                    'departureTime': BusinessRules.PLACEHOLDER_DEPARTURE_TIME,
                    'arrivalTime': BusinessRules.PLACEHOLDER_ARRIVAL_TIME,
                    'duration': BusinessRules.PLACEHOLDER_DURATION,
                    'price': getattr(settings, 'BASE_SEAT_PRICE', BusinessRules.BASE_SEAT_PRICE),
                    'availableSeats': self._unbooked_seat_count(bus, date),
                })

        logger.info(f'[SEARCH] {len(results)} bus(es) for from={from_city!r} to={to_city!r} date={date}')
        return results

    def search_buses_with_schedules(self, route, date):
        """
        Approved routines overlapping route that run on date's weekday,
        excluding those marked unavailable for that date, by start time.
        """
        date = parse_date(date)
        day = weekday_name(date)

        routines = [
            routine
            for routine in Routine.objects.filter(status=RoutineStatus.APPROVED).select_related('bus', 'driver')
            if routes_overlap(routine.route, route) and routine.runs_on(day)
        ]
        overrides = dict(
            DailySchedule.objects.filter(routine__in=routines, date=date).values_list('routine_id', 'availability')
        )

        results = []
        for routine in routines:
            availability = overrides.get(routine.id, RoutineAvailability.AVAILABLE)
            if availability == RoutineAvailability.UNAVAILABLE:
                continue

            profile = _driver_profile(routine.driver)
            results.append({
                'id': routine.id,
                'routineName': routine.routine_name,
                'route': routine.route,
                'timeSlot': routine.time_slot,
                'pricePerPerson': routine.price_per_person,
                'bookingCommission': routine.booking_commission,
                'daysOfWeek': routine.days_of_week,
                'dailyAvailability': availability,
                'busDetails': bus_document(routine.bus),
                'driverName': profile.display_name if profile and profile.display_name else 'Unknown Driver',
                'driverEmail': profile.email if profile else '',
            })

        logger.info(f'[SEARCH] {len(results)} routine(s) for route={route!r} on {date}')
        return sorted(results, key=lambda entry: entry['timeSlot']['startTime'])

    def _open_trips(self, bus, date):
        trips = Trip.objects.filter(bus=bus, status=TripStatus.ACTIVE).order_by('departure_time')
        if date:
            trips = trips.filter(departure_time__date=date)
        return [trip for trip in trips if trip.remaining_seats > 0]

    def _unbooked_seat_count(self, bus, date):
        if not date:
            return bus.number_of_seats
        record = SeatAvailability.objects.filter(bus=bus, travel_date=date).first()
        if not record or not isinstance(record.seats, dict):
            return bus.number_of_seats
        booked = sum(1 for entry in record.seats.values()
                     if isinstance(entry, dict) and entry.get('status') == SeatStatus.BOOKED)
        return max(bus.number_of_seats - booked, 0)
