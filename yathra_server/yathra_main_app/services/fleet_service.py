"""Fleet service - bus registration review, pricing and trips"""
import logging

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from django.utils import timezone

from ..models import Bus, Trip
from ..utils.constants import BusinessRules, BusStatus, BusType, TripStatus
from ..utils.date_utils import normalize_days, parse_date
from ..utils.exceptions import BusNotFoundError, DriverNotFoundError, ValidationFailure

logger = logging.getLogger(__name__)


class FleetService:
    """Service for bus registration, pricing and trip management"""

    def register_bus(self, driver, bus_name, bus_number, number_of_seats, bus_type=BusType.REGULAR_ROUTE,
                     route='', operating_days=None):
        """Submit a driver's bus for admin review"""
        if Bus.objects.filter(driver=driver).exists():
            raise ValidationFailure('Driver already has a registered bus')
        if bus_type not in dict(BusType.CHOICES):
            raise ValidationFailure(f'Invalid bus type "{bus_type}"')

        try:
            with transaction.atomic():
                bus = Bus.objects.create(
                    driver=driver,
                    bus_name=bus_name,
                    bus_number=bus_number,
                    number_of_seats=number_of_seats,
                    bus_type=bus_type,
                    available_for_trips=bus_type == BusType.TRIP_AVAILABLE,
                    route=route or '',
                    operating_days=normalize_days(operating_days or []),
                    status=BusStatus.PENDING,
                )
        except IntegrityError:
            raise ValidationFailure(f'Bus number {bus_number} is already registered')

        logger.info(f'[FLEET] Bus {bus.bus_number} submitted by driver {driver.username}')
        return bus

    def get_pending_registrations(self):
        return list(Bus.objects.filter(status=BusStatus.PENDING).select_related('driver').order_by('-submitted_at'))

    def get_approved_buses(self):
        return list(Bus.objects.filter(status=BusStatus.APPROVED).select_related('driver').order_by('-submitted_at'))

    @transaction.atomic
    def approve_registration(self, driver_uid):
        bus = self._driver_bus(driver_uid, lock=True)
        bus.status = BusStatus.APPROVED
        bus.approved_at = timezone.now()
        bus.save(update_fields=['status', 'approved_at'])

        logger.info(f'[FLEET] Bus registration approved for driver {driver_uid}')
        return bus

    @transaction.atomic
    def reject_registration(self, driver_uid, reason=None):
        bus = self._driver_bus(driver_uid, lock=True)
        bus.status = BusStatus.REJECTED
        bus.rejection_reason = reason or BusinessRules.DEFAULT_REJECTION_REASON
        bus.rejected_at = timezone.now()
        bus.save(update_fields=['status', 'rejection_reason', 'rejected_at'])

        logger.info(f'[FLEET] Bus registration rejected for driver {driver_uid}')
        return bus

    def get_bus_pricing(self, driver_uid):
        """Pricing of the driver's bus; zeros and no timestamp when never set"""
        bus = self._driver_bus(driver_uid)
        if bus.default_price_per_person is None:
            return {'defaultPricePerPerson': 0, 'bookingCommission': 0, 'updatedAt': None}
        return {
            'defaultPricePerPerson': bus.default_price_per_person,
            'bookingCommission': bus.booking_commission or 0,
            'updatedAt': bus.pricing_updated_at,
        }

    @transaction.atomic
    def update_bus_pricing(self, driver_uid, default_price_per_person, booking_commission=None):
        bus = self._driver_bus(driver_uid, lock=True)
        bus.default_price_per_person = default_price_per_person
        if booking_commission is not None:
            bus.booking_commission = booking_commission
        bus.pricing_updated_at = timezone.now()
        bus.save(update_fields=['default_price_per_person', 'booking_commission', 'pricing_updated_at'])

        logger.info(f'[FLEET] Bus pricing updated for driver {driver_uid}')
        return self.get_bus_pricing(driver_uid)

    def create_trip(self, bus_id, origin, destination, departure_time, arrival_time, price, available_seats):
        bus = Bus.objects.filter(id=bus_id).first()
        if not bus:
            raise BusNotFoundError()
        if bus.bus_type != BusType.TRIP_AVAILABLE:
            raise ValidationFailure('Bus is not available for trips')
        if arrival_time <= departure_time:
            raise ValidationFailure('Arrival time must be after departure time')

        trip = Trip.objects.create(
            bus=bus,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
            price=price,
            available_seats=available_seats,
            booked_seats=0,
            status=TripStatus.ACTIVE,
        )

        logger.info(f'[FLEET] Trip {trip.id} created for bus {bus_id}')
        return trip

    def get_bus_trips(self, bus_id, date=None):
        trips = Trip.objects.filter(bus_id=bus_id)
        if date:
            trips = trips.filter(departure_time__date=parse_date(date))
        return list(trips.order_by('departure_time'))

    def _driver_bus(self, driver_uid, lock=False):
        driver = User.objects.filter(username=driver_uid).first()
        if not driver:
            raise DriverNotFoundError()

        buses = Bus.objects.select_for_update() if lock else Bus.objects
        bus = buses.filter(driver=driver).first()
        if not bus:
            raise BusNotFoundError()
        return bus
