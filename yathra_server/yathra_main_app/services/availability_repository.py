"""Seat availability repository - owns the per (bus, date) seat map"""
import logging

from django.conf import settings
from django.db import connection

from ..models import Bus, SeatAvailability
from ..utils.constants import BusinessRules, SeatStatus
from ..utils.date_utils import parse_date
from ..utils.exceptions import BusNotFoundError, MalformedDocumentError, SeatUnavailableError
from ..utils.seat_layout import generate_default_seats

logger = logging.getLogger(__name__)

REQUIRED_SEAT_KEYS = ('seatNumber', 'status')


class AvailabilityRepository:
    """Reads and writes SeatAvailability records"""

    def get_availability(self, bus_id, travel_date):
        """
        Seat map for a bus on a date.

        Returns the stored record, or a default layout sized to the bus
        when nothing has been booked yet. The default is never stored.
        """
        travel_date = parse_date(travel_date)
        record = SeatAvailability.objects.filter(bus_id=bus_id, travel_date=travel_date).first()
        if record:
            return self.to_document(record)

        bus = Bus.objects.filter(id=bus_id).first()
        if not bus:
            raise BusNotFoundError()

        return {
            'busId': bus.id,
            'travelDate': travel_date.isoformat(),
            'route': bus.route,
            'seats': generate_default_seats(
                capacity=bus.number_of_seats or getattr(settings, 'DEFAULT_SEAT_CAPACITY', BusinessRules.DEFAULT_SEAT_CAPACITY),
                base_price=getattr(settings, 'BASE_SEAT_PRICE', BusinessRules.BASE_SEAT_PRICE),
                premium_multiplier=getattr(settings, 'PREMIUM_SEAT_MULTIPLIER', BusinessRules.PREMIUM_SEAT_MULTIPLIER),
            ),
            'isPrivateHire': False,
            'hiredBy': None,
            'lastUpdated': None,
        }

    def find_booked(self, bus_id, travel_date, seat_ids):
        """
        Stored entries among seat_ids that are already booked.

        Unlocked read, only used to fail fast before a transaction starts.
        Every seat of a privately hired bus counts as booked.
        """
        record = SeatAvailability.objects.filter(bus_id=bus_id, travel_date=parse_date(travel_date)).first()
        if not record:
            return []
        seats = self._validated_seats(record)
        if record.is_private_hire:
            return [
                {'seatId': seat_id, 'seatNumber': seats.get(seat_id, {}).get('seatNumber', seat_id), 'status': SeatStatus.BOOKED}
                for seat_id in seat_ids
            ]
        return [
            {'seatId': seat_id, **seats[seat_id]}
            for seat_id in seat_ids
            if seats.get(seat_id, {}).get('status') == SeatStatus.BOOKED
        ]

    def reserve(self, bus_id, travel_date, seat_updates, route=''):
        """
        Merge booked seat entries into the seat map.

        Must run inside a transaction. Locks the record, then requires every
        updated seat to still be unbooked; seats not in seat_updates are left
        untouched.

        Raises:
            SeatUnavailableError: if any seat was booked in the meantime,
                or the bus is privately hired for the date
        """
        record = self._lock(bus_id, travel_date, route)
        if record.is_private_hire:
            raise SeatUnavailableError(
                f'Bus is privately hired on {record.travel_date.isoformat()}'
            )
        seats = self._validated_seats(record)

        for seat_id, entry in seat_updates.items():
            if seats.get(seat_id, {}).get('status') == SeatStatus.BOOKED:
                raise SeatUnavailableError(f"Seat {entry.get('seatNumber', seat_id)} is no longer available")

        seats.update(seat_updates)
        record.seats = seats
        if route:
            record.route = route
        record.save()
        logger.info(f'[AVAILABILITY] {record.doc_key}: booked {len(seat_updates)} seat(s)')
        return record

    def reserve_all(self, bus_id, travel_date, seat_entries, hired_by, route=''):
        """
        Replace the seat map with seat_entries for a private hire.

        Must run inside a transaction. Fails if any seat is already booked.
        """
        record = self._lock(bus_id, travel_date, route)
        booked = [entry for entry in self._validated_seats(record).values() if entry.get('status') == SeatStatus.BOOKED]
        if booked:
            raise SeatUnavailableError(
                f'Bus already has {len(booked)} booked seat(s) on {record.travel_date.isoformat()}'
            )

        record.seats = seat_entries
        record.is_private_hire = True
        record.hired_by = hired_by
        if route:
            record.route = route
        record.save()
        logger.info(f'[AVAILABILITY] {record.doc_key}: private hire by {hired_by.username}, {len(seat_entries)} seats')
        return record

    def clear(self, bus_id, travel_date):
        """Delete the stored seat map; display falls back to the default layout"""
        travel_date = parse_date(travel_date)
        deleted, _ = SeatAvailability.objects.filter(bus_id=bus_id, travel_date=travel_date).delete()
        logger.info(f'[AVAILABILITY] Cleared seat map for bus {bus_id} on {travel_date} ({deleted} record(s))')
        return deleted > 0

    def to_document(self, record):
        return {
            'busId': record.bus_id,
            'travelDate': record.travel_date.isoformat(),
            'route': record.route,
            'seats': self._validated_seats(record),
            'isPrivateHire': record.is_private_hire,
            'hiredBy': record.hired_by.username if record.hired_by else None,
            'lastUpdated': record.last_updated,
        }

    def _lock(self, bus_id, travel_date, route):
        if not connection.in_atomic_block:
            raise RuntimeError('Seat reservations must run inside a transaction')

        record, created = SeatAvailability.objects.select_for_update().get_or_create(
            bus_id=bus_id,
            travel_date=parse_date(travel_date),
            defaults={'route': route},
        )
        if created:
            logger.info(f'[AVAILABILITY] Created seat map {record.doc_key}')
        return record

    def _validated_seats(self, record):
        seats = record.seats
        if not isinstance(seats, dict):
            raise MalformedDocumentError(f'Seat map {record.doc_key} is not a mapping')
        for seat_id, entry in seats.items():
            if not isinstance(entry, dict) or any(key not in entry for key in REQUIRED_SEAT_KEYS):
                raise MalformedDocumentError(f'Seat {seat_id} in {record.doc_key} is malformed')
        return dict(seats)
