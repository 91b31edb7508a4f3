"""Hire service - private full-bus hire negotiation between passenger and driver"""
import logging

from django.db import transaction
from django.utils import timezone

from ..models import Bus, HireRequest
from ..utils.constants import HireRequestStatus, UserRole
from ..utils.date_utils import parse_date
from ..utils.exceptions import BusNotFoundError, HireRequestNotFoundError, ValidationFailure
from ..utils.ordered_query import query_ordered

logger = logging.getLogger(__name__)

# Status -> timestamp field stamped when entering it
STATUS_TIMESTAMPS = {
    HireRequestStatus.PRICE_QUOTED: 'responded_at',
    HireRequestStatus.PRICE_ACCEPTED: 'accepted_at',
    HireRequestStatus.CONFIRMED: 'confirmed_at',
    HireRequestStatus.COMPLETED: 'completed_at',
}


class HireService:
    """Service for private hire requests"""

    def create_hire_request(self, passenger, bus_id, pickup_location, destination, hire_date,
                            passenger_count=1, message=''):
        bus = Bus.objects.filter(id=bus_id).first()
        if not bus:
            raise BusNotFoundError()

        hire_request = HireRequest.objects.create(
            passenger=passenger,
            bus=bus,
            pickup_location=pickup_location,
            destination=destination,
            hire_date=parse_date(hire_date),
            passenger_count=passenger_count,
            message=message or '',
        )

        logger.info(f'[HIRE] Hire request created: {hire_request.id}')
        return hire_request

    def get_hire_requests(self, user, role):
        """Passengers see their own requests, drivers the requests for their bus"""
        if role == UserRole.PASSENGER:
            return query_ordered(HireRequest, {'passenger': user}, 'created_at', descending=True)

        bus = Bus.objects.filter(driver=user).first()
        if not bus:
            return []
        return query_ordered(HireRequest, {'bus': bus}, 'created_at', descending=True)

    def get_hire_request(self, request_id):
        hire_request = HireRequest.objects.filter(id=request_id).first()
        if not hire_request:
            raise HireRequestNotFoundError()
        return hire_request

    @transaction.atomic
    def update_hire_request_status(self, request_id, status, final_price=None, driver_notes=None):
        """
        Move a hire request to status.

        Transition order is not enforced. final_price and driver_notes are
        recorded whenever given, whatever the target status.
        """
        if status not in HireRequestStatus.UPDATABLE:
            raise ValidationFailure(f'Invalid hire request status "{status}"')

        hire_request = HireRequest.objects.select_for_update().filter(id=request_id).first()
        if not hire_request:
            raise HireRequestNotFoundError()

        hire_request.status = status
        if driver_notes:
            hire_request.driver_notes = driver_notes
        if final_price is not None:
            hire_request.final_price = final_price

        timestamp_field = STATUS_TIMESTAMPS.get(status)
        if timestamp_field:
            setattr(hire_request, timestamp_field, timezone.now())
        hire_request.save()

        logger.info(f'[HIRE] Hire request {request_id} status updated to: {status}')
        return hire_request
