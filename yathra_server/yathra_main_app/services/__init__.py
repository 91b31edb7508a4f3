"""Services package - business logic layer"""

from .availability_repository import AvailabilityRepository
from .booking_service import BookingService
from .schedule_service import ScheduleService
from .hire_service import HireService
from .search_service import SearchService
from .fleet_service import FleetService
from .route_service import RouteService

__all__ = [
    'AvailabilityRepository',
    'BookingService',
    'ScheduleService',
    'HireService',
    'SearchService',
    'FleetService',
    'RouteService',
]
