"""Views package - HTTP request handlers"""

from .auth_views import FirebaseLoginView
from .booking_views import BookingViewSet
from .bus_views import BusViewSet
from .schedule_views import RoutineViewSet
from .hire_views import HireRequestViewSet
from .route_views import RouteRequestViewSet, RouteViewSet

__all__ = [
    'FirebaseLoginView', 'BookingViewSet', 'BusViewSet', 'RoutineViewSet',
    'HireRequestViewSet', 'RouteRequestViewSet', 'RouteViewSet',
]
