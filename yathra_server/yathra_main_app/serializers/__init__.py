"""Serializers package - imports from domain-specific modules"""

# Booking serializers
from .booking_serializers import (
    SeatSelectionSerializer,
    BookSeatsSerializer,
    BookingStatusSerializer,
    BookingSerializer,
)

# Fleet serializers
from .fleet_serializers import (
    BusSerializer,
    BusReviewSerializer,
    BusPricingSerializer,
    TripSerializer,
)

# Schedule serializers
from .schedule_serializers import (
    RoutineSerializer,
    RoutineUpdateSerializer,
    RoutineStatusSerializer,
    DailyStatusSerializer,
)

# Hire serializers
from .hire_serializers import (
    HireRequestSerializer,
    HireStatusSerializer,
)

# Route serializers
from .route_serializers import (
    RouteRequestSerializer,
    RouteReviewSerializer,
)
