"""Models package - domain-based organization"""

# User models
from .user import Profile

# Fleet models
from .fleet import Bus

# Trip and seat map models
from .trip import Trip, SeatAvailability

# Booking models
from .booking import Booking

# Schedule models
from .schedule import Routine, DailySchedule

# Hire models
from .hire import HireRequest

# Route models
from .route import Route, RouteRequest

__all__ = [
    'Profile', 'Bus', 'Trip', 'SeatAvailability', 'Booking',
    'Routine', 'DailySchedule', 'HireRequest', 'Route', 'RouteRequest',
]
