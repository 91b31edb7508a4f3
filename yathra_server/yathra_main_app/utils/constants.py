"""Centralized constants and business rules"""

class UserRole:
    PASSENGER = 'passenger'
    DRIVER = 'driver'
    ADMIN = 'admin'

    CHOICES = [
        (PASSENGER, 'Passenger'),
        (DRIVER, 'Driver'),
        (ADMIN, 'Admin'),
    ]

class BusType:
    REGULAR_ROUTE = 'regular_route'
    TRIP_AVAILABLE = 'trip_available'

    CHOICES = [
        (REGULAR_ROUTE, 'Regular Route'),
        (TRIP_AVAILABLE, 'Trip Available'),
    ]

class BusStatus:
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    CHOICES = [
        (PENDING, 'Pending Review'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]

class SeatStatus:
    AVAILABLE = 'available'
    BOOKED = 'booked'

class SeatType:
    REGULAR = 'regular'
    PREMIUM = 'premium'
    WHEELCHAIR = 'wheelchair'
    PRIVATE_HIRE = 'private_hire'

class TripStatus:
    ACTIVE = 'active'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    CHOICES = [
        (ACTIVE, 'Active'),
        (COMPLETED, 'Completed'),
        (CANCELLED, 'Cancelled'),
    ]

class BookingStatus:
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'

    CHOICES = [
        (CONFIRMED, 'Confirmed'),
        (CANCELLED, 'Cancelled'),
    ]

class PaymentStatus:
    PENDING = 'pending'
    PAID = 'paid'

    CHOICES = [
        (PENDING, 'Pending'),
        (PAID, 'Paid'),
    ]

class RoutineStatus:
    PENDING_APPROVAL = 'pending_approval'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    CHOICES = [
        (PENDING_APPROVAL, 'Pending Approval'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]

class RoutineAvailability:
    AVAILABLE = 'available'
    STARTED = 'started'
    COMPLETED = 'completed'
    UNAVAILABLE = 'unavailable'

    CHOICES = [
        (AVAILABLE, 'Available'),
        (STARTED, 'Started'),
        (COMPLETED, 'Completed'),
        (UNAVAILABLE, 'Unavailable'),
    ]

class HireRequestStatus:
    PENDING = 'pending'
    PRICE_QUOTED = 'price_quoted'
    PRICE_ACCEPTED = 'price_accepted'
    CONFIRMED = 'confirmed'
    REJECTED = 'rejected'
    COMPLETED = 'completed'

    CHOICES = [
        (PENDING, 'Pending'),
        (PRICE_QUOTED, 'Price Quoted'),
        (PRICE_ACCEPTED, 'Price Accepted'),
        (CONFIRMED, 'Confirmed'),
        (REJECTED, 'Rejected'),
        (COMPLETED, 'Completed'),
    ]

    UPDATABLE = [PRICE_QUOTED, PRICE_ACCEPTED, CONFIRMED, REJECTED, COMPLETED]
    # Who may move a request into each status
    DRIVER_UPDATABLE = [PRICE_QUOTED, CONFIRMED, REJECTED, COMPLETED]
    PASSENGER_UPDATABLE = [PRICE_ACCEPTED, REJECTED]

class RouteRequestStatus:
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    CHOICES = [
        (PENDING, 'Pending Review'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]

class DayOfWeek:
    MONDAY = 'monday'
    TUESDAY = 'tuesday'
    WEDNESDAY = 'wednesday'
    THURSDAY = 'thursday'
    FRIDAY = 'friday'
    SATURDAY = 'saturday'
    SUNDAY = 'sunday'

    # Indexed by date.weekday()
    ORDERED = [MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY]

class BusinessRules:
    """Business rules and limits"""
    DEFAULT_SEAT_CAPACITY = 54
    SEATS_PER_ROW = 4
    BASE_SEAT_PRICE = 850
    PREMIUM_SEAT_MULTIPLIER = 1.2
    WHEELCHAIR_ROW_INTERVAL = 3
    TRANSACTION_MAX_ATTEMPTS = 5
    # Seconds, multiplied by the attempt number
    TRANSACTION_RETRY_DELAY = 0.02
    HIRE_TYPE_FULL_BUS = 'full_bus'
    DEFAULT_REJECTION_REASON = 'No reason provided'
    # Tried in order; the first separator found in the route string wins
    ROUTE_SEPARATORS = (' to ', ' - ', ' → ', ' -> ', ' | ')
    # Display placeholders for regular-route search results
    PLACEHOLDER_DEPARTURE_TIME = '08:30 AM'
    PLACEHOLDER_ARRIVAL_TIME = '12:45 PM'
    PLACEHOLDER_DURATION = '4h 15m'
