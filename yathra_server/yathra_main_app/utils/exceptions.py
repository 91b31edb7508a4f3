"""Booking engine error taxonomy"""


class BookingEngineError(Exception):
    """Base class for errors reported to callers of the booking engine"""
    status_code = 500
    default_message = 'Booking engine error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(BookingEngineError):
    """A referenced record does not exist. Terminal, never retried."""
    status_code = 404
    default_message = 'Not found'


class ValidationFailure(BookingEngineError):
    """The request is invalid in the current state. The caller must change it."""
    status_code = 400
    default_message = 'Invalid request'


class TransientConflictError(BookingEngineError):
    """The store aborted the transaction because of a concurrent write.

    Nothing was committed, so the whole operation may be retried.
    """
    status_code = 503
    default_message = 'The booking could not be completed due to a concurrent update, please retry'


class MalformedDocumentError(BookingEngineError):
    """A stored record does not have the expected shape"""
    default_message = 'Stored record is malformed'


class BusNotFoundError(NotFoundError):
    default_message = 'Bus not found'


class DriverNotFoundError(NotFoundError):
    default_message = 'Driver not found'


class TripNotFoundError(NotFoundError):
    default_message = 'Trip not found'


class BookingNotFoundError(NotFoundError):
    default_message = 'Booking not found'


class RoutineNotFoundError(NotFoundError):
    default_message = 'Routine not found'


class HireRequestNotFoundError(NotFoundError):
    default_message = 'Hire request not found'


class RouteRequestNotFoundError(NotFoundError):
    default_message = 'Route request not found'


class SeatUnavailableError(ValidationFailure):
    default_message = 'Seat is no longer available'


class OperatingDayError(ValidationFailure):
    default_message = 'Bus does not operate on the selected day'


class InsufficientSeatsError(ValidationFailure):
    default_message = 'Not enough seats available for this trip'


class UserMismatchError(ValidationFailure):
    default_message = 'User ID mismatch - booking must be for authenticated user'


class RouteAlreadyExistsError(ValidationFailure):
    default_message = 'Route already exists'
