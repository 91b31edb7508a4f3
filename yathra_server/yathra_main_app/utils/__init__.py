"""Utils package - helper functions and utilities"""

from .constants import *
from .exceptions import (
    BookingEngineError, NotFoundError, ValidationFailure, TransientConflictError, MalformedDocumentError,
)

__all__ = [
    'BookingEngineError',
    'NotFoundError',
    'ValidationFailure',
    'TransientConflictError',
    'MalformedDocumentError',
]
