"""DRF exception handler for booking engine errors"""
import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import BookingEngineError, TransientConflictError

logger = logging.getLogger(__name__)


def engine_exception_handler(exc, context):
    """Render engine errors as {'error': message} with their status code"""
    if isinstance(exc, BookingEngineError):
        view = context.get('view')
        logger.info(f'[API] {view.__class__.__name__ if view else "view"} -> {exc.status_code}: {exc.message}')
        response = Response({'error': exc.message}, status=exc.status_code)
        if isinstance(exc, TransientConflictError):
            response['Retry-After'] = '1'
        return response

    return exception_handler(exc, context)
