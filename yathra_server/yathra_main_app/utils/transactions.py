"""Atomic read-then-write helper with conflict retries"""
import logging
import time

from django.conf import settings
from django.db import transaction, OperationalError

from .constants import BusinessRules
from .exceptions import TransientConflictError

logger = logging.getLogger(__name__)


def run_in_transaction(fn, *args, max_attempts=None, label='transaction', **kwargs):
    """
    Run fn(*args, **kwargs) inside transaction.atomic().

    fn must take its row locks (select_for_update) before reading shared
    state. If the database aborts the block because of a concurrent write
    (deadlock, serialization failure, lock timeout) everything is rolled
    back and fn runs again from scratch after a short, growing pause.
    Engine errors raised by fn abort immediately and are never retried.

    Raises:
        TransientConflictError: if every attempt was aborted by the database
    """
    if max_attempts is None:
        max_attempts = getattr(settings, 'BOOKING_TRANSACTION_MAX_ATTEMPTS', BusinessRules.TRANSACTION_MAX_ATTEMPTS)
    delay = getattr(settings, 'BOOKING_TRANSACTION_RETRY_DELAY', BusinessRules.TRANSACTION_RETRY_DELAY)

    for attempt in range(1, max_attempts + 1):
        try:
            with transaction.atomic():
                return fn(*args, **kwargs)
        except OperationalError as e:
            logger.warning(f'[TXN] {label} aborted by the database (attempt {attempt}/{max_attempts}): {e}')
            if attempt < max_attempts:
                time.sleep(delay * attempt)

    logger.error(f'[TXN] {label} failed after {max_attempts} attempts')
    raise TransientConflictError()
