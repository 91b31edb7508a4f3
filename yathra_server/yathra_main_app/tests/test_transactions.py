"""Tests for the transaction retry helper"""
from unittest import mock

from django.db import OperationalError
from django.test import TestCase, override_settings
from ..utils.exceptions import SeatUnavailableError, TransientConflictError
from ..utils.transactions import run_in_transaction


class RunInTransactionTest(TestCase):
    def test_returns_result(self):
        self.assertEqual(run_in_transaction(lambda a, b=0: a + b, 1, b=2), 3)

    def test_retries_database_conflicts(self):
        fn = mock.Mock(side_effect=[OperationalError('deadlock detected'), OperationalError('deadlock detected'), 'ok'])

        with self.assertLogs('yathra_main_app.utils.transactions', level='WARNING'):
            self.assertEqual(run_in_transaction(fn, label='test'), 'ok')
        self.assertEqual(fn.call_count, 3)

    @override_settings(BOOKING_TRANSACTION_MAX_ATTEMPTS=2)
    def test_gives_up_after_max_attempts(self):
        fn = mock.Mock(side_effect=OperationalError('could not serialize access'))

        with self.assertRaises(TransientConflictError):
            run_in_transaction(fn)
        self.assertEqual(fn.call_count, 2)

    def test_engine_errors_are_not_retried(self):
        fn = mock.Mock(side_effect=SeatUnavailableError())

        with self.assertRaises(SeatUnavailableError):
            run_in_transaction(fn)
        self.assertEqual(fn.call_count, 1)
