"""Tests for ordered listings and the index capability probe"""
from datetime import timedelta

from django.test import TestCase
from ..models import Routine, Booking, HireRequest
from ..utils.constants import RoutineStatus
from ..utils.ordered_query import query_ordered, supports_server_ordering
from .helpers import make_bus, make_routine


class SupportsServerOrderingTest(TestCase):
    def test_covered_queries(self):
        self.assertTrue(supports_server_ordering(Routine, ['driver'], 'created_at'))
        self.assertTrue(supports_server_ordering(Routine, ['status'], '-created_at'))
        self.assertTrue(supports_server_ordering(Booking, ['user_id'], 'booked_at'))
        self.assertTrue(supports_server_ordering(HireRequest, ['bus'], 'created_at'))

    def test_uncovered_queries(self):
        self.assertFalse(supports_server_ordering(Routine, ['bus_id', 'status'], 'created_at'))
        self.assertFalse(supports_server_ordering(Routine, ['driver'], 'start_time'))
        self.assertFalse(supports_server_ordering(Routine, [], 'created_at'))


class QueryOrderedTest(TestCase):
    def setUp(self):
        self.bus = make_bus()
        self.routines = [make_routine(self.bus, name=f'R{i}') for i in range(3)]
        base = self.routines[0].created_at
        # Stored in reverse of id order
        for offset, routine in enumerate(reversed(self.routines)):
            Routine.objects.filter(id=routine.id).update(created_at=base + timedelta(minutes=offset))

    def test_fallback_sorts_in_memory(self):
        with self.assertLogs('yathra_main_app.utils.ordered_query', level='WARNING') as logs:
            results = query_ordered(Routine, {'bus_id': self.bus.id, 'status': RoutineStatus.APPROVED}, 'created_at')

        self.assertEqual([r.routine_name for r in results], ['R2', 'R1', 'R0'])
        self.assertIn('[QUERY]', logs.output[0])

    def test_fallback_descending(self):
        results = query_ordered(Routine, {'bus_id': self.bus.id, 'status': RoutineStatus.APPROVED}, 'created_at', descending=True)
        self.assertEqual([r.routine_name for r in results], ['R0', 'R1', 'R2'])

    def test_indexed_query_orders_in_database(self):
        results = query_ordered(Routine, {'driver': self.bus.driver}, 'created_at', descending=True)
        self.assertEqual([r.routine_name for r in results], ['R0', 'R1', 'R2'])
