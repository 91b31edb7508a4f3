"""Tests for routines and daily schedules"""

from datetime import timedelta

from django.test import TestCase
from ..models import DailySchedule, Routine
from ..services.schedule_service import ScheduleService
from ..utils.constants import RoutineAvailability, RoutineStatus, UserRole
from ..utils.exceptions import BusNotFoundError, RoutineNotFoundError, ValidationFailure
from .helpers import MONDAY, TUESDAY, make_bus, make_routine, make_user


class ScheduleServiceTest(TestCase):
    def setUp(self):
        self.service = ScheduleService()
        self.bus = make_bus()
        self.driver = self.bus.driver

    def create(self, **overrides):
        params = {
            'driver': self.driver,
            'bus_id': self.bus.id,
            'routine_name': 'Morning run',
            'route': 'Colombo to Kandy',
            'start_time': '08:00',
            'end_time': '11:00',
            'price_per_person': 900,
            'days_of_week': ['Monday', 'friday'],
        }
        params.update(overrides)
        return self.service.create_routine(**params)

    def test_create_routine_pending(self):
        routine = self.create()

        self.assertEqual(routine.status, RoutineStatus.PENDING_APPROVAL)
        self.assertEqual(routine.days_of_week, ['monday', 'friday'])
        self.assertEqual(routine.time_slot, {'startTime': '08:00', 'endTime': '11:00'})

    def test_create_routine_validation(self):
        with self.assertRaises(ValidationFailure):
            self.create(start_time='8am')
        with self.assertRaises(ValidationFailure):
            self.create(days_of_week=[])
        with self.assertRaises(ValidationFailure):
            self.create(days_of_week=['funday'])

    def test_create_routine_needs_own_bus(self):
        other = make_user('other-driver', UserRole.DRIVER)
        with self.assertRaises(BusNotFoundError):
            self.create(driver=other)

    def test_approve(self):
        routine = self.create()
        approved = self.service.update_routine_status(routine.id, RoutineStatus.APPROVED)

        self.assertEqual(approved.status, RoutineStatus.APPROVED)
        self.assertIsNotNone(approved.approved_at)

    def test_reject_requires_reason(self):
        routine = self.create()
        with self.assertRaises(ValidationFailure):
            self.service.update_routine_status(routine.id, RoutineStatus.REJECTED)

        rejected = self.service.update_routine_status(routine.id, RoutineStatus.REJECTED, 'Overlaps another slot')
        self.assertEqual(rejected.rejection_reason, 'Overlaps another slot')
        self.assertIsNotNone(rejected.rejected_at)

    def test_only_pending_routines_are_reviewed(self):
        routine = self.create()
        self.service.update_routine_status(routine.id, RoutineStatus.APPROVED)
        with self.assertRaises(ValidationFailure):
            self.service.update_routine_status(routine.id, RoutineStatus.REJECTED, 'Too late')

    def test_missing_routine(self):
        with self.assertRaises(RoutineNotFoundError):
            self.service.update_routine(9999, route='Galle to Matara')
        with self.assertRaises(RoutineNotFoundError):
            self.service.delete_routine(9999)
        with self.assertRaises(RoutineNotFoundError):
            self.service.update_routine_status(9999, RoutineStatus.APPROVED)

    def test_update_routine(self):
        routine = self.create()
        updated = self.service.update_routine(routine.id, route='Galle to Matara', days_of_week=['SUNDAY'])

        self.assertEqual(updated.route, 'Galle to Matara')
        self.assertEqual(updated.days_of_week, ['sunday'])
        with self.assertRaises(ValidationFailure):
            self.service.update_routine(routine.id, status=RoutineStatus.APPROVED)

    def test_delete_routine(self):
        routine = self.create()
        self.service.delete_routine(routine.id)
        with self.assertRaises(RoutineNotFoundError):
            self.service.get_routine(routine.id)

    def test_listings(self):
        first = self.create(routine_name='First')
        second = self.create(routine_name='Second')
        Routine.objects.filter(id=first.id).update(created_at=second.created_at - timedelta(days=1))
        self.service.update_routine_status(first.id, RoutineStatus.APPROVED)

        self.assertEqual([r.id for r in self.service.get_routines_by_driver(self.driver)], [second.id, first.id])
        self.assertEqual([r.id for r in self.service.get_pending_routines()], [second.id])
        self.assertEqual([r.id for r in self.service.get_routines_by_bus(self.bus.id)], [first.id])

    def test_today_schedule_defaults_to_available(self):
        late = make_routine(self.bus, start_time='14:00', end_time='17:00', name='Late')
        early = make_routine(self.bus, start_time='06:00', end_time='09:00', name='Early')
        make_routine(self.bus, days=('tuesday',), name='Tuesday only')
        make_routine(self.bus, status=RoutineStatus.PENDING_APPROVAL, name='Pending')

        schedule = self.service.get_today_schedule(self.driver, MONDAY)

        self.assertEqual([entry['routine'].id for entry in schedule], [early.id, late.id])
        self.assertTrue(all(entry['dailyStatus']['availability'] == RoutineAvailability.AVAILABLE for entry in schedule))

    def test_today_schedule_uses_override(self):
        routine = make_routine(self.bus)
        self.service.update_daily_routine_status(routine.id, MONDAY, RoutineAvailability.UNAVAILABLE, 'Repairs')

        entry = self.service.get_today_schedule(self.driver, '2026-06-01')[0]
        self.assertEqual(entry['dailyStatus']['availability'], RoutineAvailability.UNAVAILABLE)
        self.assertEqual(entry['dailyStatus']['notes'], 'Repairs')

    def test_daily_status_timestamps(self):
        routine = make_routine(self.bus)

        started = self.service.update_daily_routine_status(routine.id, MONDAY, RoutineAvailability.STARTED)
        self.assertIsNotNone(started.started_at)
        completed = self.service.update_daily_routine_status(routine.id, MONDAY, RoutineAvailability.COMPLETED)
        self.assertIsNotNone(completed.completed_at)

        self.assertEqual(DailySchedule.objects.filter(routine=routine).count(), 1)
        self.assertEqual(completed.doc_key, f'{routine.id}_2026-06-01')

    def test_daily_status_validation(self):
        routine = make_routine(self.bus)
        with self.assertRaises(ValidationFailure):
            self.service.update_daily_routine_status(routine.id, MONDAY, 'cancelled')
        with self.assertRaises(RoutineNotFoundError):
            self.service.update_daily_routine_status(9999, TUESDAY, RoutineAvailability.STARTED)
