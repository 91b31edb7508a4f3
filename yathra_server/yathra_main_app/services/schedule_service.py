"""Schedule service - recurring routines and their daily overrides"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from ..models import Bus, Routine, DailySchedule
from ..utils.constants import RoutineAvailability, RoutineStatus
from ..utils.date_utils import normalize_days, parse_date, weekday_name
from ..utils.exceptions import BusNotFoundError, RoutineNotFoundError, ValidationFailure
from ..utils.ordered_query import query_ordered

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = [
    'routine_name', 'route', 'start_time', 'end_time',
    'price_per_person', 'booking_commission', 'days_of_week',
]


def default_daily_status(date):
    return {'availability': RoutineAvailability.AVAILABLE, 'date': date.isoformat()}


def daily_status_document(schedule):
    return {
        'routineId': schedule.routine_id,
        'date': schedule.date.isoformat(),
        'availability': schedule.availability,
        'notes': schedule.notes,
        'startedAt': schedule.started_at,
        'completedAt': schedule.completed_at,
        'updatedAt': schedule.updated_at,
    }


class ScheduleService:
    """Service for routine and daily schedule operations"""

    def create_routine(self, driver, bus_id, routine_name, route, start_time, end_time,
                       price_per_person, days_of_week, booking_commission=0):
        """Create a routine awaiting admin approval"""
        bus = Bus.objects.filter(id=bus_id, driver=driver).first()
        if not bus:
            raise BusNotFoundError()

        routine = Routine(
            driver=driver,
            bus=bus,
            routine_name=routine_name,
            route=route,
            start_time=start_time,
            end_time=end_time,
            price_per_person=price_per_person,
            booking_commission=booking_commission,
            days_of_week=normalize_days(days_of_week),
            status=RoutineStatus.PENDING_APPROVAL,
        )
        self._validate(routine)
        routine.save()

        logger.info(f'[SCHEDULE] Routine created with ID: {routine.id}')
        return routine

    def get_routine(self, routine_id):
        routine = Routine.objects.filter(id=routine_id).first()
        if not routine:
            raise RoutineNotFoundError()
        return routine

    def get_routines_by_driver(self, driver):
        return query_ordered(Routine, {'driver': driver}, 'created_at', descending=True)

    def get_routines_by_bus(self, bus_id):
        return query_ordered(Routine, {'bus_id': bus_id, 'status': RoutineStatus.APPROVED}, 'created_at')

    def get_pending_routines(self):
        return query_ordered(Routine, {'status': RoutineStatus.PENDING_APPROVAL}, 'created_at', descending=True)

    @transaction.atomic
    def update_routine(self, routine_id, **changes):
        """Update editable routine fields; unknown fields are rejected"""
        routine = Routine.objects.select_for_update().filter(id=routine_id).first()
        if not routine:
            raise RoutineNotFoundError()

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationFailure(f'Cannot update field(s): {", ".join(sorted(unknown))}')

        if 'days_of_week' in changes:
            changes['days_of_week'] = normalize_days(changes['days_of_week'])
        for field, value in changes.items():
            setattr(routine, field, value)

        self._validate(routine)
        routine.save()

        logger.info(f'[SCHEDULE] Routine {routine_id} updated')
        return routine

    @transaction.atomic
    def update_routine_status(self, routine_id, status, rejection_reason=None):
        """
        Approve or reject a routine.

        Only pending routines can be reviewed. Approval stamps approved_at;
        rejection needs a reason, which is stored with rejected_at.
        """
        if status not in (RoutineStatus.APPROVED, RoutineStatus.REJECTED):
            raise ValidationFailure(f'Invalid routine status "{status}"')
        if status == RoutineStatus.REJECTED and not rejection_reason:
            raise ValidationFailure('A rejection reason is required')

        routine = Routine.objects.select_for_update().filter(id=routine_id).first()
        if not routine:
            raise RoutineNotFoundError()
        if routine.status != RoutineStatus.PENDING_APPROVAL:
            raise ValidationFailure(f'Routine is already {routine.status}')

        routine.status = status
        if status == RoutineStatus.APPROVED:
            routine.approved_at = timezone.now()
        else:
            routine.rejection_reason = rejection_reason
            routine.rejected_at = timezone.now()
        routine.save()

        logger.info(f'[SCHEDULE] Routine {routine_id} status updated to: {status}')
        return routine

    @transaction.atomic
    def delete_routine(self, routine_id):
        deleted, _ = Routine.objects.filter(id=routine_id).delete()
        if not deleted:
            raise RoutineNotFoundError()
        logger.info(f'[SCHEDULE] Routine {routine_id} deleted')

    def get_today_schedule(self, driver, date):
        """
        Approved routines of the driver running on date's weekday, each with
        its daily status (available when no override exists), by start time.
        """
        date = parse_date(date)
        day = weekday_name(date)

        routines = [
            routine for routine in Routine.objects.filter(driver=driver, status=RoutineStatus.APPROVED)
            if routine.runs_on(day)
        ]
        overrides = {
            schedule.routine_id: schedule
            for schedule in DailySchedule.objects.filter(routine__in=routines, date=date)
        }

        schedule = [
            {
                'routine': routine,
                'dailyStatus': (
                    daily_status_document(overrides[routine.id])
                    if routine.id in overrides else default_daily_status(date)
                ),
            }
            for routine in routines
        ]
        return sorted(schedule, key=lambda entry: entry['routine'].start_time)

    @transaction.atomic
    def update_daily_routine_status(self, routine_id, date, availability, notes=None):
        """
        Upsert the routine's override for date.

        Moving to started or completed stamps the matching timestamp. Any
        order of transitions is accepted.
        """
        if availability not in dict(RoutineAvailability.CHOICES):
            raise ValidationFailure(f'Invalid availability "{availability}"')
        if not Routine.objects.filter(id=routine_id).exists():
            raise RoutineNotFoundError()

        date = parse_date(date)
        schedule, _ = DailySchedule.objects.select_for_update().get_or_create(
            routine_id=routine_id, date=date,
        )
        schedule.availability = availability
        if notes:
            schedule.notes = notes
        if availability == RoutineAvailability.STARTED:
            schedule.started_at = timezone.now()
        elif availability == RoutineAvailability.COMPLETED:
            schedule.completed_at = timezone.now()
        schedule.save()

        logger.info(f'[SCHEDULE] Daily routine {routine_id} for {date} updated to: {availability}')
        return schedule

    def _validate(self, routine):
        try:
            routine.full_clean(exclude=['driver', 'bus'])
        except DjangoValidationError as e:
            raise ValidationFailure('; '.join(
                f'{field}: {" ".join(messages)}' for field, messages in e.message_dict.items()
            ))
        if not routine.days_of_week:
            raise ValidationFailure('At least one day of the week is required')
