"""Management command to delete seat maps and daily schedule overrides for past dates"""
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from yathra_main_app.models import SeatAvailability, DailySchedule


class Command(BaseCommand):
    help = 'Delete seat availability and daily schedule records older than N days'

    def add_arguments(self, parser):
        parser.add_argument('--days', type=int, default=30, help='Delete records dated more than X days ago (default: 30)')
        parser.add_argument('--dry-run', action='store_true', help='Only report what would be deleted')

    def handle(self, *args, **options):
        if options['days'] < 0:
            raise CommandError('--days must not be negative')

        cutoff = timezone.now().date() - timezone.timedelta(days=options['days'])
        seat_maps = SeatAvailability.objects.filter(travel_date__lt=cutoff)
        schedules = DailySchedule.objects.filter(date__lt=cutoff)

        if options['dry_run']:
            self.stdout.write(
                f'Would delete {seat_maps.count()} seat maps and {schedules.count()} daily schedules before {cutoff}'
            )
            return

        with transaction.atomic():
            seat_map_count, _ = seat_maps.delete()
            schedule_count, _ = schedules.delete()

        self.stdout.write(self.style.SUCCESS(
            f'Deleted {seat_map_count} seat maps and {schedule_count} daily schedules before {cutoff}'
        ))
