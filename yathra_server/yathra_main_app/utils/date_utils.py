"""Date parsing helpers"""
from datetime import date, datetime

from .constants import DayOfWeek
from .exceptions import ValidationFailure


def parse_date(value):
    """Accept a date or an ISO 'YYYY-MM-DD' string"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise ValidationFailure(f'Invalid date "{value}", expected YYYY-MM-DD')


def weekday_name(value):
    """Lowercase English weekday name for a date, e.g. 'monday'"""
    return DayOfWeek.ORDERED[parse_date(value).weekday()]


def normalize_days(days):
    """Lowercase and validate a list of weekday names"""
    normalized = []
    for day in days or []:
        name = str(day).strip().lower()
        if name not in DayOfWeek.ORDERED:
            raise ValidationFailure(f'Invalid day of week "{day}"')
        if name not in normalized:
            normalized.append(name)
    return normalized
