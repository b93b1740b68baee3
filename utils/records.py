import math
import re
import uuid
from datetime import datetime, timezone as dt_timezone

from django.core.exceptions import ValidationError
from django.utils import timezone

LEADING_INT = re.compile(r'\s*[+-]?\d+')


def new_id():
    return str(uuid.uuid4())


def now_iso():
    # Same shape as a browser toISOString(): 2024-06-01T08:30:00.000Z
    now = datetime.now(dt_timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f'{now.microsecond // 1000:03d}Z'


def today_iso():
    return timezone.localdate().isoformat()


def current_month():
    return timezone.localdate().strftime('%Y-%m')


def parse_number(value, label='Value'):
    """Numeric form field -> float, int when whole, None when blank.

    Anything else that is not a finite number raises ValidationError.
    """
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f'{label} must be a number')
    if not math.isfinite(number):
        raise ValidationError(f'{label} must be a finite number')
    if number.is_integer():
        return int(number)
    return number


def parse_int(value, default=0):
    """Leading whole number of a form field ("2.5" -> 2, "abc" -> default)."""
    match = LEADING_INT.match(str(value if value is not None else ''))
    if match is None:
        return default
    return int(match.group(0))


def is_month(value):
    try:
        datetime.strptime(value or '', '%Y-%m')
    except ValueError:
        return False
    return len(value) == 7
