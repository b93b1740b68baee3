"""Scheduled office hours shown next to each employee.

Office times are free text typed by the admin, so both ``08:00 am`` and
``20:00`` style values are accepted. Shifts ending before they start are
taken to run past midnight.
"""
import re

CLOCK_12H = re.compile(r'^(0?[1-9]|1[0-2]):([0-5][0-9])\s?(am|pm)$', re.IGNORECASE)
CLOCK_24H = re.compile(r'^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$')

EMPTY = '-'
INVALID = 'Invalid time'


def parse_clock(value):
    """Return ``(hour, minute)`` on a 24 hour clock, or None."""
    if not value:
        return None

    match = CLOCK_12H.match(value)
    if match:
        hour, minute, period = int(match.group(1)), int(match.group(2)), match.group(3).lower()
        if period == 'pm' and hour != 12:
            hour += 12
        elif period == 'am' and hour == 12:
            hour = 0
        return hour, minute

    match = CLOCK_24H.match(value)
    if match:
        return int(match.group(1)), int(match.group(2))

    return None


def total_hours(in_time, out_time):
    if not in_time or not out_time:
        return EMPTY

    start = parse_clock(in_time)
    end = parse_clock(out_time)
    if start is None or end is None:
        return INVALID

    minutes = (end[0] * 60 + end[1]) - (start[0] * 60 + start[1])
    if minutes < 0:
        minutes += 24 * 60

    return f'{minutes // 60}h {minutes % 60}m'
