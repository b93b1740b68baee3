"""Daily attendance sheet.

One record per employee and day. Editing either time recomputes the
working hours and resets the status to the default for those hours; the
status can then be overridden by hand until a time changes again.
"""
import logging
from datetime import datetime

from django.core.exceptions import ValidationError

from store.collections import ATTENDANCE, EMPLOYEES, RecordStore
from utils.records import is_month, new_id, now_iso

logger = logging.getLogger(__name__)

PRESENT = 'Present'
ABSENT = 'Absent'
LATE = 'Late'
HALF_DAY = 'Half-day'
LEAVE = 'Leave'

STATUSES = (PRESENT, ABSENT, LATE, HALF_DAY, LEAVE)
TIME_FIELDS = ('inTime', 'outTime')
EDITABLE_FIELDS = TIME_FIELDS + ('status',)


def _minutes(value):
    try:
        moment = datetime.strptime(value, '%H:%M')
    except (TypeError, ValueError):
        return None
    return moment.hour * 60 + moment.minute


def working_hours(in_time, out_time):
    start = _minutes(in_time)
    end = _minutes(out_time)
    if start is None or end is None:
        return 0
    return max(0, (end - start) / 60)


def default_status(hours):
    if hours == 0:
        return ABSENT
    if hours < 4:
        return HALF_DAY
    if hours >= 8:
        return PRESENT
    return LATE


def find_record(records, employee_id, date):
    for record in records:
        if record.get('employeeId') == employee_id and record.get('date') == date:
            return record
    return None


def _new_record(employee, date):
    return {
        'id': new_id(),
        'employeeId': employee['id'],
        'employeeName': employee.get('name', ''),
        'employeeIdNumber': employee.get('employeeId', ''),
        'designation': employee.get('designation', ''),
        'date': date,
        'inTime': '',
        'outTime': '',
        'workingHours': 0,
        'status': ABSENT,
        'createdAt': now_iso(),
    }


def update_attendance(employee_id, date, field, value):
    """Set one field of an employee's day, creating the record on first edit."""
    if field not in EDITABLE_FIELDS:
        raise ValidationError(f'Unknown attendance field: {field}')
    if field == 'status' and value not in STATUSES:
        raise ValidationError(f'Unknown attendance status: {value}')
    try:
        datetime.strptime(date or '', '%Y-%m-%d')
    except ValueError:
        raise ValidationError('Date must be in YYYY-MM-DD format')

    employee = RecordStore(EMPLOYEES).get(employee_id)
    if employee is None:
        raise ValidationError('Employee not found')

    store = RecordStore(ATTENDANCE)
    records = store.load()
    record = find_record(records, employee_id, date)

    if record is None:
        record = _new_record(employee, date)
        records.append(record)

    record[field] = value
    if field in TIME_FIELDS:
        record['workingHours'] = working_hours(record['inTime'], record['outTime'])
        record['status'] = default_status(record['workingHours'])

    store.save_all(records)
    logger.info("Attendance for %s on %s: %s", record['employeeName'], date, record['status'])
    return record


def day_sheet(employees, records, date):
    """Every employee paired with their record for ``date`` (or None)."""
    return [
        {'employee': employee, 'record': find_record(records, employee['id'], date)}
        for employee in employees
    ]


def records_for_month(records, month):
    if not is_month(month):
        raise ValidationError('Month must be in YYYY-MM format')
    return [r for r in records if (r.get('date') or '')[:7] == month]
