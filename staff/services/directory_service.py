from store import collections
from store.collections import RecordStore
from utils.records import new_id, now_iso
from .office_hours import total_hours

ALL = 'all'

EMPLOYEE_FIELDS = [
    'name', 'employeeId', 'designation', 'holiday', 'salary', 'address',
    'phoneNumber', 'officeShift', 'officeInTime', 'officeOutTime', 'remarks',
]
REPORTER_FIELDS = ['name', 'employeeId', 'designation', 'address', 'phoneNumber', 'remarks']

DIRECTORIES = {
    collections.EMPLOYEES: EMPLOYEE_FIELDS,
    collections.JELA_REPORTERS: REPORTER_FIELDS,
}


def blank_record(fields):
    record = {'id': new_id()}
    record.update({field: '' for field in fields})
    record['createdAt'] = now_iso()
    return record


def add_person(key):
    return RecordStore(key).add(blank_record(DIRECTORIES[key]), prepend=True)


def update_person(key, id, fields):
    allowed = DIRECTORIES[key]
    changes = {k: (v or '').strip() for k, v in fields.items() if k in allowed}
    return RecordStore(key).update(id, changes)


def remove_person(key, id):
    return RecordStore(key).remove(id)


def search_people(people, search='', designation=ALL, shift=ALL):
    needle = (search or '').strip().lower()
    result = []

    for person in people:
        if needle and needle not in (person.get('name') or '').lower() \
                and needle not in (person.get('employeeId') or '').lower():
            continue
        if designation and designation != ALL and person.get('designation') != designation:
            continue
        if shift and shift != ALL and person.get('officeShift') != shift:
            continue
        result.append(person)

    return result


def distinct(people, field):
    return sorted({p.get(field) for p in people if p.get(field)})


def with_total_hours(employees):
    return [
        {**e, 'totalHours': total_hours(e.get('officeInTime') or '', e.get('officeOutTime') or '')}
        for e in employees
    ]
