from django.core.exceptions import ValidationError

from store.collections import RecordStore, UPLOAD_SCHEDULES
from utils.records import new_id

SCHEDULE_FIELDS = ['videoCategory', 'channelYT', 'pageFB', 'deliverTime', 'uploadTime']


def clean_schedule(fields):
    data = {field: (fields.get(field) or '').strip() for field in SCHEDULE_FIELDS}
    if not data['videoCategory']:
        raise ValidationError('Video Category is required')
    return data


def add_schedule(fields):
    return RecordStore(UPLOAD_SCHEDULES).add({'id': new_id(), **clean_schedule(fields)})


def update_schedule(id, fields):
    return RecordStore(UPLOAD_SCHEDULES).update(id, clean_schedule(fields))


def delete_schedule(id):
    return RecordStore(UPLOAD_SCHEDULES).remove(id)
