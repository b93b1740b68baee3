"""Whole-collection persistence.

Each collection is one JSON blob in ``StoredCollection``. Callers load the
full list, change it in memory and write it back in one go; concurrent
writers simply overwrite each other (last write wins).
"""
import json
import logging

from django.db import transaction

from .models import StoredCollection

logger = logging.getLogger(__name__)

ENTRIES = 'entries'
SETTINGS = 'settings'
EMPLOYEES = 'employees'
JELA_REPORTERS = 'jela_reporters'
ATTENDANCE = 'attendance'
VOICE_ARTISTS = 'voice_artists'
VOICE_WORK = 'voice_work'
UPLOAD_SCHEDULES = 'upload_schedules'
WORK_CATEGORIES = 'work_categories'
WORK_NOTES = 'work_notes'
MODERATORS = 'moderators'
ADMIN_CREDENTIALS = 'admin_credentials'
FEATURE_TOGGLES = 'feature_toggles'

COLLECTION_KEYS = (
    ENTRIES, SETTINGS, EMPLOYEES, JELA_REPORTERS, ATTENDANCE, VOICE_ARTISTS,
    VOICE_WORK, UPLOAD_SCHEDULES, WORK_CATEGORIES, WORK_NOTES, MODERATORS,
    ADMIN_CREDENTIALS, FEATURE_TOGGLES,
)

IMMUTABLE_FIELDS = ('id', 'createdAt')


def _read(key):
    row = StoredCollection.objects.filter(key=key).only('payload').first()
    if row is None:
        return None
    try:
        return json.loads(row.payload)
    except ValueError:
        logger.warning("Stored collection %r is not valid JSON, treating it as empty", key)
        return None


def load(key):
    data = _read(key)
    if not isinstance(data, list):
        if data is not None:
            logger.warning("Stored collection %r is not a list, treating it as empty", key)
        return []
    return data


def save_all(key, records):
    _write(key, list(records))


def load_object(key, default=None):
    data = _read(key)
    if not isinstance(data, dict):
        return dict(default or {})
    return data


def save_object(key, value):
    _write(key, dict(value))


def delete(key):
    StoredCollection.objects.filter(key=key).delete()


def _write(key, data):
    payload = json.dumps(data, ensure_ascii=False)
    with transaction.atomic():
        StoredCollection.objects.update_or_create(key=key, defaults={'payload': payload})


class RecordStore:
    """Id-keyed CRUD over one stored collection."""

    def __init__(self, key):
        self.key = key

    def load(self):
        return load(self.key)

    def save_all(self, records):
        save_all(self.key, records)

    def get(self, record_id):
        return next((r for r in self.load() if r.get('id') == record_id), None)

    def add(self, record, prepend=False):
        records = self.load()
        records = [record] + records if prepend else records + [record]
        self.save_all(records)
        return record

    def update(self, record_id, fields):
        changes = {k: v for k, v in fields.items() if k not in IMMUTABLE_FIELDS}
        records = self.load()
        updated = None

        for index, record in enumerate(records):
            if record.get('id') == record_id:
                updated = {**record, **changes}
                records[index] = updated
                break

        if updated is None:
            return None

        self.save_all(records)
        return updated

    def remove(self, record_id):
        records = self.load()
        remaining = [r for r in records if r.get('id') != record_id]

        if len(remaining) == len(records):
            return False

        self.save_all(remaining)
        return True

    def clear(self):
        delete(self.key)
