"""Work-flow board: post types with their ordered jobs, and team notes."""
from django.core.exceptions import ValidationError

from store.collections import RecordStore, WORK_CATEGORIES, WORK_NOTES
from utils.records import new_id, now_iso


def _required(value, message):
    value = (value or '').strip()
    if not value:
        raise ValidationError(message)
    return value


# === POST TYPES ===

def add_post_type(name):
    post_type = {'id': new_id(), 'name': _required(name, 'Post Type name is required'), 'jobs': []}
    return RecordStore(WORK_CATEGORIES).add(post_type)


def rename_post_type(id, name):
    return RecordStore(WORK_CATEGORIES).update(id, {'name': _required(name, 'Post Type name is required')})


def delete_post_type(id):
    return RecordStore(WORK_CATEGORIES).remove(id)


# === JOBS ===

def _edit_jobs(post_type_id, change):
    """Apply ``change(jobs) -> jobs`` to one post type. None if it does not exist."""
    store = RecordStore(WORK_CATEGORIES)
    post_type = store.get(post_type_id)
    if post_type is None:
        return None
    return store.update(post_type_id, {'jobs': change(list(post_type.get('jobs') or []))})


def add_job(post_type_id, name):
    job = {'id': new_id(), 'name': _required(name, 'Job name is required')}
    return _edit_jobs(post_type_id, lambda jobs: jobs + [job])


def rename_job(post_type_id, job_id, name):
    name = _required(name, 'Job name is required')
    return _edit_jobs(post_type_id, lambda jobs: [
        {**j, 'name': name} if j.get('id') == job_id else j for j in jobs
    ])


def delete_job(post_type_id, job_id):
    return _edit_jobs(post_type_id, lambda jobs: [j for j in jobs if j.get('id') != job_id])


# === NOTES ===

def add_note(to, message, created_by):
    if not (to or '').strip() or not (message or '').strip():
        raise ValidationError("Both 'To' and 'Message' fields are required")

    note = {
        'id': new_id(),
        'to': to.strip(),
        'message': message.strip(),
        'createdBy': created_by or 'Unknown',
        'createdAt': now_iso(),
    }
    return RecordStore(WORK_NOTES).add(note)


def update_note(id, to, message):
    if not (to or '').strip() or not (message or '').strip():
        raise ValidationError("Both 'To' and 'Message' fields are required")
    return RecordStore(WORK_NOTES).update(id, {'to': to.strip(), 'message': message.strip()})


def delete_note(id):
    return RecordStore(WORK_NOTES).remove(id)
