import logging

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.core.exceptions import ValidationError

from store import collections
from store.collections import RecordStore
from utils.records import current_month, is_month, new_id, now_iso
from .auth_service import CredentialStore, password_matches

logger = logging.getLogger(__name__)

DEFAULT_AWARD_MESSAGE = "Congratulations to our top performers this month!"

FEATURES = {
    'voiceArtist': ('voiceArtistEnabled', 'Voice Artist'),
    'attendance': ('attendanceEnabled', 'Daily Attendance'),
    'workFlow': ('workFlowEnabled', 'Work Flow'),
    'videoUploadTime': ('videoUploadTimeEnabled', 'Video Upload Time'),
}

RESET_KEYS = (
    collections.ENTRIES,
    collections.SETTINGS,
    collections.EMPLOYEES,
    collections.JELA_REPORTERS,
)


# === GENERAL SETTINGS ===

def default_settings():
    return {
        'currentMonth': current_month(),
        'employeeOfMonthMessage': DEFAULT_AWARD_MESSAGE,
    }


def load_settings():
    return {**default_settings(), **collections.load_object(collections.SETTINGS)}


def save_settings(current_month_value, message):
    if not is_month(current_month_value):
        raise ValidationError('Month must be in YYYY-MM format')

    data = {'currentMonth': current_month_value, 'employeeOfMonthMessage': message or ''}
    collections.save_object(collections.SETTINGS, data)
    return data


# === FEATURE TOGGLES ===

def load_feature_toggles():
    stored = collections.load_object(collections.FEATURE_TOGGLES)
    toggles = dict(stored)
    for key, _ in FEATURES.values():
        value = stored.get(key)
        toggles[key] = True if value is None else bool(value)
    return toggles


def is_feature_enabled(feature, toggles=None):
    toggles = toggles if toggles is not None else load_feature_toggles()
    key, _ = FEATURES[feature]
    return toggles.get(key, True)


def set_feature(feature, enabled):
    if feature not in FEATURES:
        raise ValidationError(f'Unknown feature: {feature}')

    toggles = load_feature_toggles()
    key, label = FEATURES[feature]
    toggles[key] = bool(enabled)
    collections.save_object(collections.FEATURE_TOGGLES, toggles)

    logger.info("%s module %s", label, 'enabled' if enabled else 'disabled')
    return toggles


# === ADMIN CREDENTIALS ===

def _check_password_strength(password):
    if len(password) < settings.DOB_MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f'Password must be at least {settings.DOB_MIN_PASSWORD_LENGTH} characters'
        )


def change_admin_credentials(current_id, current_password, new_id_value, new_password, confirm_password):
    admin = CredentialStore().admin_credentials()

    if current_id != admin['userId'] or not password_matches(current_password, admin['password']):
        raise ValidationError('Current credentials are incorrect')

    if not new_id_value or not new_password:
        raise ValidationError('Please fill in all fields')

    if new_password != confirm_password:
        raise ValidationError("New password and confirmation don't match")

    _check_password_strength(new_password)

    if any(m.get('userId') == new_id_value for m in collections.load(collections.MODERATORS)):
        raise ValidationError('This User ID is already used by a moderator')

    collections.save_object(collections.ADMIN_CREDENTIALS, {
        'userId': new_id_value,
        'password': make_password(new_password),
    })
    logger.info("Admin credentials changed, new user id %r", new_id_value)


# === MODERATORS ===

def _public(moderator):
    return {k: v for k, v in moderator.items() if k != 'password'}


def list_moderators():
    return [_public(m) for m in collections.load(collections.MODERATORS)]


def _validate_moderator(name, user_id, password, moderators, exclude_id=None):
    if not name or not user_id or not password:
        raise ValidationError('Please fill in all fields')

    _check_password_strength(password)

    if user_id == CredentialStore().admin_credentials()['userId']:
        raise ValidationError('This User ID is already in use')

    for moderator in moderators:
        if moderator.get('id') != exclude_id and moderator.get('userId') == user_id:
            raise ValidationError('This User ID is already in use')


def add_moderator(name, user_id, password):
    store = RecordStore(collections.MODERATORS)
    _validate_moderator(name, user_id, password, store.load())

    moderator = {
        'id': new_id(),
        'name': name,
        'userId': user_id,
        'password': make_password(password),
        'createdAt': now_iso(),
    }
    store.add(moderator)

    logger.info("Moderator %r added", user_id)
    return _public(moderator)


def update_moderator(moderator_id, name, user_id, password):
    store = RecordStore(collections.MODERATORS)
    moderators = store.load()

    if not any(m.get('id') == moderator_id for m in moderators):
        return None

    _validate_moderator(name, user_id, password, moderators, exclude_id=moderator_id)

    updated = store.update(moderator_id, {
        'name': name,
        'userId': user_id,
        'password': make_password(password),
    })
    logger.info("Moderator %r updated", user_id)
    return _public(updated)


def delete_moderator(moderator_id):
    removed = RecordStore(collections.MODERATORS).remove(moderator_id)
    if removed:
        logger.info("Moderator %s removed", moderator_id)
    return removed


# === RESET ===

def reset_all_data():
    for key in RESET_KEYS:
        collections.delete(key)
    logger.warning("All entries, settings, employees and jela reporters were reset")
    return default_settings()
