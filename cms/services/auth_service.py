import logging

from django.conf import settings
from django.contrib.auth.hashers import check_password, identify_hasher
from django.utils.crypto import constant_time_compare

from store import collections

logger = logging.getLogger(__name__)

ADMIN = 'admin'
MODERATOR = 'moderator'

MODERATOR_PERMISSIONS = ('add', 'edit')


def password_matches(raw, stored):
    """Hashed values go through the hashers; anything else is legacy plaintext."""
    if not raw or not stored:
        return False
    try:
        identify_hasher(stored)
    except ValueError:
        return constant_time_compare(raw, stored)
    return check_password(raw, stored)


class CredentialStore:
    """Where login looks up the admin pair and the moderators."""

    def admin_credentials(self):
        stored = collections.load_object(collections.ADMIN_CREDENTIALS)
        if stored.get('userId') and stored.get('password'):
            return stored
        return {
            'userId': settings.DOB_ADMIN_USER_ID,
            'password': settings.DOB_ADMIN_PASSWORD,
        }

    def moderators(self):
        return collections.load(collections.MODERATORS)

    def default_moderator(self):
        return {
            'userId': settings.DOB_MODERATOR_USER_ID,
            'password': settings.DOB_MODERATOR_PASSWORD,
            'name': 'Default Moderator',
        }


class SessionGate:
    """Login state kept in the session under ``authenticated`` and ``user``."""

    def __init__(self, session, credentials=None):
        self.session = session
        self.credentials = credentials or CredentialStore()

    @property
    def is_authenticated(self):
        return bool(self.session.get('authenticated')) and self.user is not None

    @property
    def user(self):
        return self.session.get('user')

    @property
    def role(self):
        user = self.user
        return user.get('role') if user else None

    @property
    def is_admin(self):
        return self.is_authenticated and self.role == ADMIN

    def login(self, user_id, password):
        user = self._authenticate(user_id, password)

        if user is None:
            logger.info("Failed login for %r", user_id)
            return False

        self.session['authenticated'] = True
        self.session['user'] = user
        logger.info("%s %r logged in", user['role'], user['id'])
        return True

    def logout(self):
        for key in ('authenticated', 'user'):
            self.session.pop(key, None)

    def has_permission(self, name):
        if not self.is_authenticated:
            return False
        if self.role == ADMIN:
            return True
        return name in MODERATOR_PERMISSIONS

    def _authenticate(self, user_id, password):
        if not user_id or not password:
            return None

        admin = self.credentials.admin_credentials()
        if user_id == admin['userId'] and password_matches(password, admin['password']):
            return {'id': admin['userId'], 'role': ADMIN, 'name': 'Administrator'}

        for moderator in self.credentials.moderators():
            if moderator.get('userId') == user_id and password_matches(password, moderator.get('password')):
                return {'id': moderator['userId'], 'role': MODERATOR, 'name': moderator.get('name', '')}

        fallback = self.credentials.default_moderator()
        if user_id == fallback['userId'] and password_matches(password, fallback['password']):
            return {'id': fallback['userId'], 'role': MODERATOR, 'name': fallback['name']}

        return None
