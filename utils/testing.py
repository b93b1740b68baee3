from django.conf import settings
from django.test import override_settings

from store import collections

TEST_CREDENTIALS = override_settings(
    DOB_ADMIN_USER_ID='admin',
    DOB_ADMIN_PASSWORD='admin-pass',
    DOB_MODERATOR_USER_ID='DOB',
    DOB_MODERATOR_PASSWORD='dob2.0',
)


class LoginMixin:
    """Client helpers for tests that need an admin or moderator session."""

    def login_admin(self):
        response = self.client.post('/login/', {
            'userId': settings.DOB_ADMIN_USER_ID,
            'password': settings.DOB_ADMIN_PASSWORD,
        })
        self.assertEqual(response.status_code, 200)
        return response

    def login_moderator(self):
        response = self.client.post('/login/', {
            'userId': settings.DOB_MODERATOR_USER_ID,
            'password': settings.DOB_MODERATOR_PASSWORD,
        })
        self.assertEqual(response.status_code, 200)
        return response

    def seed(self, key, records):
        collections.save_all(key, records)
