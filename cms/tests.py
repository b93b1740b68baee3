from django.contrib.auth.hashers import make_password
from django.test import SimpleTestCase, TestCase

from store import collections
from utils.testing import LoginMixin, TEST_CREDENTIALS
from .services import admin_service
from .services.auth_service import SessionGate, password_matches
from .services.navigation import visible_tabs


class FakeCredentials:
    def __init__(self, moderators=None):
        self._moderators = moderators or []

    def admin_credentials(self):
        return {'userId': 'MDBD', 'password': 'secret!'}

    def moderators(self):
        return self._moderators

    def default_moderator(self):
        return {'userId': 'DOB', 'password': 'dob2.0', 'name': 'Default Moderator'}


class SessionGateTests(SimpleTestCase):
    def setUp(self):
        self.session = {}
        moderators = [{'id': 'm1', 'name': 'Nadia', 'userId': 'nadia', 'password': make_password('nadia123')}]
        self.gate = SessionGate(self.session, FakeCredentials(moderators))

    def test_admin_login_grants_everything(self):
        self.assertTrue(self.gate.login('MDBD', 'secret!'))
        self.assertEqual(self.gate.role, 'admin')
        self.assertTrue(self.gate.has_permission('delete'))
        self.assertTrue(self.gate.has_permission('admin'))
        self.assertEqual(self.session['user'], {'id': 'MDBD', 'role': 'admin', 'name': 'Administrator'})
        self.assertTrue(self.session['authenticated'])

    def test_stored_moderator_can_add_and_edit_only(self):
        self.assertTrue(self.gate.login('nadia', 'nadia123'))
        self.assertEqual(self.gate.role, 'moderator')
        self.assertEqual(self.gate.user['name'], 'Nadia')
        self.assertTrue(self.gate.has_permission('edit'))
        self.assertTrue(self.gate.has_permission('add'))
        self.assertFalse(self.gate.has_permission('delete'))
        self.assertFalse(self.gate.has_permission('admin'))

    def test_fallback_moderator(self):
        self.assertTrue(self.gate.login('DOB', 'dob2.0'))
        self.assertEqual(self.gate.user, {'id': 'DOB', 'role': 'moderator', 'name': 'Default Moderator'})

    def test_wrong_credentials_create_no_session(self):
        self.assertFalse(self.gate.login('MDBD', 'wrong'))
        self.assertFalse(self.gate.is_authenticated)
        self.assertEqual(self.session, {})
        self.assertFalse(self.gate.has_permission('add'))

    def test_logout_clears_session(self):
        self.gate.login('MDBD', 'secret!')
        self.gate.logout()
        self.assertFalse(self.gate.is_authenticated)
        self.assertNotIn('user', self.session)
        self.assertNotIn('authenticated', self.session)

    def test_session_survives_new_gate(self):
        self.gate.login('nadia', 'nadia123')
        again = SessionGate(self.session, FakeCredentials())
        self.assertTrue(again.is_authenticated)
        self.assertEqual(again.role, 'moderator')

    def test_legacy_plaintext_password_still_matches(self):
        self.assertTrue(password_matches('plain123', 'plain123'))
        self.assertFalse(password_matches('plain124', 'plain123'))
        self.assertTrue(password_matches('hashed1', make_password('hashed1')))
        self.assertFalse(password_matches('', ''))


class NavigationTests(SimpleTestCase):
    def test_moderator_never_sees_admin_tabs(self):
        toggles = {'voiceArtistEnabled': True, 'attendanceEnabled': True,
                   'workFlowEnabled': True, 'videoUploadTimeEnabled': True}
        labels = [t['label'] for t in visible_tabs('moderator', toggles)]
        self.assertEqual(labels, ['Dashboard', 'Voice Artist', 'Daily Attendance', 'Work Flow', 'Video Upload Time'])

    def test_disabled_feature_is_hidden(self):
        toggles = {'voiceArtistEnabled': False, 'attendanceEnabled': True,
                   'workFlowEnabled': True, 'videoUploadTimeEnabled': False}
        labels = [t['label'] for t in visible_tabs('admin', toggles)]
        self.assertNotIn('Voice Artist', labels)
        self.assertNotIn('Video Upload Time', labels)
        self.assertIn('Admin Settings', labels)


@TEST_CREDENTIALS
class AdminServiceTests(TestCase):
    def test_feature_toggles_default_on(self):
        toggles = admin_service.load_feature_toggles()
        self.assertTrue(all(toggles[k] for k in ('voiceArtistEnabled', 'attendanceEnabled',
                                                 'workFlowEnabled', 'videoUploadTimeEnabled')))

    def test_set_feature_keeps_other_toggles(self):
        admin_service.set_feature('attendance', False)
        toggles = admin_service.set_feature('workFlow', False)
        self.assertFalse(toggles['attendanceEnabled'])
        self.assertFalse(toggles['workFlowEnabled'])
        self.assertTrue(toggles['voiceArtistEnabled'])

    def test_moderator_password_is_hashed(self):
        admin_service.add_moderator('Nadia', 'nadia', 'nadia123')
        stored = collections.load(collections.MODERATORS)[0]
        self.assertNotEqual(stored['password'], 'nadia123')
        self.assertNotIn('password', admin_service.list_moderators()[0])

    def test_moderator_user_id_must_be_unique(self):
        admin_service.add_moderator('Nadia', 'nadia', 'nadia123')
        with self.assertRaisesMessage(Exception, 'already in use'):
            admin_service.add_moderator('Other', 'nadia', 'other123')

    def test_moderator_user_id_cannot_be_admin_id(self):
        with self.assertRaisesMessage(Exception, 'already in use'):
            admin_service.add_moderator('Sneaky', 'admin', 'sneaky123')

    def test_short_moderator_password_rejected(self):
        with self.assertRaisesMessage(Exception, 'at least 6'):
            admin_service.add_moderator('Nadia', 'nadia', '123')
        self.assertEqual(collections.load(collections.MODERATORS), [])

    def test_edit_moderator_may_keep_own_user_id(self):
        moderator = admin_service.add_moderator('Nadia', 'nadia', 'nadia123')
        updated = admin_service.update_moderator(moderator['id'], 'Nadia K', 'nadia', 'nadia456')
        self.assertEqual(updated['name'], 'Nadia K')
        self.assertEqual(updated['createdAt'], moderator['createdAt'])

    def test_change_admin_credentials_requires_current_pair(self):
        with self.assertRaisesMessage(Exception, 'incorrect'):
            admin_service.change_admin_credentials('admin', 'nope', 'boss', 'boss123', 'boss123')

    def test_change_admin_credentials_confirmation_must_match(self):
        with self.assertRaisesMessage(Exception, "don't match"):
            admin_service.change_admin_credentials('admin', 'admin-pass', 'boss', 'boss123', 'boss124')

    def test_reset_clears_only_reset_keys(self):
        collections.save_all(collections.ENTRIES, [{'id': '1'}])
        collections.save_all(collections.EMPLOYEES, [{'id': '2'}])
        collections.save_all(collections.VOICE_ARTISTS, [{'id': '3'}])
        admin_service.reset_all_data()
        self.assertEqual(collections.load(collections.ENTRIES), [])
        self.assertEqual(collections.load(collections.EMPLOYEES), [])
        self.assertEqual(collections.load(collections.VOICE_ARTISTS), [{'id': '3'}])

    def test_settings_month_format(self):
        with self.assertRaisesMessage(Exception, 'YYYY-MM'):
            admin_service.save_settings('June', 'hi')
        self.assertEqual(admin_service.save_settings('2024-06', 'hi')['currentMonth'], '2024-06')


@TEST_CREDENTIALS
class CmsViewTests(LoginMixin, TestCase):
    def test_login_and_session_info(self):
        response = self.login_admin()
        self.assertEqual(response.json()['user']['role'], 'admin')

        info = self.client.get('/api/session/').json()
        self.assertTrue(info['authenticated'])
        self.assertTrue(info['permissions']['delete'])

    def test_bad_login(self):
        response = self.client.post('/login/', {'userId': 'admin', 'password': 'bad'})
        self.assertEqual(response.status_code, 401)
        self.assertFalse(self.client.get('/api/session/').json()['authenticated'])

    def test_logout_redirects_to_login(self):
        self.login_admin()
        response = self.client.get('/logout/')
        self.assertRedirects(response, '/login/', fetch_redirect_response=False)
        self.assertFalse(self.client.get('/api/session/').json()['authenticated'])

    def test_admin_page_requires_login(self):
        response = self.client.get('/admin/')
        self.assertRedirects(response, '/login/', fetch_redirect_response=False)

    def test_moderator_is_sent_back_from_admin_page(self):
        self.login_moderator()
        response = self.client.get('/admin/')
        self.assertRedirects(response, '/', fetch_redirect_response=False)

    def test_new_moderator_can_log_in(self):
        self.login_admin()
        response = self.client.post('/admin/moderators/add/', {
            'name': 'Nadia', 'userId': 'nadia', 'password': 'nadia123',
        })
        self.assertEqual(response.status_code, 200)
        self.client.get('/logout/')

        response = self.client.post('/login/', {'userId': 'nadia', 'password': 'nadia123'})
        self.assertEqual(response.json()['user']['role'], 'moderator')

    def test_changed_admin_credentials_replace_default(self):
        self.login_admin()
        response = self.client.post('/admin/credentials/', {
            'currentUserId': 'admin', 'currentPassword': 'admin-pass',
            'newUserId': 'boss', 'newPassword': 'boss1234', 'confirmPassword': 'boss1234',
        })
        self.assertEqual(response.status_code, 200)
        self.client.get('/logout/')

        self.assertEqual(self.client.post('/login/', {'userId': 'admin', 'password': 'admin-pass'}).status_code, 401)
        self.assertEqual(self.client.post('/login/', {'userId': 'boss', 'password': 'boss1234'}).status_code, 200)

    def test_toggle_feature_and_navigation(self):
        self.login_admin()
        self.client.post('/admin/features/voiceArtist/', {'enabled': 'false'})
        labels = [t['label'] for t in self.client.get('/api/nav/').json()['tabs']]
        self.assertNotIn('Voice Artist', labels)

    def test_unknown_feature_is_rejected(self):
        self.login_admin()
        response = self.client.post('/admin/features/payroll/', {'enabled': 'true'})
        self.assertEqual(response.status_code, 400)
