from django.test import TestCase

from cms.services import admin_service
from store import collections
from utils.testing import LoginMixin, TEST_CREDENTIALS
from .services import board_service, schedule_service


class BoardServiceTests(TestCase):
    def test_post_type_name_is_trimmed_and_required(self):
        post_type = board_service.add_post_type('  Breaking News ')
        self.assertEqual(post_type['name'], 'Breaking News')
        self.assertEqual(post_type['jobs'], [])
        with self.assertRaisesMessage(Exception, 'Post Type name is required'):
            board_service.add_post_type('   ')

    def test_jobs_keep_their_order(self):
        post_type = board_service.add_post_type('Package')
        board_service.add_job(post_type['id'], 'Script')
        board_service.add_job(post_type['id'], 'Voice')
        updated = board_service.add_job(post_type['id'], 'Edit')
        self.assertEqual([j['name'] for j in updated['jobs']], ['Script', 'Voice', 'Edit'])

    def test_rename_and_delete_job(self):
        post_type = board_service.add_post_type('Package')
        job = board_service.add_job(post_type['id'], 'Scrpt')['jobs'][0]
        board_service.add_job(post_type['id'], 'Voice')

        updated = board_service.rename_job(post_type['id'], job['id'], 'Script')
        self.assertEqual(updated['jobs'][0], {'id': job['id'], 'name': 'Script'})

        updated = board_service.delete_job(post_type['id'], job['id'])
        self.assertEqual([j['name'] for j in updated['jobs']], ['Voice'])

    def test_job_on_unknown_post_type(self):
        self.assertIsNone(board_service.add_job('ghost', 'Script'))

    def test_note_requires_both_fields(self):
        with self.assertRaisesMessage(Exception, "'To' and 'Message'"):
            board_service.add_note('Editors', ' ', 'admin')
        note = board_service.add_note(' Editors ', ' Cut the intro ', 'admin')
        self.assertEqual((note['to'], note['message'], note['createdBy']), ('Editors', 'Cut the intro', 'admin'))

    def test_schedule_requires_category(self):
        with self.assertRaisesMessage(Exception, 'Video Category is required'):
            schedule_service.add_schedule({'channelYT': 'DOB News'})
        schedule = schedule_service.add_schedule({'videoCategory': 'Sports', 'uploadTime': '8:00 pm'})
        self.assertEqual(schedule['pageFB'], '')
        self.assertNotIn('createdAt', schedule)


@TEST_CREDENTIALS
class WorkflowViewTests(LoginMixin, TestCase):
    def test_moderator_adds_note_signed_with_user_id(self):
        self.login_moderator()
        note = self.client.post('/work-flow/notes/add/', {'to': 'Editors', 'message': 'Ready by 5'}).json()['note']
        self.assertEqual(note['createdBy'], 'DOB')

        response = self.client.post(f'/work-flow/notes/{note["id"]}/delete/')
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        self.assertEqual(len(collections.load(collections.WORK_NOTES)), 1)

    def test_moderator_cannot_change_post_types(self):
        self.login_moderator()
        response = self.client.post('/work-flow/post-types/add/', {'name': 'Package'})
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        self.assertFalse(self.client.get('/work-flow/').json()['canEdit'])

    def test_admin_builds_board(self):
        self.login_admin()
        post_type = self.client.post('/work-flow/post-types/add/', {'name': 'Package'}).json()['postType']
        response = self.client.post(f'/work-flow/post-types/{post_type["id"]}/jobs/add/', {'name': 'Script'})
        self.assertEqual(response.json()['postType']['jobs'][0]['name'], 'Script')

        response = self.client.post('/work-flow/post-types/ghost/jobs/add/', {'name': 'Script'})
        self.assertEqual(response.status_code, 404)

    def test_upload_schedule_crud(self):
        self.login_admin()
        schedule = self.client.post('/video-upload-time/add/', {
            'videoCategory': 'Sports', 'channelYT': 'DOB News', 'uploadTime': '8:00 pm',
        }).json()['schedule']
        response = self.client.post(f'/video-upload-time/{schedule["id"]}/edit/', {'videoCategory': ''})
        self.assertEqual(response.status_code, 400)

        self.client.post(f'/video-upload-time/{schedule["id"]}/delete/')
        self.assertEqual(collections.load(collections.UPLOAD_SCHEDULES), [])

    def test_moderator_reads_schedule_only(self):
        self.login_moderator()
        self.assertEqual(self.client.get('/video-upload-time/').status_code, 200)
        response = self.client.post('/video-upload-time/add/', {'videoCategory': 'Sports'})
        self.assertRedirects(response, '/', fetch_redirect_response=False)

    def test_disabled_modules_redirect(self):
        admin_service.set_feature('workFlow', False)
        admin_service.set_feature('videoUploadTime', False)
        self.login_admin()
        self.assertRedirects(self.client.get('/work-flow/'), '/', fetch_redirect_response=False)
        self.assertRedirects(self.client.get('/video-upload-time/'), '/', fetch_redirect_response=False)
