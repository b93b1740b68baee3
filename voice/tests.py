from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from cms.services import admin_service
from store import collections
from utils.testing import LoginMixin, TEST_CREDENTIALS
from .services import billing_service


class BillingServiceTests(TestCase):
    def setUp(self):
        self.artist = billing_service.add_artist('Tania', '01700000000', '10', 'Studio B')

    def test_rate_parsing(self):
        self.assertEqual(self.artist['perMinuteRate'], 10.0)
        other = billing_service.add_artist('Rafi', '01800000000', '')
        self.assertEqual(other['perMinuteRate'], 0)

    def test_rate_must_be_a_finite_number(self):
        for bad in ('inf', 'nan', 'free'):
            with self.assertRaises(ValidationError):
                billing_service.add_artist('Rafi', '01800000000', bad)
        with self.assertRaises(ValidationError):
            billing_service.update_artist(self.artist['id'], 'Tania', '01700000000', 'Infinity')

        artists = collections.load(collections.VOICE_ARTISTS)
        self.assertEqual(len(artists), 1)
        self.assertEqual(artists[0]['perMinuteRate'], 10.0)

    def test_fractional_minutes_keep_whole_part(self):
        entry = billing_service.add_work('2024-06-03', 'Flood update', self.artist['id'], '2.5', '30')
        self.assertEqual((entry['minute'], entry['second']), (2, 30))
        self.assertEqual(entry['totalBill'], 25.0)

        entry = billing_service.add_work('2024-06-03', 'Flood update', self.artist['id'], 'two', '')
        self.assertEqual((entry['minute'], entry['totalBill']), (0, 0))


    def test_artist_needs_name_and_phone(self):
        with self.assertRaisesMessage(Exception, 'name and phone'):
            billing_service.add_artist('Tania', ' ', '10')
        self.assertEqual(len(collections.load(collections.VOICE_ARTISTS)), 1)

    def test_work_entry_totals(self):
        entry = billing_service.add_work('2024-06-03', 'Flood update', self.artist['id'], '2', '30')
        self.assertEqual(entry['totalMin'], 2.5)
        self.assertEqual(entry['totalBill'], 25.0)
        self.assertEqual(entry['artistName'], 'Tania')

    def test_rate_change_keeps_recorded_bill(self):
        entry = billing_service.add_work('2024-06-03', 'Flood update', self.artist['id'], '2', '30')
        billing_service.update_artist(self.artist['id'], 'Tania', '01700000000', '20')

        stored = collections.load(collections.VOICE_WORK)[0]
        self.assertEqual(stored['totalBill'], entry['totalBill'])
        later = billing_service.add_work('2024-06-04', 'Budget', self.artist['id'], '1', '')
        self.assertEqual(later['totalBill'], 20.0)

    def test_odd_seconds_round_to_cents(self):
        entry = billing_service.add_work('2024-06-03', 'Short', self.artist['id'], '0', '20')
        self.assertEqual(entry['totalMin'], 0.33)
        self.assertEqual(entry['totalBill'], 3.33)

    def test_work_needs_known_artist(self):
        with self.assertRaisesMessage(Exception, 'not found'):
            billing_service.add_work('2024-06-03', 'Flood', 'ghost', '1', '0')
        with self.assertRaisesMessage(Exception, 'required fields'):
            billing_service.add_work('', 'Flood', self.artist['id'], '1', '0')
        self.assertEqual(collections.load(collections.VOICE_WORK), [])


class BillReportTests(SimpleTestCase):
    def test_groups_by_artist_within_month(self):
        entries = [
            {'date': '2024-06-01', 'artistId': 'a', 'artistName': 'Tania', 'totalMin': 2.5, 'totalBill': 25.0},
            {'date': '2024-06-09', 'artistId': 'b', 'artistName': 'Rafi', 'totalMin': 1.0, 'totalBill': 8.0},
            {'date': '2024-06-20', 'artistId': 'a', 'artistName': 'Tania', 'totalMin': 0.33, 'totalBill': 3.3},
            {'date': '2024-07-01', 'artistId': 'a', 'artistName': 'Tania', 'totalMin': 9.0, 'totalBill': 90.0},
        ]
        report = billing_service.bill_report(entries, '2024-06')
        self.assertEqual(report['rows'], [
            {'artistId': 'a', 'name': 'Tania', 'totalMin': 2.83, 'totalBill': 28.3},
            {'artistId': 'b', 'name': 'Rafi', 'totalMin': 1.0, 'totalBill': 8.0},
        ])
        self.assertEqual(report['totalBill'], 36.3)

    def test_empty_month(self):
        self.assertEqual(billing_service.bill_report([], '2024-06'),
                         {'month': '2024-06', 'rows': [], 'totalBill': 0})

    def test_bad_month(self):
        with self.assertRaisesMessage(Exception, 'YYYY-MM'):
            billing_service.bill_report([], '06/2024')


@TEST_CREDENTIALS
class VoiceViewTests(LoginMixin, TestCase):
    def setUp(self):
        self.seed(collections.VOICE_ARTISTS, [
            {'id': 'a1', 'name': 'Tania', 'phone': '017', 'perMinuteRate': 10.0, 'notes': ''},
        ])

    def test_moderator_does_not_see_rates(self):
        self.login_moderator()
        data = self.client.get('/voice-artist/').json()
        self.assertNotIn('perMinuteRate', data['artists'][0])
        self.assertFalse(data['canManageArtists'])

    def test_moderator_records_work_but_cannot_delete_it(self):
        self.login_moderator()
        response = self.client.post('/voice-artist/work/add/', {
            'date': '2024-06-03', 'title': 'Flood', 'artistId': 'a1', 'minute': '2', 'second': '30',
        })
        self.assertEqual(response.json()['entry']['totalBill'], 25.0)

        entry_id = response.json()['entry']['id']
        response = self.client.post(f'/voice-artist/work/{entry_id}/delete/')
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        self.assertEqual(len(collections.load(collections.VOICE_WORK)), 1)

    def test_artist_management_is_admin_only(self):
        self.login_moderator()
        response = self.client.post('/voice-artist/artists/add/', {'name': 'X', 'phone': '1'})
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        self.assertRedirects(self.client.get('/voice-artist/bill/'), '/', fetch_redirect_response=False)

    def test_admin_bill(self):
        self.login_admin()
        self.client.post('/voice-artist/work/add/', {
            'date': '2024-06-03', 'title': 'Flood', 'artistId': 'a1', 'minute': '2', 'second': '30',
        })
        report = self.client.get('/voice-artist/bill/', {'month': '2024-06'}).json()
        self.assertEqual(report['totalBill'], 25.0)

    def test_missing_fields_are_rejected(self):
        self.login_admin()
        response = self.client.post('/voice-artist/artists/add/', {'name': 'X'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['status'], 'error')

    def test_infinite_rate_is_rejected(self):
        self.login_admin()
        response = self.client.post('/voice-artist/artists/add/', {
            'name': 'Rafi', 'phone': '018', 'perMinuteRate': 'inf',
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(collections.load(collections.VOICE_ARTISTS)), 1)
        self.assertNotIn('Infinity', self.client.get('/voice-artist/').content.decode())


    def test_disabled_module_redirects(self):
        admin_service.set_feature('voiceArtist', False)
        self.login_admin()
        self.assertRedirects(self.client.get('/voice-artist/'), '/', fetch_redirect_response=False)
