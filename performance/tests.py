import json
from unittest import mock

import requests
from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase, override_settings

from store import collections
from utils.testing import LoginMixin, TEST_CREDENTIALS
from .records import clean_changes, new_entry
from .services import entry_filter, monthly_report
from .services.youtube_service import (
    InvalidVideoUrl, VideoNotFound, YouTubeUpstreamError, extract_video_id, fetch_video_info,
)


def entry(**fields):
    base = {'id': fields.get('title', 'x'), 'date': '', 'link': '', 'title': '',
            'contentStatus': 'writing', 'createdAt': '2024-06-10T10:00:00.000Z'}
    base.update(fields)
    return base


class EntryFilterTests(SimpleTestCase):
    def setUp(self):
        self.entries = [
            entry(title='Flood in Sylhet', date='2024-06-02', scriptWriter='Rahim', views=900, engagement=5),
            entry(title='Budget talk', date='2024-06-05', scriptWriter='Karim', views=100, engagement=50,
                  link='https://youtu.be/abc', contentStatus='published'),
            entry(title='Cricket', date='2024-05-28', scriptWriter='Rahim', views=None, engagement=None),
            entry(title='Draft', date=''),
        ]

    def titles(self, result):
        return [e['title'] for e in result]

    def test_search_matches_title_or_link(self):
        self.assertEqual(self.titles(entry_filter.filter_entries(self.entries, search='FLOOD')),
                         ['Flood in Sylhet'])
        self.assertEqual(self.titles(entry_filter.filter_entries(self.entries, search='youtu.be')),
                         ['Budget talk'])

    def test_date_range_is_inclusive_and_keeps_undated(self):
        result = entry_filter.filter_entries(self.entries, date_start='2024-06-02', date_end='2024-06-05',
                                             sort_by='date-asc')
        self.assertEqual(self.titles(result), ['Draft', 'Flood in Sylhet', 'Budget talk'])

    def test_contributor_and_status_filters(self):
        result = entry_filter.filter_entries(self.entries, contributors={'scriptWriter': 'Rahim'})
        self.assertEqual(self.titles(result), ['Flood in Sylhet', 'Cricket'])

        result = entry_filter.filter_entries(self.entries, content_status='published')
        self.assertEqual(self.titles(result), ['Budget talk'])

        result = entry_filter.filter_entries(self.entries, contributors={'scriptWriter': 'all'})
        self.assertEqual(len(result), 4)

    def test_filtered_result_is_subset(self):
        result = entry_filter.filter_entries(self.entries, search='a', sort_by='views-desc')
        for item in result:
            self.assertIn(item, self.entries)

    def test_missing_metrics_sort_as_zero(self):
        result = entry_filter.sort_entries(self.entries, 'views-asc')
        self.assertEqual(self.titles(result)[-1], 'Flood in Sylhet')
        self.assertEqual(self.titles(entry_filter.sort_entries(self.entries, 'engagement-desc'))[0],
                         'Budget talk')

    def test_unknown_sort_keeps_order(self):
        self.assertEqual(entry_filter.sort_entries(self.entries, 'bogus'), self.entries)

    def test_filter_options_are_unique_non_empty(self):
        options = entry_filter.filter_options(self.entries)
        self.assertEqual(options['scriptWriter'], ['Rahim', 'Karim'])
        self.assertEqual(options['videoEditor'], [])

    def test_has_active_filters(self):
        self.assertFalse(entry_filter.has_active_filters('', '', '', {'scriptWriter': 'all'}, 'all'))
        self.assertTrue(entry_filter.has_active_filters('', '2024-06-01', '', {}, 'all'))


class RecordTests(SimpleTestCase):
    def test_new_entry_defaults(self):
        created = new_entry()
        self.assertEqual(created['contentStatus'], 'writing')
        self.assertEqual(created['title'], '')
        self.assertTrue(created['createdAt'].endswith('Z'))

    def test_clean_changes(self):
        changes = clean_changes({'views': '1200', 'reach': '', 'engagement': '2.5', 'title': '  Hi '})
        self.assertEqual(changes, {'views': 1200, 'reach': None, 'engagement': 2.5, 'title': 'Hi'})

    def test_unknown_status_is_rejected(self):
        with self.assertRaisesMessage(Exception, 'Unknown content status'):
            clean_changes({'contentStatus': 'lost'})

    def test_metrics_must_be_finite_numbers(self):
        for bad in ('nan', 'inf', '-Infinity', 'abc'):
            with self.assertRaises(ValidationError):
                clean_changes({'views': bad})



@override_settings(TIME_ZONE='Asia/Dhaka')
class MonthlyReportTests(SimpleTestCase):
    def setUp(self):
        self.entries = [
            entry(title='a', scriptWriter='Rahim', videoEditor='Sumi', createdAt='2024-06-03T10:00:00.000Z'),
            entry(title='b', scriptWriter='Karim', createdAt='2024-06-04T10:00:00.000Z'),
            entry(title='c', scriptWriter='Rahim', seo='  ', createdAt='2024-06-05T10:00:00.000Z'),
            entry(title='d', scriptWriter='Karim', createdAt='2024-05-20T10:00:00.000Z'),
            # 20:00 UTC on May 31 is already June 1 in Dhaka
            entry(title='e', scriptWriter='Salma', createdAt='2024-05-31T20:00:00.000Z'),
        ]

    def test_month_bucket_uses_project_time_zone(self):
        self.assertEqual(monthly_report.entry_month('2024-05-31T20:00:00.000Z'), '2024-06')
        self.assertIsNone(monthly_report.entry_month('garbage'))
        self.assertEqual(monthly_report.available_months(self.entries), ['2024-06', '2024-05'])

    def test_report_counts_and_order(self):
        report = monthly_report.monthly_report(self.entries, '2024-06')
        self.assertEqual([c['field'] for c in report], ['scriptWriter', 'videoEditor'])
        writers = report[0]
        self.assertEqual(writers['categoryBengali'], 'স্ক্রিপ্ট লেখক')
        self.assertEqual(writers['stats'], [
            {'name': 'Rahim', 'count': 2},
            {'name': 'Karim', 'count': 1},
            {'name': 'Salma', 'count': 1},
        ])

    def test_report_counts_add_up(self):
        monthly = monthly_report.entries_for_month(self.entries, '2024-06')
        for category in monthly_report.monthly_report(self.entries, '2024-06'):
            filled = [e for e in monthly if (e.get(category['field']) or '').strip()]
            self.assertEqual(sum(s['count'] for s in category['stats']), len(filled))

    def test_rankings_keep_top_two_and_empty_categories(self):
        ranking = monthly_report.rankings(self.entries, '2024-06')
        self.assertEqual([r['field'] for r in ranking],
                         ['scriptWriter', 'videoEditor', 'mojoReporter', 'jelaReporter'])
        self.assertEqual([s['name'] for s in ranking[0]['ranking']], ['Rahim', 'Karim'])
        self.assertEqual(ranking[2]['ranking'], [])

    def test_month_label(self):
        self.assertEqual(monthly_report.month_label('2024-06'), 'June 2024')


def api_response(items):
    response = mock.Mock()
    response.json.return_value = {'items': items}
    response.raise_for_status.return_value = None
    return response


@override_settings(YOUTUBE_API_KEY='test-key', YOUTUBE_ACCESS_TOKEN='')
class YouTubeServiceTests(SimpleTestCase):
    def test_extract_video_id(self):
        self.assertEqual(extract_video_id('https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=5'), 'dQw4w9WgXcQ')
        self.assertEqual(extract_video_id('https://youtu.be/dQw4w9WgXcQ'), 'dQw4w9WgXcQ')
        self.assertIsNone(extract_video_id('https://vimeo.com/123'))
        self.assertIsNone(extract_video_id('not a url'))

    def test_missing_or_bad_url(self):
        with self.assertRaises(InvalidVideoUrl):
            fetch_video_info('')
        with self.assertRaises(InvalidVideoUrl):
            fetch_video_info('https://example.com/watch')

    @mock.patch('performance.services.youtube_service.youtube_session')
    def test_fetch_title_and_views(self, session):
        session.return_value.get.return_value = api_response(
            [{'snippet': {'title': 'Flood update'}, 'statistics': {'viewCount': '1234'}}]
        )
        self.assertEqual(fetch_video_info('https://youtu.be/abc123'), {'title': 'Flood update', 'views': 1234})
        params = session.return_value.get.call_args.kwargs['params']
        self.assertEqual(params['id'], 'abc123')
        self.assertEqual(params['key'], 'test-key')

    @mock.patch('performance.services.youtube_service.youtube_session')
    def test_unknown_video(self, session):
        session.return_value.get.return_value = api_response([])
        with self.assertRaises(VideoNotFound):
            fetch_video_info('https://youtu.be/abc123')

    @mock.patch('performance.services.youtube_service.youtube_session')
    def test_upstream_failure(self, session):
        session.return_value.get.side_effect = requests.ConnectionError('down')
        with self.assertLogs('performance.services.youtube_service', 'ERROR'):
            with self.assertRaises(YouTubeUpstreamError):
                fetch_video_info('https://youtu.be/abc123')

    @override_settings(YOUTUBE_API_KEY='')
    def test_not_connected(self):
        with self.assertRaisesMessage(YouTubeUpstreamError, 'not connected'):
            fetch_video_info('https://youtu.be/abc123')


@TEST_CREDENTIALS
class PerformanceViewTests(LoginMixin, TestCase):
    def test_dashboard_requires_login(self):
        response = self.client.get('/')
        self.assertRedirects(response, '/login/', fetch_redirect_response=False)

    def test_add_and_edit_entry(self):
        self.login_moderator()
        created = self.client.post('/entries/add/').json()['entry']
        response = self.client.post(f'/entries/{created["id"]}/edit/', {'views': '500', 'seo': 'Tania'})
        self.assertEqual(response.status_code, 200)

        stored = collections.load(collections.ENTRIES)[0]
        self.assertEqual(stored['views'], 500)
        self.assertEqual(stored['seo'], 'Tania')
        self.assertEqual(stored['createdAt'], created['createdAt'])

    def test_new_entries_are_prepended(self):
        self.login_admin()
        first = self.client.post('/entries/add/').json()['entry']
        second = self.client.post('/entries/add/').json()['entry']
        ids = [e['id'] for e in collections.load(collections.ENTRIES)]
        self.assertEqual(ids, [second['id'], first['id']])

    def test_moderator_cannot_delete(self):
        self.seed(collections.ENTRIES, [entry(id='e1', title='keep me')])
        self.login_moderator()
        response = self.client.post('/entries/e1/delete/')
        self.assertRedirects(response, '/', fetch_redirect_response=False)
        self.assertEqual(len(collections.load(collections.ENTRIES)), 1)

    def test_admin_deletes(self):
        self.seed(collections.ENTRIES, [entry(id='e1', title='gone')])
        self.login_admin()
        self.client.post('/entries/e1/delete/')
        self.assertEqual(collections.load(collections.ENTRIES), [])

    def test_dashboard_filters(self):
        self.seed(collections.ENTRIES, [
            entry(id='e1', title='Flood', scriptWriter='Rahim'),
            entry(id='e2', title='Budget', scriptWriter='Karim'),
        ])
        self.login_admin()
        data = self.client.get('/', {'scriptWriter': 'Karim'}).json()
        self.assertEqual([e['id'] for e in data['entries']], ['e2'])
        self.assertTrue(data['hasActiveFilters'])
        self.assertEqual(data['total'], 2)

    @mock.patch('performance.views.fetch_video_info')
    def test_link_update_enriches_title_and_views(self, fetch):
        fetch.return_value = {'title': 'From YouTube', 'views': 42}
        self.seed(collections.ENTRIES, [entry(id='e1', title='old')])
        self.login_moderator()

        self.client.post('/entries/e1/link/', {'link': 'https://youtu.be/abc'})
        stored = collections.load(collections.ENTRIES)[0]
        self.assertEqual((stored['link'], stored['title'], stored['views']),
                         ('https://youtu.be/abc', 'From YouTube', 42))

    @mock.patch('performance.views.fetch_video_info')
    def test_failed_lookup_keeps_link_and_old_values(self, fetch):
        fetch.side_effect = VideoNotFound('Video not found')
        self.seed(collections.ENTRIES, [entry(id='e1', title='old', views=7)])
        self.login_moderator()

        data = self.client.post('/entries/e1/link/', {'link': 'https://youtu.be/gone'}).json()
        self.assertEqual(data['status'], 'warning')
        stored = collections.load(collections.ENTRIES)[0]
        self.assertEqual((stored['link'], stored['title'], stored['views']),
                         ('https://youtu.be/gone', 'old', 7))

    @mock.patch('performance.views.fetch_video_info')
    def test_non_youtube_link_is_not_looked_up(self, fetch):
        self.seed(collections.ENTRIES, [entry(id='e1')])
        self.login_moderator()
        self.client.post('/entries/e1/link/', {'link': 'https://facebook.com/post/1'})
        fetch.assert_not_called()

    def test_video_info_status_codes(self):
        self.login_moderator()
        response = self.client.post('/api/youtube/video-info', {'url': ''})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'error': 'URL is required'})

        for url in (123, ['https://youtu.be/abc'], {'href': 'https://youtu.be/abc'}):
            response = self.client.post('/api/youtube/video-info', json.dumps({'url': url}),
                                        content_type='application/json')
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json(), {'error': 'Invalid YouTube URL'})

    def test_bad_metric_leaves_entry_unchanged(self):
        self.seed(collections.ENTRIES, [entry(id='e1', title='Flood', views=7)])
        self.login_admin()

        for bad in ('nan', 'inf', 'abc'):
            response = self.client.post('/entries/e1/edit/', {'views': bad, 'title': 'Changed'})
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()['status'], 'error')

        stored = collections.load(collections.ENTRIES)[0]
        self.assertEqual((stored['title'], stored['views']), ('Flood', 7))
        self.assertNotIn('NaN', self.client.get('/').content.decode())

    def test_blank_metric_clears_it(self):
        self.seed(collections.ENTRIES, [entry(id='e1', views=7)])
        self.login_admin()
        self.client.post('/entries/e1/edit/', {'views': ''})
        self.assertIsNone(collections.load(collections.ENTRIES)[0]['views'])


    def test_rankings_admin_only(self):
        self.login_moderator()
        self.assertRedirects(self.client.get('/rankings/'), '/', fetch_redirect_response=False)

    def test_report_rejects_bad_month(self):
        self.login_admin()
        self.assertEqual(self.client.get('/rankings/report/', {'month': 'June'}).status_code, 400)
