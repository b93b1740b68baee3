from django.test import SimpleTestCase, TestCase

from cms.services import admin_service
from store import collections
from utils.testing import LoginMixin, TEST_CREDENTIALS
from .services import attendance_service, directory_service
from .services.office_hours import parse_clock, total_hours


class OfficeHoursTests(SimpleTestCase):
    def test_twelve_hour_day_shift(self):
        self.assertEqual(total_hours('08:00 am', '05:00 pm'), '9h 0m')

    def test_overnight_shift_wraps(self):
        self.assertEqual(total_hours('10:00 pm', '06:00 am'), '8h 0m')

    def test_mixed_formats(self):
        self.assertEqual(total_hours('9:15', '5:45 PM'), '8h 30m')

    def test_noon_and_midnight(self):
        self.assertEqual(parse_clock('12:00 pm'), (12, 0))
        self.assertEqual(parse_clock('12:30am'), (0, 30))

    def test_empty_and_invalid(self):
        self.assertEqual(total_hours('', '05:00 pm'), '-')
        self.assertEqual(total_hours('morning', '05:00 pm'), 'Invalid time')
        self.assertEqual(total_hours('25:00', '05:00'), 'Invalid time')


class WorkingHoursTests(SimpleTestCase):
    def test_full_day_is_present(self):
        hours = attendance_service.working_hours('09:00', '17:00')
        self.assertEqual(hours, 8.0)
        self.assertEqual(attendance_service.default_status(hours), 'Present')

    def test_short_day_is_half_day(self):
        hours = attendance_service.working_hours('09:00', '10:30')
        self.assertEqual(hours, 1.5)
        self.assertEqual(attendance_service.default_status(hours), 'Half-day')

    def test_between_four_and_eight_is_late(self):
        self.assertEqual(attendance_service.default_status(attendance_service.working_hours('10:00', '16:00')),
                         'Late')

    def test_zero_missing_or_reversed(self):
        self.assertEqual(attendance_service.working_hours('09:00', '09:00'), 0)
        self.assertEqual(attendance_service.default_status(0), 'Absent')
        self.assertEqual(attendance_service.working_hours('09:00', ''), 0)
        self.assertEqual(attendance_service.working_hours('17:00', '09:00'), 0)
        self.assertEqual(attendance_service.working_hours('nine', '17:00'), 0)


class AttendanceServiceTests(TestCase):
    def setUp(self):
        collections.save_all(collections.EMPLOYEES, [
            {'id': 'e1', 'name': 'Rahim', 'employeeId': 'DOB-01', 'designation': 'Editor'},
        ])

    def test_first_edit_creates_snapshot_record(self):
        record = attendance_service.update_attendance('e1', '2024-06-03', 'inTime', '09:00')
        self.assertEqual(record['employeeName'], 'Rahim')
        self.assertEqual(record['employeeIdNumber'], 'DOB-01')
        self.assertEqual(record['status'], 'Absent')
        self.assertEqual(len(collections.load(collections.ATTENDANCE)), 1)

    def test_one_record_per_employee_and_day(self):
        attendance_service.update_attendance('e1', '2024-06-03', 'inTime', '09:00')
        record = attendance_service.update_attendance('e1', '2024-06-03', 'outTime', '17:00')
        self.assertEqual(record['workingHours'], 8.0)
        self.assertEqual(record['status'], 'Present')
        self.assertEqual(len(collections.load(collections.ATTENDANCE)), 1)

    def test_manual_status_sticks_until_time_changes(self):
        attendance_service.update_attendance('e1', '2024-06-03', 'inTime', '09:00')
        attendance_service.update_attendance('e1', '2024-06-03', 'outTime', '17:00')
        record = attendance_service.update_attendance('e1', '2024-06-03', 'status', 'Leave')
        self.assertEqual(record['status'], 'Leave')
        self.assertEqual(record['workingHours'], 8.0)

        record = attendance_service.update_attendance('e1', '2024-06-03', 'outTime', '10:00')
        self.assertEqual(record['status'], 'Half-day')

    def test_status_on_new_day_sets_it_directly(self):
        record = attendance_service.update_attendance('e1', '2024-06-04', 'status', 'Leave')
        self.assertEqual((record['status'], record['workingHours']), ('Leave', 0))

    def test_rejects_bad_input(self):
        with self.assertRaisesMessage(Exception, 'Unknown attendance status'):
            attendance_service.update_attendance('e1', '2024-06-03', 'status', 'Sick')
        with self.assertRaisesMessage(Exception, 'Employee not found'):
            attendance_service.update_attendance('ghost', '2024-06-03', 'inTime', '09:00')
        with self.assertRaisesMessage(Exception, 'YYYY-MM-DD'):
            attendance_service.update_attendance('e1', 'today', 'inTime', '09:00')
        self.assertEqual(collections.load(collections.ATTENDANCE), [])

    def test_month_view(self):
        attendance_service.update_attendance('e1', '2024-06-03', 'inTime', '09:00')
        attendance_service.update_attendance('e1', '2024-07-01', 'inTime', '09:00')
        records = attendance_service.records_for_month(collections.load(collections.ATTENDANCE), '2024-06')
        self.assertEqual([r['date'] for r in records], ['2024-06-03'])


class DirectorySearchTests(SimpleTestCase):
    def setUp(self):
        self.people = [
            {'name': 'Rahim Uddin', 'employeeId': 'DOB-01', 'designation': 'Editor', 'officeShift': 'Day'},
            {'name': 'Karim', 'employeeId': 'DOB-02', 'designation': 'Reporter', 'officeShift': 'Night'},
            {'name': 'Salma', 'employeeId': 'X-9', 'designation': 'Editor', 'officeShift': 'Night'},
        ]

    def test_search_name_or_employee_id(self):
        names = [p['name'] for p in directory_service.search_people(self.people, search='dob')]
        self.assertEqual(names, ['Rahim Uddin', 'Karim'])
        names = [p['name'] for p in directory_service.search_people(self.people, search='UDDIN')]
        self.assertEqual(names, ['Rahim Uddin'])

    def test_designation_and_shift(self):
        result = directory_service.search_people(self.people, designation='Editor', shift='Night')
        self.assertEqual([p['name'] for p in result], ['Salma'])

    def test_distinct(self):
        self.assertEqual(directory_service.distinct(self.people, 'designation'), ['Editor', 'Reporter'])


@TEST_CREDENTIALS
class StaffViewTests(LoginMixin, TestCase):
    def test_employees_are_admin_only(self):
        self.login_moderator()
        self.assertRedirects(self.client.get('/employees/'), '/', fetch_redirect_response=False)
        self.assertRedirects(self.client.post('/jela-reporters/add/'), '/', fetch_redirect_response=False)

    def test_employee_add_edit_and_total_hours(self):
        self.login_admin()
        created = self.client.post('/employees/add/').json()['employee']
        self.assertEqual(created['name'], '')

        data = self.client.post(f'/employees/{created["id"]}/edit/', {
            'name': ' Rahim ', 'officeInTime': '08:00 am', 'officeOutTime': '05:00 pm', 'bogus': 'x',
        }).json()
        self.assertEqual(data['employee']['name'], 'Rahim')
        self.assertEqual(data['employee']['totalHours'], '9h 0m')
        self.assertNotIn('bogus', collections.load(collections.EMPLOYEES)[0])

        listing = self.client.get('/employees/', {'q': 'rah'}).json()
        self.assertEqual(listing['count'], 1)

    def test_edit_unknown_reporter(self):
        self.login_admin()
        response = self.client.post('/jela-reporters/nope/edit/', {'name': 'X'})
        self.assertEqual(response.status_code, 404)

    def test_reporter_delete(self):
        self.login_admin()
        reporter = self.client.post('/jela-reporters/add/').json()['reporter']
        self.client.post(f'/jela-reporters/{reporter["id"]}/delete/')
        self.assertEqual(collections.load(collections.JELA_REPORTERS), [])

    def test_moderator_records_attendance(self):
        self.seed(collections.EMPLOYEES, [{'id': 'e1', 'name': 'Rahim', 'employeeId': 'DOB-01'}])
        self.login_moderator()
        response = self.client.post('/attendance/update/', {
            'employeeId': 'e1', 'date': '2024-06-03', 'field': 'inTime', 'value': '09:00',
        })
        self.assertEqual(response.status_code, 200)

        sheet = self.client.get('/attendance/', {'date': '2024-06-03'}).json()['sheet']
        self.assertEqual(sheet[0]['record']['inTime'], '09:00')

    def test_disabled_attendance_redirects(self):
        admin_service.set_feature('attendance', False)
        self.login_admin()
        self.assertRedirects(self.client.get('/attendance/'), '/', fetch_redirect_response=False)

    def test_bad_month(self):
        self.login_admin()
        self.assertEqual(self.client.get('/attendance/month/', {'month': '2024-6'}).status_code, 400)
