from django.test import TestCase

from . import collections
from .collections import RecordStore
from .models import StoredCollection


class RecordStoreTests(TestCase):
    def setUp(self):
        self.store = RecordStore(collections.EMPLOYEES)
        self.records = [
            {'id': 'a', 'name': 'Rahim', 'employeeId': 'E1', 'createdAt': '2024-06-01T08:00:00.000Z'},
            {'id': 'b', 'name': 'Karim', 'employeeId': 'E2', 'createdAt': '2024-06-02T08:00:00.000Z'},
        ]

    def test_missing_collection_loads_empty(self):
        self.assertEqual(self.store.load(), [])

    def test_save_all_then_load_returns_same_records(self):
        self.store.save_all(self.records)
        self.assertEqual(self.store.load(), self.records)

    def test_save_all_keeps_unicode_values(self):
        records = [{'id': 'x', 'name': 'স্ক্রিপ্ট লেখক'}]
        self.store.save_all(records)
        self.assertEqual(self.store.load(), records)

    def test_corrupt_blob_loads_empty(self):
        StoredCollection.objects.create(key=collections.EMPLOYEES, payload='{not json')
        with self.assertLogs('store.collections', level='WARNING'):
            self.assertEqual(self.store.load(), [])

    def test_non_list_blob_loads_empty(self):
        StoredCollection.objects.create(key=collections.EMPLOYEES, payload='{"a": 1}')
        with self.assertLogs('store.collections', level='WARNING'):
            self.assertEqual(self.store.load(), [])

    def test_update_changes_only_given_field(self):
        self.store.save_all(self.records)
        updated = self.store.update('a', {'name': 'Rahim Uddin'})

        self.assertEqual(updated['name'], 'Rahim Uddin')
        after = self.store.load()
        self.assertEqual(after[0], {**self.records[0], 'name': 'Rahim Uddin'})
        self.assertEqual(after[1], self.records[1])

    def test_update_never_touches_id_or_created_at(self):
        self.store.save_all(self.records)
        updated = self.store.update('a', {'id': 'zzz', 'createdAt': 'later', 'name': 'X'})

        self.assertEqual(updated['id'], 'a')
        self.assertEqual(updated['createdAt'], '2024-06-01T08:00:00.000Z')

    def test_update_unknown_id_returns_none(self):
        self.store.save_all(self.records)
        self.assertIsNone(self.store.update('nope', {'name': 'X'}))
        self.assertEqual(self.store.load(), self.records)

    def test_remove_unknown_id_is_a_no_op(self):
        self.store.save_all(self.records)
        self.assertFalse(self.store.remove('nope'))
        self.assertEqual(self.store.load(), self.records)

    def test_remove_drops_record(self):
        self.store.save_all(self.records)
        self.assertTrue(self.store.remove('a'))
        self.assertEqual([r['id'] for r in self.store.load()], ['b'])

    def test_add_appends_or_prepends(self):
        self.store.save_all(self.records)
        self.store.add({'id': 'c'})
        self.store.add({'id': 'd'}, prepend=True)
        self.assertEqual([r['id'] for r in self.store.load()], ['d', 'a', 'b', 'c'])

    def test_objects_fall_back_to_default(self):
        self.assertEqual(collections.load_object(collections.SETTINGS, {'x': 1}), {'x': 1})
        collections.save_object(collections.SETTINGS, {'x': 2})
        self.assertEqual(collections.load_object(collections.SETTINGS, {'x': 1}), {'x': 2})

    def test_clear_removes_collection(self):
        self.store.save_all(self.records)
        self.store.clear()
        self.assertEqual(self.store.load(), [])
        self.assertFalse(StoredCollection.objects.filter(key=collections.EMPLOYEES).exists())
