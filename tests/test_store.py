"""
Tests for the fingerprint stores.
"""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from zte_sms.config import STORE_VALUE_NAME
from zte_sms.sms.store import JsonFileStore, MemoryStore, PersistenceSlot, RegistryStore


class TestMemoryStore(unittest.TestCase):
    def test_get_missing(self):
        self.assertIsNone(MemoryStore().get(STORE_VALUE_NAME))

    def test_set_then_get(self):
        store = MemoryStore()
        store.set(STORE_VALUE_NAME, "ABC")
        self.assertEqual(store.get(STORE_VALUE_NAME), "ABC")

    def test_initial_values_copied(self):
        initial = {STORE_VALUE_NAME: "ABC"}
        store = MemoryStore(initial)
        store.set(STORE_VALUE_NAME, "DEF")
        self.assertEqual(initial[STORE_VALUE_NAME], "ABC")


class TestJsonFileStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "ZTEStatus" / "state.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_reads_none(self):
        self.assertIsNone(JsonFileStore(self.path).get(STORE_VALUE_NAME))

    def test_set_creates_parents(self):
        JsonFileStore(self.path).set(STORE_VALUE_NAME, "ABC")
        self.assertTrue(self.path.exists())
        self.assertEqual(json.loads(self.path.read_text()), {STORE_VALUE_NAME: "ABC"})

    def test_persists_across_instances(self):
        JsonFileStore(self.path).set(STORE_VALUE_NAME, "ABC")
        self.assertEqual(JsonFileStore(self.path).get(STORE_VALUE_NAME), "ABC")

    def test_keeps_other_values(self):
        store = JsonFileStore(self.path)
        store.set("Other", "1")
        store.set(STORE_VALUE_NAME, "ABC")
        self.assertEqual(store.get("Other"), "1")

    def test_corrupt_file_reads_none(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json")
        store = JsonFileStore(self.path)
        with self.assertLogs("zte-sms", level="WARNING"):
            self.assertIsNone(store.get(STORE_VALUE_NAME))

    def test_corrupt_file_is_overwritten(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2]")
        store = JsonFileStore(self.path)
        store.set(STORE_VALUE_NAME, "ABC")
        self.assertEqual(store.get(STORE_VALUE_NAME), "ABC")

    def test_non_string_value_reads_none(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({STORE_VALUE_NAME: 5}))
        self.assertIsNone(JsonFileStore(self.path).get(STORE_VALUE_NAME))


class TestRegistryStore(unittest.TestCase):
    @unittest.skipIf(sys.platform == "win32", "registry is available on Windows")
    def test_unavailable_off_windows(self):
        with self.assertRaises(OSError):
            RegistryStore()


class TestPersistenceSlot(unittest.TestCase):
    def test_stores_satisfy_interface(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            for store in (MemoryStore(), JsonFileStore(Path(tmpdir) / "s.json")):
                self.assertIsInstance(store, PersistenceSlot)

    def test_plain_object_does_not(self):
        self.assertNotIsInstance(object(), PersistenceSlot)
