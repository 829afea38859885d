"""Key-value storage and exam persistence tests."""

import json

from gradetrack.services.persistence import ExamPersistence
from gradetrack.services.seed import SEED_EXAMS

from .conftest import STORAGE_KEY, FailingStorage, make_exam


class TestKeyValueStorage:
    def test_missing_key_returns_none(self, storage):
        assert storage.get_item("nothing-here") is None

    def test_set_then_get(self, storage):
        storage.set_item("k", "v1")
        assert storage.get_item("k") == "v1"

    def test_set_overwrites(self, storage):
        storage.set_item("k", "v1")
        storage.set_item("k", "v2")
        assert storage.get_item("k") == "v2"

    def test_remove_item(self, storage):
        storage.set_item("k", "v1")
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_remove_missing_key_is_noop(self, storage):
        storage.remove_item("never-set")
        assert storage.get_item("never-set") is None


class TestExamPersistence:
    def test_round_trip_preserves_order_and_values(self, persistence):
        exams = list(SEED_EXAMS)
        persistence.save(exams)
        assert persistence.load() == exams

    def test_saved_payload_uses_wire_field_names(self, persistence, storage):
        persistence.save([make_exam()])
        payload = json.loads(storage.get_item(STORAGE_KEY))
        assert set(payload[0]) == {
            "id", "title", "year", "dateCreated", "dateDue", "weight", "maxPoints",
            "passingThreshold", "status", "course", "description", "visible",
        }

    def test_save_replaces_previous_snapshot(self, persistence):
        persistence.save(list(SEED_EXAMS))
        persistence.save([make_exam()])
        assert persistence.load() == [make_exam()]

    def test_empty_collection_round_trip(self, persistence):
        persistence.save([])
        assert persistence.load() == []

    def test_missing_key_loads_empty(self, persistence):
        assert persistence.load() == []

    def test_invalid_json_loads_empty(self, persistence, storage):
        storage.set_item(STORAGE_KEY, "{not json")
        assert persistence.load() == []

    def test_object_payload_loads_empty(self, persistence, storage):
        storage.set_item(STORAGE_KEY, json.dumps({"id": "1", "title": "Exam"}))
        assert persistence.load() == []

    def test_malformed_elements_load_empty(self, persistence, storage):
        storage.set_item(STORAGE_KEY, json.dumps([{"id": "1"}, "junk"]))
        assert persistence.load() == []

    def test_read_failure_loads_empty(self):
        persistence = ExamPersistence(FailingStorage(), key=STORAGE_KEY)
        assert persistence.load() == []

    def test_write_failure_is_swallowed(self):
        persistence = ExamPersistence(FailingStorage(), key=STORAGE_KEY)
        persistence.save([make_exam()])
