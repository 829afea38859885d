"""Shared fixtures: in-memory storage, persistence and exam stores."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from gradetrack.core.database import build_engine, build_session_factory, init_db
from gradetrack.core.exceptions import PersistenceError
from gradetrack.schemas.exam import Exam, ExamDraft
from gradetrack.services.exam import ExamStore
from gradetrack.services.persistence import ExamPersistence
from gradetrack.services.seed import SEED_EXAMS
from gradetrack.services.storage import KeyValueStorage

STORAGE_KEY = "test:exams"
FIXED_NOW = datetime(2025, 11, 5, 9, 30)


class FailingStorage:
    """Storage whose every operation fails."""

    def get_item(self, key):
        raise PersistenceError("disk unavailable")

    def set_item(self, key, value):
        raise PersistenceError("quota exceeded")

    def remove_item(self, key):
        raise PersistenceError("disk unavailable")


class UnreadableStorage:
    """Wraps real storage; reads fail, writes go through and are counted."""

    def __init__(self, storage):
        self.storage = storage
        self.writes = 0

    def get_item(self, key):
        raise PersistenceError("read timed out")

    def set_item(self, key, value):
        self.writes += 1
        self.storage.set_item(key, value)

    def remove_item(self, key):
        self.storage.remove_item(key)


def make_draft(**overrides) -> ExamDraft:
    data = {
        "title": "Quiz 1",
        "year": "YR 1",
        "date_due": "November 25, 2025",
        "weight": "20%",
        "max_points": 50,
        "passing_threshold": 60,
        "status": "Not Attempted",
        "course": "Mathematics",
        "description": "Chapter 1 to 3",
        "visible": True,
    }
    data.update(overrides)
    return ExamDraft(**data)


def make_exam(**overrides) -> Exam:
    data = make_draft().model_dump()
    data.update(id="exam_test0001", date_created="November 01, 2025")
    data.update(overrides)
    return Exam(**data)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def storage(engine) -> KeyValueStorage:
    return KeyValueStorage(build_session_factory(engine))


@pytest.fixture
def persistence(storage) -> ExamPersistence:
    return ExamPersistence(storage, key=STORAGE_KEY)


@pytest.fixture
def store(persistence) -> ExamStore:
    """Initialized store with no seed and a fixed clock."""
    store = ExamStore(persistence, seed=(), clock=lambda: FIXED_NOW)
    store.initialize()
    return store


@pytest.fixture
def seeded_store(persistence) -> ExamStore:
    return ExamStore(persistence, seed=SEED_EXAMS, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(seeded_store):
    from gradetrack.main import create_application

    app = create_application(store=seeded_store)
    with TestClient(app) as client:
        yield client
