"""Clear the stored exam collection so the next start uses the seed exams."""
from gradetrack.core.config import settings
from gradetrack.core.database import SessionLocal, init_db
from gradetrack.services.persistence import ExamPersistence
from gradetrack.services.storage import KeyValueStorage

init_db()
storage = KeyValueStorage(SessionLocal)
persistence = ExamPersistence(storage, key=settings.STORAGE_KEY)

exams = persistence.load()
print(f"Stored exams under '{settings.STORAGE_KEY}': {len(exams)}")

storage.remove_item(settings.STORAGE_KEY)
print("Stored collection removed. Seed exams will be used on next start.")
