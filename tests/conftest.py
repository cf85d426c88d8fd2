import pytest

from app import create_app
from config.config import TestConfig
from extensions import db
from models.student_record import StudentRecord
from services.mark_store import MarkStore


class InMemoryMarkStore(MarkStore):
    """Dict-backed store so the grading services can run without a database."""

    def __init__(self):
        self.entries = {}
        self.records = {}

    def add_record(self, roll_no, branch, year, name=None):
        record = StudentRecord(roll_no=roll_no, name=name or roll_no, branch=branch, year=str(year))
        self.records[roll_no] = record
        return record

    def get_mark_entry(self, roll_no, subject):
        return self.entries.get((roll_no, subject))

    def put_mark_entry(self, entry):
        self.entries[(entry.roll_no, entry.subject)] = entry
        return entry

    def list_mark_entries_for_class(self, branch, year):
        return [
            entry for (roll_no, _), entry in sorted(self.entries.items())
            if roll_no in self.records
            and self.records[roll_no].branch == branch
            and self.records[roll_no].year == str(year)
        ]

    def list_mark_entries_for_student(self, roll_no):
        return [entry for (r, _), entry in sorted(self.entries.items()) if r == roll_no]

    def get_student_record(self, roll_no):
        return self.records.get(roll_no)


@pytest.fixture()
def memory_store():
    return InMemoryMarkStore()


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def teacher_client(client):
    client.post("/teacher/signup", json={
        "name": "Asha Rao", "email": "asha@college.edu", "password": "secret"
    })
    response = client.post("/teacher/login", json={"email": "asha@college.edu", "password": "secret"})
    assert response.status_code == 200
    return client
