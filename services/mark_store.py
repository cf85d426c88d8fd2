"""Storage collaborator for mark entries and student records.

The grading services only ever talk to a ``MarkStore``; the application
wires in ``SqlAlchemyMarkStore`` and tests can pass any object with the
same methods.
"""
import logging
from abc import ABC, abstractmethod

from models.mark_entry import MarkEntry
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)


class MarkStore(ABC):

    @abstractmethod
    def get_mark_entry(self, roll_no, subject):
        """Return the entry for (roll_no, subject) or None."""

    @abstractmethod
    def put_mark_entry(self, entry):
        """Insert ``entry`` or replace the stored one with the same (roll_no, subject)."""

    @abstractmethod
    def list_mark_entries_for_class(self, branch, year):
        """Entries of every student whose record matches branch and year."""

    @abstractmethod
    def list_mark_entries_for_student(self, roll_no):
        """Every entry stored for one student, ordered by subject."""

    @abstractmethod
    def get_student_record(self, roll_no):
        """Return the academic record for roll_no or None."""


class SqlAlchemyMarkStore(MarkStore):

    def __init__(self, session):
        self.session = session

    def get_mark_entry(self, roll_no, subject):
        return self.session.query(MarkEntry).filter_by(roll_no=roll_no, subject=subject).first()

    def put_mark_entry(self, entry):
        existing = self.get_mark_entry(entry.roll_no, entry.subject)
        try:
            if existing:
                existing.mark_type = entry.mark_type
                existing.sems = entry.sems
                existing.sem1_result = entry.sem1_result
                existing.sem2_result = entry.sem2_result
                entry = existing
            else:
                self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("Could not store marks %s", entry.mark_id)
            raise
        return entry

    def list_mark_entries_for_class(self, branch, year):
        return (
            self.session.query(MarkEntry)
            .join(StudentRecord, StudentRecord.roll_no == MarkEntry.roll_no)
            .filter(StudentRecord.branch == branch, StudentRecord.year == str(year))
            .order_by(MarkEntry.roll_no.asc(), MarkEntry.subject.asc())
            .all()
        )

    def list_mark_entries_for_student(self, roll_no):
        return (
            self.session.query(MarkEntry).filter_by(roll_no=roll_no)
            .order_by(MarkEntry.subject.asc())
            .all()
        )

    def get_student_record(self, roll_no):
        return self.session.query(StudentRecord).filter_by(roll_no=roll_no).first()


def get_mark_store():
    """Store for the current app: the injected one if any, else the database."""
    from flask import current_app
    from extensions import db

    store = current_app.extensions.get("mark_store")
    if store is None:
        store = SqlAlchemyMarkStore(db.session)
    return store
