import logging

from extensions import db
from models.mark_entry import MarkEntry
from models.student_record import StudentRecord
from models.subjects import Subject, SUBJECT_KINDS

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("name", "branch", "year")


def _clean_record_data(data):
    return {
        "roll_no": str(data.get("roll_no") or "").strip(),
        "name": str(data.get("name") or "").strip(),
        "branch": str(data.get("branch") or "").strip(),
        "year": str(data.get("year") or "").strip(),
    }


def add_student_record(data):
    """Insert a record unless the roll number is taken.

    Returns ``(record, created)``; on a clash the stored record comes back
    with ``created=False`` so the caller can offer an overwrite.
    """
    values = _clean_record_data(data)
    existing = StudentRecord.query.filter_by(roll_no=values["roll_no"]).first()
    if existing:
        return existing, False

    record = StudentRecord(**values)
    db.session.add(record)
    db.session.commit()
    logger.info("Added student record %s", record.roll_no)
    return record, True


def overwrite_student_record(data):
    """Replace a stored record and drop all of that student's marks."""
    values = _clean_record_data(data)
    record = StudentRecord.query.filter_by(roll_no=values["roll_no"]).first()
    if not record:
        return False

    try:
        for field in RECORD_FIELDS:
            setattr(record, field, values[field])
        removed = MarkEntry.query.filter_by(roll_no=record.roll_no).delete()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Overwrote student record %s, cleared %d mark entries", record.roll_no, removed)
    return True


def list_subjects(kind=None):
    q = Subject.query.filter_by(is_active=True)
    if kind:
        q = q.filter_by(kind=kind)
    return q.order_by(Subject.subject_name.asc()).all()


def add_subject(name, kind="theory"):
    name = " ".join(str(name or "").strip().split())
    if not name:
        return None, "subject_name required"
    if kind not in SUBJECT_KINDS:
        return None, "Invalid subject kind"
    if Subject.query.filter_by(subject_name=name).first():
        return None, "Subject already exists"

    subject = Subject(subject_name=name, kind=kind)
    db.session.add(subject)
    db.session.commit()
    return subject, None
