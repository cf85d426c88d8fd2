import logging

from extensions import db
from models.subjects import Subject

logger = logging.getLogger(__name__)

DEFAULT_SUBJECTS = [
    {"subject_name": "Mathematics", "kind": "theory"},
    {"subject_name": "Physics", "kind": "theory"},
    {"subject_name": "Programming in C", "kind": "theory"},
    {"subject_name": "Physics Lab", "kind": "lab"},
    {"subject_name": "Programming Lab", "kind": "lab"},
]


def seed_subjects():
    for s in DEFAULT_SUBJECTS:
        existing = Subject.query.filter_by(subject_name=s["subject_name"]).first()
        if not existing:
            db.session.add(
                Subject(
                    subject_name=s["subject_name"],
                    kind=s["kind"]
                )
            )

    db.session.commit()
    logger.info("Subjects seeded")


def run_seed():
    seed_subjects()
