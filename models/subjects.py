# models/subjects.py
from extensions import db

SUBJECT_KINDS = ("theory", "lab")


class Subject(db.Model):
    __tablename__ = 'subjects'

    subject_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    subject_name = db.Column(db.String(100), nullable=False, unique=True)
    kind = db.Column(db.Enum(*SUBJECT_KINDS, name="subject_kind"), nullable=False, default="theory")
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self):
        return {
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "kind": self.kind,
        }

    def __repr__(self):
        return f"<Subject {self.subject_name}>"
