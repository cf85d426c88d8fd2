from extensions import db
from flask_login import UserMixin


class Student(UserMixin, db.Model):
    """Login profile of a student; the academic data lives in StudentRecord."""

    __tablename__ = "students"

    student_id = db.Column(db.Integer, primary_key=True)
    roll_no = db.Column(db.String(20), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    role = "student"

    def get_id(self):
        return f"student:{self.student_id}"

    def to_dict(self):
        return {
            "student_id": self.student_id,
            "roll_no": self.roll_no,
            "name": self.name,
        }

    def __repr__(self):
        return f"<Student {self.roll_no}>"
