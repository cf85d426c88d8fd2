from extensions import db
from flask_login import UserMixin


class Teacher(UserMixin, db.Model):
    __tablename__ = "teachers"

    teacher_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    role = "teacher"

    # Teachers and students share one login manager, so the id carries the role.
    def get_id(self):
        return f"teacher:{self.teacher_id}"

    def to_dict(self):
        return {
            "teacher_id": self.teacher_id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self):
        return f"<Teacher {self.email}>"
