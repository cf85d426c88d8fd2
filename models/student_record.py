from extensions import db


class StudentRecord(db.Model):
    __tablename__ = "student_records"

    record_id = db.Column(db.Integer, primary_key=True)
    roll_no = db.Column(db.String(20), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    branch = db.Column(db.String(50), nullable=False, index=True)
    year = db.Column(db.String(10), nullable=False, index=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self):
        return {
            "roll_no": self.roll_no,
            "name": self.name,
            "branch": self.branch,
            "year": self.year,
        }

    def __repr__(self):
        return f"<StudentRecord {self.roll_no}>"
