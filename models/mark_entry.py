from extensions import db
from services.grading import SemesterResult

MARK_TYPES = ("theory", "lab")


def make_mark_id(roll_no, subject):
    return f"{roll_no}_{subject}"


class MarkEntry(db.Model):
    __tablename__ = "mark_entries"

    entry_id = db.Column(db.Integer, primary_key=True)
    roll_no = db.Column(db.String(20), nullable=False, index=True)
    subject = db.Column(db.String(100), nullable=False)
    mark_type = db.Column(db.Enum(*MARK_TYPES, name="mark_type"), nullable=False, default="theory")

    # {"sem1": {"mid1": .., "mid2": .., "exam": ..}, "sem2": {...}}
    sems = db.Column(db.JSON, nullable=False, default=dict)
    sem1_result = db.Column(db.JSON, nullable=False)
    sem2_result = db.Column(db.JSON, nullable=False)

    updated_at = db.Column(
        db.DateTime,
        server_default=db.func.now(),
        onupdate=db.func.now()
    )

    __table_args__ = (
        db.UniqueConstraint("roll_no", "subject", name="unique_roll_subject"),
    )

    @property
    def mark_id(self):
        return make_mark_id(self.roll_no, self.subject)

    def semester_result(self, semester_key):
        raw = self.sem1_result if semester_key == "sem1" else self.sem2_result
        return SemesterResult.from_dict(raw)

    def to_dict(self):
        return {
            "id": self.mark_id,
            "roll_no": self.roll_no,
            "subject": self.subject,
            "type": self.mark_type,
            "sems": self.sems or {},
            "sem1_result": self.sem1_result,
            "sem2_result": self.sem2_result,
        }

    def __repr__(self):
        return f"<MarkEntry {self.mark_id}>"
