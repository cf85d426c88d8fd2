import logging
from dataclasses import dataclass

from models.mark_entry import MarkEntry
from services.grading import compute_full_result

logger = logging.getLogger(__name__)

SEMESTER_KEYS_BY_NUMBER = {"1": "sem1", "2": "sem2"}


@dataclass(frozen=True)
class ClassStat:
    average: float
    count: int

    def to_dict(self):
        return {"average": self.average, "count": self.count}


def semester_key(semester):
    key = SEMESTER_KEYS_BY_NUMBER.get(str(semester).strip())
    if key is None:
        raise ValueError(f"Unknown semester: {semester!r}")
    return key


def save_marks(store, roll_no, marks_data):
    """Grade a submission and store it as the (roll_no, subject) entry.

    The stored entry is replaced as a whole: a resubmission that only
    carries ``sem1`` leaves ``sem2`` with the empty-result sentinel, even if
    sem2 marks were stored before.
    """
    subject = marks_data.get("subject")
    sems = marks_data.get("sems") or {}
    result = compute_full_result(marks_data)

    entry = MarkEntry(
        roll_no=roll_no,
        subject=subject,
        mark_type=marks_data.get("type") or "theory",
        sems={key: dict(value) for key, value in sems.items() if value is not None},
        sem1_result=result.sem1_result.to_dict(),
        sem2_result=result.sem2_result.to_dict(),
    )
    entry = store.put_mark_entry(entry)
    logger.info(
        "Saved marks %s: sem1=%s sem2=%s",
        entry.mark_id, result.sem1_result.grade, result.sem2_result.grade
    )
    return entry


def get_all_class_stats(store, branch, year, semester):
    """Average total of a class for one semester, or None if the class has no marks.

    Entries without a submission for the semester still count, with the
    sentinel total of 0.
    """
    key = semester_key(semester)
    entries = store.list_mark_entries_for_class(branch, year)
    if not entries:
        return None

    totals = [entry.semester_result(key).total for entry in entries]
    average = sum(totals) / len(totals)
    return ClassStat(average=round(average, 2), count=len(totals))


def get_student_data(store, roll_no):
    return {
        "record": store.get_student_record(roll_no),
        "marks": store.list_mark_entries_for_student(roll_no),
    }
