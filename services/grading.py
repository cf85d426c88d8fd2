"""Scoring engine: raw mid-term / exam marks to internal, total and grade.

Everything here is pure and needs neither storage nor an application
context, so it can be called from routes, services and tests alike.
"""
import math
from dataclasses import dataclass, asdict

BEST_MID_WEIGHT = 0.8
OTHER_MID_WEIGHT = 0.2

# Inclusive lower bounds, checked high to low.
GRADE_THRESHOLDS = [
    (90, "O"),
    (80, "A+"),
    (70, "A"),
    (60, "B"),
    (50, "C"),
    (40, "D"),
]
FAIL_GRADE = "F"

SEMESTER_KEYS = ("sem1", "sem2")


def to_score(value):
    """Coerce a raw mark to a number, treating absent or malformed values as 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return 0
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class SemesterInput:
    mid1: float = 0
    mid2: float = 0
    exam: float = 0

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            mid1=to_score(data.get("mid1")),
            mid2=to_score(data.get("mid2")),
            exam=to_score(data.get("exam")),
        )

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SemesterResult:
    internal: float
    total: float
    grade: str

    @classmethod
    def from_dict(cls, data):
        if not data:
            return NO_DATA_RESULT
        return cls(
            internal=to_score(data.get("internal")),
            total=to_score(data.get("total")),
            grade=data.get("grade") or FAIL_GRADE,
        )

    def to_dict(self):
        return asdict(self)


NO_DATA_RESULT = SemesterResult(internal=0, total=0, grade=FAIL_GRADE)


@dataclass(frozen=True)
class FullResult:
    sem1_result: SemesterResult
    sem2_result: SemesterResult

    def for_semester(self, semester_key):
        return self.sem1_result if semester_key == "sem1" else self.sem2_result


def grade_for_total(total):
    for lower_bound, grade in GRADE_THRESHOLDS:
        if total >= lower_bound:
            return grade
    return FAIL_GRADE


def compute_semester_result(sem_input):
    """Grade one semester.

    ``sem_input`` may be a SemesterInput, a plain mapping with any of
    ``mid1``/``mid2``/``exam``, or None. None means nothing was submitted
    and yields the zero/F sentinel rather than an error. Scores are not
    clamped: out-of-range values pass straight through.
    """
    if sem_input is None:
        return NO_DATA_RESULT
    if not isinstance(sem_input, SemesterInput):
        sem_input = SemesterInput.from_dict(sem_input)

    best_mid = max(sem_input.mid1, sem_input.mid2)
    other_mid = min(sem_input.mid1, sem_input.mid2)
    internal = best_mid * BEST_MID_WEIGHT + other_mid * OTHER_MID_WEIGHT
    total = internal + sem_input.exam

    return SemesterResult(
        internal=internal,
        total=total,
        grade=grade_for_total(total),
    )


def compute_full_result(mark_data):
    """Grade both semesters of a submission independently."""
    sems = (mark_data or {}).get("sems") or {}
    return FullResult(
        sem1_result=compute_semester_result(sems.get("sem1")),
        sem2_result=compute_semester_result(sems.get("sem2")),
    )
