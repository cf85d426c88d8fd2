from .teacher import Teacher
from .student import Student
from .student_record import StudentRecord
from .subjects import Subject
from .mark_entry import MarkEntry
__all__ = ["Teacher", "Student", "StudentRecord", "Subject", "MarkEntry"]
