import logging

from extensions import db
from models.student import Student
from models.teacher import Teacher
from utils.password_utils import hash_password, verify_password

logger = logging.getLogger(__name__)


def signup_teacher(data):
    email = str(data.get("email") or "").strip().lower()
    if Teacher.query.filter_by(email=email).first():
        return None, "Email already exists"

    teacher = Teacher(
        name=str(data.get("name") or "").strip(),
        email=email,
        password_hash=hash_password(data.get("password"))
    )
    db.session.add(teacher)
    db.session.commit()
    logger.info("Registered teacher %s", email)
    return teacher, None


def authenticate_teacher(email: str, password: str):
    teacher = Teacher.query.filter_by(email=str(email or "").strip().lower()).first()

    if not teacher:
        return None

    if not verify_password(password, teacher.password_hash):
        return None

    return teacher


def signup_student(data):
    roll_no = str(data.get("roll_no") or "").strip()
    if Student.query.filter_by(roll_no=roll_no).first():
        return None, "Roll No already registered"

    student = Student(
        roll_no=roll_no,
        name=str(data.get("name") or "").strip(),
        password_hash=hash_password(data.get("password"))
    )
    db.session.add(student)
    db.session.commit()
    logger.info("Registered student %s", roll_no)
    return student, None


def authenticate_student(roll_no: str, password: str):
    student = Student.query.filter_by(roll_no=str(roll_no or "").strip()).first()

    if not student:
        return None

    if not verify_password(password, student.password_hash):
        return None

    return student
