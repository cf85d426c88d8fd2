from flask import Blueprint, request, jsonify, session, current_app
from flask_login import login_user, logout_user
from services.auth_service import (
    signup_teacher, authenticate_teacher, signup_student, authenticate_student
)

# Define the blueprint
auth_bp = Blueprint("auth", __name__)


def _missing(data, fields):
    return [f for f in fields if not str(data.get(f) or "").strip()]


# =========================================================
# TEACHER ACCOUNTS
# =========================================================
@auth_bp.route("/teacher/signup", methods=["POST"])
def teacher_signup():
    data = request.get_json(silent=True) or {}
    missing = _missing(data, ("name", "email", "password"))
    if missing:
        return jsonify({"error": f"Missing fields: {', '.join(missing)}"}), 400

    teacher, error = signup_teacher(data)
    if error:
        return jsonify({"error": error}), 409

    return jsonify({"status": "success", "user": teacher.to_dict()}), 201


@auth_bp.route("/teacher/login", methods=["POST"])
def teacher_login():
    data = request.get_json(silent=True) or {}
    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "Email and password are required"}), 400

    teacher = authenticate_teacher(email, password)
    if not teacher:
        current_app.logger.info("Failed teacher login for %s", email)
        return jsonify({"error": "Invalid credentials"}), 401

    login_user(teacher)
    session["role"] = teacher.role
    return jsonify({"status": "success", "user": teacher.to_dict()})


# =========================================================
# STUDENT ACCOUNTS
# =========================================================
@auth_bp.route("/student/signup", methods=["POST"])
def student_signup():
    data = request.get_json(silent=True) or {}
    missing = _missing(data, ("roll_no", "name", "password"))
    if missing:
        return jsonify({"error": f"Missing fields: {', '.join(missing)}"}), 400

    student, error = signup_student(data)
    if error:
        return jsonify({"error": error}), 409

    return jsonify({"status": "success", "user": student.to_dict()}), 201


@auth_bp.route("/student/login", methods=["POST"])
def student_login():
    data = request.get_json(silent=True) or {}
    roll_no = data.get("roll_no")
    password = data.get("password")

    if not roll_no or not password:
        return jsonify({"error": "Roll No and password are required"}), 400

    student = authenticate_student(roll_no, password)
    if not student:
        current_app.logger.info("Failed student login for %s", roll_no)
        return jsonify({"error": "Invalid credentials"}), 401

    login_user(student)
    session["role"] = student.role
    return jsonify({"status": "success", "user": student.to_dict()})


# =========================================================
# LOGOUT ROUTE
# =========================================================
@auth_bp.route("/logout")
def logout():
    logout_user()      # Tell Flask-Login to wipe the user session
    session.clear()
    return jsonify({"status": "success"})
