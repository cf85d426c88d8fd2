from flask import Blueprint, jsonify, request, current_app, send_file
from flask_login import current_user
from extensions import db
from models import StudentRecord, MarkEntry
from models.mark_entry import MARK_TYPES
from services.grading import to_score
from services.mark_store import get_mark_store
from services.marks_service import save_marks, get_all_class_stats, get_student_data
from services.record_service import (
    add_student_record, overwrite_student_record, list_subjects, add_subject
)
from services.report_service import class_marks_frame, render_class_report, REPORT_FORMATS
from utils.decorators import role_required

teacher_bp = Blueprint("teacher", __name__, url_prefix="/teacher")

RECORD_REQUIRED = ("roll_no", "name", "branch", "year")
SCORE_FIELDS = ("mid1", "mid2", "exam")


def class_filter_args():
    branch = (request.args.get("branch") or "").strip()
    year = (request.args.get("year") or "").strip()
    semester = (request.args.get("semester") or "").strip()
    if not branch or not year or not semester:
        return None
    return branch, year, semester


@teacher_bp.route("/dashboard-data")
@role_required("teacher")
def dashboard_data():
    branches = [
        row[0] for row in
        db.session.query(StudentRecord.branch).distinct().order_by(StudentRecord.branch.asc()).all()
    ]
    return jsonify({
        "teacher_name": current_user.name,
        "role": "Teacher",
        "records_count": StudentRecord.query.count(),
        "marks_count": MarkEntry.query.count(),
        "branches": branches,
        "subjects": [s.to_dict() for s in list_subjects()],
    })


# =========================================================
# ACADEMIC RECORDS
# =========================================================
@teacher_bp.route("/records", methods=["POST"])
@role_required("teacher")
def create_record():
    data = request.get_json(silent=True) or {}
    missing = [f for f in RECORD_REQUIRED if not str(data.get(f) or "").strip()]
    if missing:
        return jsonify({"error": f"Missing fields: {', '.join(missing)}"}), 400

    try:
        record, created = add_student_record(data)
    except Exception as exc:
        db.session.rollback()
        return jsonify({"error": str(exc)}), 500

    if not created:
        return jsonify({
            "error": "Record already exists for this Roll No",
            "exists": True,
            "record": record.to_dict()
        }), 409

    return jsonify({"status": "success", "record": record.to_dict()}), 201


@teacher_bp.route("/records/<roll_no>", methods=["PUT"])
@role_required("teacher")
def replace_record(roll_no):
    data = request.get_json(silent=True) or {}
    data["roll_no"] = roll_no
    missing = [f for f in RECORD_REQUIRED if not str(data.get(f) or "").strip()]
    if missing:
        return jsonify({"error": f"Missing fields: {', '.join(missing)}"}), 400

    try:
        replaced = overwrite_student_record(data)
    except Exception as exc:
        return jsonify({"error": str(exc)}), 500

    if not replaced:
        return jsonify({"error": "Record not found"}), 404
    return jsonify({"status": "success"})


@teacher_bp.route("/students/<roll_no>")
@role_required("teacher")
def student_data(roll_no):
    data = get_student_data(get_mark_store(), roll_no)
    if not data["record"] and not data["marks"]:
        return jsonify({"error": "Student not found"}), 404

    return jsonify({
        "record": data["record"].to_dict() if data["record"] else None,
        "marks": [m.to_dict() for m in data["marks"]],
    })


# =========================================================
# MARKS
# =========================================================
@teacher_bp.route("/marks", methods=["POST"])
@role_required("teacher")
def submit_marks():
    data = request.get_json(silent=True) or {}
    roll_no = str(data.get("roll_no") or "").strip()
    subject = str(data.get("subject") or "").strip()
    mark_type = data.get("type") or "theory"
    sems = data.get("sems") or {}

    if not roll_no or not subject:
        return jsonify({"error": "roll_no and subject required"}), 400
    if mark_type not in MARK_TYPES:
        return jsonify({"error": "Invalid type"}), 400
    if not isinstance(sems, dict) or any(
        value is not None and not isinstance(value, dict) for value in sems.values()
    ):
        return jsonify({"error": "Invalid sems"}), 400
    if any(
        to_score(value.get(field)) < 0
        for value in sems.values() if value
        for field in SCORE_FIELDS
    ):
        return jsonify({"error": "Marks cannot be negative"}), 400

    marks_data = {
        "subject": subject,
        "type": mark_type,
        "sems": {key: sems[key] for key in ("sem1", "sem2") if sems.get(key) is not None},
    }

    try:
        entry = save_marks(get_mark_store(), roll_no, marks_data)
    except Exception as exc:
        current_app.logger.error("Saving marks for %s failed: %s", roll_no, exc)
        return jsonify({"error": str(exc)}), 500

    return jsonify({"status": "success", "entry": entry.to_dict()})


@teacher_bp.route("/class-stats")
@role_required("teacher")
def class_stats():
    key = class_filter_args()
    if not key:
        return jsonify({"error": "branch, year and semester required"}), 400

    try:
        stats = get_all_class_stats(get_mark_store(), *key)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    if stats is None:
        return jsonify({"error": "No data found for this class."}), 404
    return jsonify(stats.to_dict())


@teacher_bp.route("/class-report")
@role_required("teacher")
def class_report():
    key = class_filter_args()
    if not key:
        return jsonify({"error": "branch, year and semester required"}), 400

    file_format = request.args.get("format", "csv")
    if file_format not in REPORT_FORMATS:
        return jsonify({"error": "Invalid format"}), 400

    branch, year, semester = key
    try:
        frame = class_marks_frame(get_mark_store(), branch, year, semester)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    if frame.empty:
        return jsonify({"error": "No data found for this report."}), 404

    title = f"{branch} Year {year} Semester {semester} Marks"
    buffer, mimetype, download_name = render_class_report(frame, file_format, title)
    return send_file(buffer, as_attachment=True, download_name=download_name, mimetype=mimetype)


# =========================================================
# SUBJECT CATALOG
# =========================================================
@teacher_bp.route("/subjects", methods=["GET"])
@role_required("teacher")
def subjects():
    kind = request.args.get("kind")
    return jsonify({"subjects": [s.to_dict() for s in list_subjects(kind)]})


@teacher_bp.route("/subjects", methods=["POST"])
@role_required("teacher")
def create_subject():
    data = request.get_json(silent=True) or {}
    subject, error = add_subject(data.get("subject_name"), data.get("kind") or "theory")
    if error:
        status = 409 if error == "Subject already exists" else 400
        return jsonify({"error": error}), status
    return jsonify({"status": "success", "subject": subject.to_dict()}), 201
