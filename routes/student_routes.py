import re

from flask import Blueprint, jsonify, send_file
from flask_login import current_user
from services.mark_store import get_mark_store
from services.marks_service import get_student_data
from services.report_service import student_marksheet_pdf
from utils.decorators import role_required

student_bp = Blueprint("student", __name__, url_prefix="/student")


@student_bp.route("/my-data")
@role_required("student")
def my_data():
    data = get_student_data(get_mark_store(), current_user.roll_no)
    return jsonify({
        "student_name": current_user.name,
        "record": data["record"].to_dict() if data["record"] else None,
        "marks": [m.to_dict() for m in data["marks"]],
    })


@student_bp.route("/marksheet-pdf")
@role_required("student")
def marksheet_pdf():
    data = get_student_data(get_mark_store(), current_user.roll_no)
    if not data["record"]:
        return jsonify({"error": "No academic record found"}), 404

    buffer = student_marksheet_pdf(data["record"], data["marks"])
    safe_roll = re.sub(r"[^a-zA-Z0-9]+", "_", current_user.roll_no).strip("_")
    return send_file(
        buffer,
        as_attachment=True,
        download_name=f"marksheet_{safe_roll}.pdf",
        mimetype="application/pdf"
    )
