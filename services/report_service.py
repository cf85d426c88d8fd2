import re
from datetime import datetime
from io import BytesIO

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from services.grading import SEMESTER_KEYS
from services.marks_service import semester_key

REPORT_COLUMNS = ["Roll No", "Student Name", "Subject", "Type", "Internal", "Total", "Grade"]
REPORT_FORMATS = ("csv", "excel", "pdf")

TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, -1), 9),
    ("ALIGN", (4, 1), (-1, -1), "CENTER"),
])


def class_marks_frame(store, branch, year, semester):
    key = semester_key(semester)
    rows = []
    for entry in store.list_mark_entries_for_class(branch, year):
        record = store.get_student_record(entry.roll_no)
        result = entry.semester_result(key)
        rows.append({
            "Roll No": entry.roll_no,
            "Student Name": record.name if record else "",
            "Subject": entry.subject,
            "Type": entry.mark_type,
            "Internal": round(result.internal, 2),
            "Total": round(result.total, 2),
            "Grade": result.grade,
        })
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def _safe_name(value):
    return re.sub(r"[^a-zA-Z0-9]+", "_", str(value)).strip("_")


def _build_pdf(elements):
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=24, rightMargin=24, topMargin=24, bottomMargin=24)
    doc.build(elements)
    buffer.seek(0)
    return buffer


def render_class_report(frame, fmt, title):
    """Return ``(buffer, mimetype, download_name)`` for the requested format."""
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unsupported report format: {fmt!r}")

    base_name = _safe_name(title) or "report"

    if fmt == "csv":
        output = BytesIO(frame.to_csv(index=False).encode("utf-8"))
        return output, "text/csv", f"{base_name}.csv"

    if fmt == "excel":
        output = BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            frame.to_excel(writer, index=False, sheet_name="Report")
        output.seek(0)
        return (
            output,
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            f"{base_name}.xlsx"
        )

    styles = getSampleStyleSheet()
    now_text = datetime.now().strftime("%Y-%m-%d %H:%M")
    table_data = [REPORT_COLUMNS] + [[str(v) for v in row] for row in frame.itertuples(index=False)]
    if len(table_data) == 1:
        table_data.append(["--", "No data"] + ["--"] * (len(REPORT_COLUMNS) - 2))

    table = Table(table_data, repeatRows=1)
    table.setStyle(TABLE_STYLE)
    elements = [
        Paragraph(title, styles["Title"]),
        Paragraph(f"Generated: {now_text}", styles["Normal"]),
        Spacer(1, 12),
        table,
    ]
    return _build_pdf(elements), "application/pdf", f"{base_name}.pdf"


def student_marksheet_pdf(record, marks):
    styles = getSampleStyleSheet()
    elements = [Paragraph("Student Marksheet", styles["Title"])]
    if record:
        elements.append(Paragraph(
            f"{record.name} ({record.roll_no}) | Branch: {record.branch} | Year: {record.year}",
            styles["Normal"]
        ))
    elements.append(Spacer(1, 12))

    for key in SEMESTER_KEYS:
        elements.append(Paragraph(f"Semester {key[-1]}", styles["Heading2"]))
        table_data = [["Subject", "Type", "Mid 1", "Mid 2", "Exam", "Internal", "Total", "Grade"]]
        for entry in marks:
            raw = (entry.sems or {}).get(key) or {}
            result = entry.semester_result(key)
            table_data.append([
                entry.subject,
                entry.mark_type,
                str(raw.get("mid1", "--")),
                str(raw.get("mid2", "--")),
                str(raw.get("exam", "--")),
                str(round(result.internal, 2)),
                str(round(result.total, 2)),
                result.grade,
            ])
        if len(table_data) == 1:
            table_data.append(["No marks"] + ["--"] * 7)

        table = Table(table_data, repeatRows=1)
        table.setStyle(TABLE_STYLE)
        elements.extend([table, Spacer(1, 12)])

    return _build_pdf(elements)
