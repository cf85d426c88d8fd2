"""create gradebook tables

Revision ID: 3a7d91c0b2e4
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a7d91c0b2e4"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "teachers",
        sa.Column("teacher_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=120), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.create_table(
        "students",
        sa.Column("student_id", sa.Integer(), primary_key=True),
        sa.Column("roll_no", sa.String(length=20), nullable=False, unique=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.create_table(
        "student_records",
        sa.Column("record_id", sa.Integer(), primary_key=True),
        sa.Column("roll_no", sa.String(length=20), nullable=False, unique=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("branch", sa.String(length=50), nullable=False),
        sa.Column("year", sa.String(length=10), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.create_index("ix_student_records_branch", "student_records", ["branch"])
    op.create_index("ix_student_records_year", "student_records", ["year"])
    op.create_table(
        "subjects",
        sa.Column("subject_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("subject_name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("kind", sa.Enum("theory", "lab", name="subject_kind"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=True, server_default=sa.text("1")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.create_table(
        "mark_entries",
        sa.Column("entry_id", sa.Integer(), primary_key=True),
        sa.Column("roll_no", sa.String(length=20), nullable=False),
        sa.Column("subject", sa.String(length=100), nullable=False),
        sa.Column("mark_type", sa.Enum("theory", "lab", name="mark_type"), nullable=False),
        sa.Column("sems", sa.JSON(), nullable=False),
        sa.Column("sem1_result", sa.JSON(), nullable=False),
        sa.Column("sem2_result", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.UniqueConstraint("roll_no", "subject", name="unique_roll_subject"),
    )
    op.create_index("ix_mark_entries_roll_no", "mark_entries", ["roll_no"])


def downgrade():
    op.drop_index("ix_mark_entries_roll_no", table_name="mark_entries")
    op.drop_table("mark_entries")
    op.drop_table("subjects")
    op.drop_index("ix_student_records_year", table_name="student_records")
    op.drop_index("ix_student_records_branch", table_name="student_records")
    op.drop_table("student_records")
    op.drop_table("students")
    op.drop_table("teachers")
