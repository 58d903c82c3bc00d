# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial enrollment schema.

Creates students, class_sections, enrollments and waiting_list.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2025-08-04
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=False),
        server_default=sa.text("gen_random_uuid()"),
        primary_key=True,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("now()"),
    )


def upgrade() -> None:
    """Create enrollment tables."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    op.create_table(
        "students",
        _id_column(),
        sa.Column("student_name", sa.String(200), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("parent_name", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("location", sa.String(20), nullable=False),
        sa.Column("frequency", sa.String(20), nullable=False),
        sa.Column(
            "selected_days",
            postgresql.ARRAY(sa.String(20)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("session", sa.String(30), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("liability_accepted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("waiver_name", sa.String(200), nullable=True),
        sa.Column("waiver_address", sa.Text, nullable=True),
        _created_at_column(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint(
            "payment_status IN ('PENDING', 'PAID', 'FAILED')",
            name="ck_students_payment_status",
        ),
        sa.CheckConstraint(
            "location IN ('KATY', 'SUGARLAND')", name="ck_students_location"
        ),
    )
    op.create_index("ix_students_session", "students", ["session"])

    op.create_table(
        "class_sections",
        _id_column(),
        sa.Column("location", sa.String(20), nullable=False),
        sa.Column("day", sa.String(20), nullable=False),
        sa.Column("label", sa.String(1), nullable=False),
        sa.Column("session", sa.String(30), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=True),
        sa.UniqueConstraint(
            "location", "day", "label", "session", name="uq_class_section_slot"
        ),
        sa.CheckConstraint("label IN ('A', 'B')", name="ck_class_sections_label"),
    )
    op.create_index("ix_class_sections_session", "class_sections", ["session"])

    op.create_table(
        "enrollments",
        _id_column(),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=False),
            sa.ForeignKey("students.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "section_id",
            postgresql.UUID(as_uuid=False),
            sa.ForeignKey("class_sections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        _created_at_column(),
    )
    op.create_index("ix_enrollments_student_id", "enrollments", ["student_id"])
    op.create_index("ix_enrollments_section_id", "enrollments", ["section_id"])

    op.create_table(
        "waiting_list",
        _id_column(),
        sa.Column("student_name", sa.String(200), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("parent_name", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("location", sa.String(20), nullable=False),
        sa.Column("requested_day", sa.String(20), nullable=False),
        sa.Column("session", sa.String(30), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at_column(),
    )
    op.create_index("ix_waiting_list_session", "waiting_list", ["session"])


def downgrade() -> None:
    """Drop enrollment tables."""
    op.drop_table("waiting_list")
    op.drop_table("enrollments")
    op.drop_table("class_sections")
    op.drop_table("students")
