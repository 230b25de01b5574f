"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Creates all tables for the Snack Exercise backend:
members, exgroups, join_lists, exercises.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLAlchemy persists enum member names, not values
STATUS = sa.Enum("active", "inactive", name="status")
JOIN_TYPE = sa.Enum("host", "member", name="jointype")
EXERCISE_CATEGORY = sa.Enum("upper_body", "lower_body", "core", "full_body", "stretching", name="exercisecategory")


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("status", STATUS, nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # --- members ---
    op.create_table(
        "members",
        sa.Column("member_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("nickname", sa.String(50), nullable=False),
        sa.Column("profile_image", sa.String(500), nullable=True),
        *_audit_columns(),
    )

    # --- exgroups ---
    op.create_table(
        "exgroups",
        sa.Column("exgroup_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("emoji", sa.String(20), nullable=True),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("max_member_num", sa.Integer, nullable=False),
        sa.Column("goal_relay_num", sa.Integer, nullable=False),
        sa.Column("start_time", sa.Time, nullable=False),
        sa.Column("end_time", sa.Time, nullable=False),
        sa.Column("penalty", sa.String(255), nullable=True),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("mission_interval_time", sa.Integer, nullable=False),
        sa.Column("check_interval_time", sa.Integer, nullable=False),
        sa.Column("check_max_num", sa.Integer, nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
    )
    op.create_index("ix_exgroups_code", "exgroups", ["code"])

    # --- join_lists ---
    op.create_table(
        "join_lists",
        sa.Column("join_list_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("member_id", sa.Integer, sa.ForeignKey("members.member_id"), nullable=False),
        sa.Column("exgroup_id", sa.Integer, sa.ForeignKey("exgroups.exgroup_id"), nullable=False),
        sa.Column("join_type", JOIN_TYPE, nullable=False, server_default="member"),
        sa.Column("out_count", sa.Integer, nullable=False, server_default="0"),
        *_audit_columns(),
    )
    op.create_index("ix_join_lists_member_id", "join_lists", ["member_id"])
    op.create_index("ix_join_lists_exgroup_id", "join_lists", ["exgroup_id"])

    # --- exercises ---
    op.create_table(
        "exercises",
        sa.Column("exercise_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("exercise_category", EXERCISE_CATEGORY, nullable=False),
        sa.Column("video_link", sa.String(500), nullable=True),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("min_per_kcal", sa.Integer, nullable=True),
        *_audit_columns(),
    )


def downgrade() -> None:
    op.drop_table("exercises")
    op.drop_index("ix_join_lists_exgroup_id", table_name="join_lists")
    op.drop_index("ix_join_lists_member_id", table_name="join_lists")
    op.drop_table("join_lists")
    op.drop_index("ix_exgroups_code", table_name="exgroups")
    op.drop_table("exgroups")
    op.drop_table("members")
    bind = op.get_bind()
    EXERCISE_CATEGORY.drop(bind, checkfirst=True)
    JOIN_TYPE.drop(bind, checkfirst=True)
    STATUS.drop(bind, checkfirst=True)
