"""
============================================================
CRC CARD (Class / Responsibilities / Collaborators)
============================================================
Class: 001_master_data (Alembic Migration)

Responsibilities:
  - Create the users and facilities master tables.
  - Enforce unique user email and unique facility code.
  - Restrict enum columns to their known values (CHECK).

Collaborators:
  - PostgreSQL 13+ (gen_random_uuid() is built in)
  - infrastructure.repositories.postgres (uses this schema as contract)

Policy:
  - Baseline migration. Later schema changes go in additive migrations (002+).
  - Naming convention:
      pk_<table>            - Primary keys
      uq_<table>_<col>      - Unique constraints (mapped to DuplicateKeyError)
      ix_<table>_<col>      - Indexes
      ck_<table>_<col>      - Check constraints
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_master_data"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLES = ("ADMIN", "MANAGER", "USER")
USER_STATUSES = ("ACTIVE", "INVITED", "DISABLED")
FACILITY_CATEGORIES = ("HEAD", "BRANCH", "WAREHOUSE", "STORE", "OTHER")
FACILITY_STATUSES = ("ACTIVE", "INACTIVE", "SUSPENDED", "CLOSED")


def _in_list(column: str, values: Sequence[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.String(50), nullable=True),
        sa.Column("updated_by", sa.String(50), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # =========================================================
    # USERS
    # =========================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("name_kana", sa.String(100), nullable=True),
        sa.Column(
            "role", sa.String(20), nullable=False, server_default=sa.text("'USER'")
        ),
        sa.Column(
            "status", sa.String(20), nullable=False, server_default=sa.text("'ACTIVE'")
        ),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("title", sa.String(100), nullable=True),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("image", sa.String(200), nullable=True),
        sa.Column("note", sa.String(500), nullable=True),
        sa.Column(
            "mfa_enabled", sa.Boolean, nullable=False, server_default=sa.text("false")
        ),
        sa.Column(
            "is_locked", sa.Boolean, nullable=False, server_default=sa.text("false")
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(_in_list("role", USER_ROLES), name="ck_users_role"),
        sa.CheckConstraint(_in_list("status", USER_STATUSES), name="ck_users_status"),
    )

    # List order is created_at DESC.
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # =========================================================
    # FACILITIES
    # =========================================================
    op.create_table(
        "facilities",
        _id_column(),
        sa.Column("code", sa.String(16), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_kana", sa.String(100), nullable=True),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "country", sa.String(2), nullable=False, server_default=sa.text("'JP'")
        ),
        sa.Column("prefecture", sa.String(100), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("address_line1", sa.String(200), nullable=True),
        sa.Column("postal_code", sa.String(8), nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("contact_name", sa.String(100), nullable=True),
        sa.Column("contact_phone", sa.String(30), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=True),
        sa.Column("display_order", sa.Integer, nullable=True),
        sa.Column("image_url", sa.String(200), nullable=True),
        sa.Column("note", sa.String(500), nullable=True),
        sa.Column("billing_code", sa.String(32), nullable=True),
        sa.Column(
            "is_integrated",
            sa.Boolean,
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column("synced_at", sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_facilities"),
        sa.UniqueConstraint("code", name="uq_facilities_code"),
        sa.CheckConstraint(
            _in_list("category", FACILITY_CATEGORIES), name="ck_facilities_category"
        ),
        sa.CheckConstraint(
            _in_list("status", FACILITY_STATUSES), name="ck_facilities_status"
        ),
    )

    op.create_index("ix_facilities_display_order", "facilities", ["display_order"])


def downgrade() -> None:
    op.drop_index("ix_facilities_display_order", table_name="facilities")
    op.drop_table("facilities")
    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_table("users")
