"""SQLAlchemy table definitions for Passage.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("display_name", String(255), nullable=False),
    Column("full_name", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("is_person", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# USER LOGINS TABLE (provider identities, one user per external id)
# ============================================================================
user_logins_table = Table(
    "user_logins",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("external_id", String(512), nullable=False, unique=True),  # goog|people/123
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_logins_user_id", user_logins_table.c.user_id)
