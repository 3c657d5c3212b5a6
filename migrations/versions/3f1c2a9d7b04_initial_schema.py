"""initial_schema

Create the durable schema behind login:
- Users (permanent accounts)
- User Logins (one row per provider identity, unique external id)

Revision ID: 3f1c2a9d7b04
Revises:
Create Date: 2026-10-17 10:12:44.512307

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("is_person", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # USER_LOGINS table (provider identities)
    # ========================================================================
    op.create_table(
        "user_logins",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("external_id", sa.String(512), nullable=False),  # goog|people/123
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id", name="uq_user_logins_external_id"),
    )
    op.create_index("idx_user_logins_user_id", "user_logins", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_user_logins_user_id", table_name="user_logins")
    op.drop_table("user_logins")
    op.drop_table("users")
