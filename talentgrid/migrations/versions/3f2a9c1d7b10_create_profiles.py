"""create profiles

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-16 10:12:03.118402
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "3f2a9c1d7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "profiles",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("photo_url", sa.String(length=512), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("availability", sa.String(length=32), nullable=False),
        sa.Column(
            "skills",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index(op.f("ix_profiles_id"), "profiles", ["id"], unique=True)
    op.create_index(op.f("ix_profiles_email"), "profiles", ["email"], unique=False)
    op.create_index(op.f("ix_profiles_availability"), "profiles", ["availability"], unique=False)
    op.create_index(op.f("ix_profiles_created_at"), "profiles", ["created_at"], unique=False)
    op.create_index("ix_profiles_last_first", "profiles", ["last_name", "first_name"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_profiles_last_first", table_name="profiles")
    op.drop_index(op.f("ix_profiles_created_at"), table_name="profiles")
    op.drop_index(op.f("ix_profiles_availability"), table_name="profiles")
    op.drop_index(op.f("ix_profiles_email"), table_name="profiles")
    op.drop_index(op.f("ix_profiles_id"), table_name="profiles")
    op.drop_table("profiles")
