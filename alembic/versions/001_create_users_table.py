"""Create users table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `users` table for durable deployments of the SQL backend.
How:   Integer primary key with AUTOINCREMENT on SQLite (SERIAL elsewhere),
       so deleted ids are never handed out again.

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the users table. Column docs live in userboard/models/user.py."""
    op.create_table(
        "users",

        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Storage-assigned identifier, never reused",
        ),

        # Free text, no uniqueness or format constraint
        sa.Column(
            "name",
            sa.String(255),
            nullable=True,
            comment="Display name, free text",
        ),
        sa.Column(
            "email",
            sa.String(255),
            nullable=True,
            comment="Contact address, free text, not unique",
        ),

        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the users table entirely."""
    op.drop_table("users")
