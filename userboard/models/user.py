"""
UserBoard Backend — User SQLAlchemy Model
===========================================

What:  ORM entity representing the `users` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Stored by both repositories (the in-memory one keeps transient instances).

Table Design:
    - Integer primary key assigned by storage, never reused after deletion.
      SQLite only guarantees that with the AUTOINCREMENT keyword, hence
      sqlite_autoincrement on the table.
    - name / email: free text, nullable, no uniqueness or format constraint.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userboard.database import Base


class User(Base):
    """
    A person listed on the board.

    Lifecycle:
        1. Created via POST /api/users (id assigned by the repository)
        2. Listed via GET /api/users
        3. Deleted via DELETE /api/users/{id}
        There is no update path.
    """

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Storage-assigned identifier, never reused",
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name, free text",
    )

    email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Contact address, free text, not unique",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name!r}, email={self.email!r})>"
