"""
QuickNotes Backend — Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; SqlNoteStore.initialize()
       creates the table from Base.metadata when it is missing.
Who:   Used by SqlNoteStore for every CRUD operation.

Table Design:
    - id:      auto-incrementing integer primary key. SQLite is told to use
               AUTOINCREMENT so ids of deleted rows are never handed out
               again; PostgreSQL sequences already behave that way.
    - title:   required text, never empty (enforced before insert)
    - content: text, empty string when the client omits it
"""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from quicknotes.database import Base


class Note(Base):
    """
    A single note row.

    Lifecycle:
        1. Inserted by SqlNoteStore.create() (database assigns the id)
        2. title/content replaced in place by SqlNoteStore.update()
        3. Removed by SqlNoteStore.delete() (no tombstone)

    Query Patterns:
        - List all notes: SELECT ... ORDER BY id ASC
        - Get single note: SELECT ... WHERE id = :id (primary key lookup)
    """

    __tablename__ = "notes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
