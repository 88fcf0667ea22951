"""
UserBoard Backend — Application Package Initializer
====================================================

What: Marks the `userboard` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Delegation)        │  ← Schema ↔ entity conversion
    ├─────────────────────────────────────┤
    │     Repositories (Storage Access)   │  ← In-memory dict or SQLAlchemy
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Only the repository holds state; every other layer is a pass-through.
"""

__version__ = "1.0.0"
