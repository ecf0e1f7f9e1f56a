"""
Student Council API — Application Package Initializer
=======================================================

What: Marks the `council` directory as a Python package.
Who:  Used by uvicorn (`council.main:app`), pytest and `python -m council`.

Architecture Note:
    The backend follows the same layered shape for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, id/timestamp rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← dataclass records + pydantic
    ├─────────────────────────────────────┤
    │      InMemoryStore (Persistence)    │  ← one instance per application
    └─────────────────────────────────────┘

    Nothing survives a restart except uploaded files on disk.
"""

__version__ = "1.0.0"
