"""
Sikkim Tourism Backend — Application Package
=============================================

What: REST API for destination listings, booking requests and contact messages.
Who:  Imported by uvicorn (`sikkim.main:app`), pytest and the `sikkim-server` script.

Layering:
    ┌─────────────────────────────────────┐
    │   Routes + Security (HTTP layer)    │  ← status codes, envelopes, admin gate
    ├─────────────────────────────────────┤
    │        Services (operations)        │  ← validate → insert → re-read
    ├─────────────────────────────────────┤
    │       Models & Schemas (data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database + Bootstrap (storage)    │  ← SQLite file via aiosqlite
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
