# src/neta_promise/db/__init__.py
"""Database configuration and utilities."""

from .session import MAX_ROW_ID, SessionLocal, get_db

__all__ = ["get_db", "MAX_ROW_ID", "SessionLocal"]
