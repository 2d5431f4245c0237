"""Infrastructure layer - Technical implementations"""

from .database import get_db, engine, SessionLocal

__all__ = ["get_db", "engine", "SessionLocal"]
