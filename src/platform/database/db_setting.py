"""
Database configuration entry point

Re-exports the SQLAlchemy pieces models and repositories import.
"""

from src.platform.database.orm_db_setting import (
    Base,
    Database,
    dispose_engine,
    get_engine,
    get_session_maker,
)


__all__ = [
    'Base',
    'Database',
    'dispose_engine',
    'get_engine',
    'get_session_maker',
]
