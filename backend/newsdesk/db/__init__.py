"""
Database module
"""
from newsdesk.db.database import Base, build_engine, build_session_factory, init_db, close_db

__all__ = ["Base", "build_engine", "build_session_factory", "init_db", "close_db"]
