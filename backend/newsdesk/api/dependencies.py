"""
FastAPI dependencies
"""
from fastapi import Request

from newsdesk.db.store import NewsStore


def get_store(request: Request) -> NewsStore:
    """Record store built once in the application lifespan."""
    return request.app.state.store
