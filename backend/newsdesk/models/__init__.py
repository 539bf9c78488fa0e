"""
Database Models Package
"""
from newsdesk.models.news import News, NewsCategory

__all__ = ["News", "NewsCategory"]
