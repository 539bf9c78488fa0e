"""
News Database Models
"""
from sqlalchemy import Column, BigInteger, Integer, Text
from newsdesk.db.database import Base

# SQLite only autoincrements INTEGER primary keys
_NewsId = BigInteger().with_variant(Integer, "sqlite")


class News(Base):
    """
    News table holding the title and body of each item.
    """
    __tablename__ = "news"

    id = Column(_NewsId, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<News(id={self.id}, title='{self.title}')>"


class NewsCategory(Base):
    """
    Link table between news items and categories.
    """
    __tablename__ = "news_categories"

    news_id = Column(_NewsId, primary_key=True, autoincrement=False)
    category_id = Column(_NewsId, primary_key=True, autoincrement=False)

    def __repr__(self):
        return f"<NewsCategory(news_id={self.news_id}, category_id={self.category_id})>"
