"""
News records and API request/response schemas
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ==================== Domain records ====================

@dataclass(frozen=True)
class NewsRecord:
    """A stored news item. ``id`` is the sole lookup key and never changes."""
    id: int
    title: str = ""
    content: str = ""


@dataclass(frozen=True)
class NewsPatch:
    """Partial update; ``None`` or an empty string leaves the field as is."""
    title: Optional[str] = None
    content: Optional[str] = None


# ==================== Wire schemas ====================

class NewsPatchRequest(BaseModel):
    """
    Body of ``POST /edit/{id}``.

    Keys are matched case-insensitively, so ``Title`` and ``title`` are the
    same field. Unknown keys such as ``Id`` are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    content: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return {
            key.lower(): value
            for key, value in data.items()
            if isinstance(key, str)
        }

    def to_patch(self) -> NewsPatch:
        return NewsPatch(title=self.title, content=self.content)


class NewsView(BaseModel):
    """External view of a news record."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(serialization_alias="Id")
    title: str = Field(serialization_alias="Title")
    content: str = Field(serialization_alias="Content")


class NewsListResponse(BaseModel):
    success: bool = Field(default=True, serialization_alias="Success")
    news: List[NewsView] = Field(default_factory=list, serialization_alias="News")


class ErrorResponse(BaseModel):
    error: str
