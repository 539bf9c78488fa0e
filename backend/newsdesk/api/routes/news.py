"""
News API Routes
"""
import json
import re
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import structlog

from newsdesk.api.dependencies import get_store
from newsdesk.core.exceptions import InvalidInputError, NewsNotFoundError, StorageError
from newsdesk.db.store import NewsStore
from newsdesk.schemas import ErrorResponse, NewsListResponse, NewsPatch, NewsPatchRequest
from newsdesk.services.news import find_and_merge, project

logger = structlog.get_logger()
router = APIRouter()

INVALID_JSON = "Invalid JSON"
NEWS_NOT_FOUND = "News not found"
INTERNAL_ERROR = "Internal Server Error"

# Plain ASCII decimal, as a signed 64-bit column key
_NEWS_ID_PATTERN = re.compile(r"-?[0-9]+")
_NEWS_ID_MIN = -(2 ** 63)
_NEWS_ID_MAX = 2 ** 63 - 1


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _parse_news_id(raw: str) -> Optional[int]:
    if not _NEWS_ID_PATTERN.fullmatch(raw):
        return None
    news_id = int(raw)
    if not _NEWS_ID_MIN <= news_id <= _NEWS_ID_MAX:
        return None
    return news_id


def _decode_patch(body: bytes) -> NewsPatch:
    """Decode the request body into a patch or raise InvalidInputError."""
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise InvalidInputError("body is not valid JSON") from e
    try:
        return NewsPatchRequest.model_validate(payload).to_patch()
    except ValidationError as e:
        raise InvalidInputError("body does not match the news schema") from e


@router.post("/edit/{news_id}")
async def edit_news(
    news_id: str,
    request: Request,
    store: NewsStore = Depends(get_store),
):
    """
    Partially update a news item.

    Non-empty Title/Content replace the stored values; anything else is kept.
    """
    try:
        patch = _decode_patch(await request.body())
    except InvalidInputError as e:
        logger.info("Rejected edit payload", news_id=news_id, reason=str(e))
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    parsed_id = _parse_news_id(news_id)
    if parsed_id is None:
        return _error(status.HTTP_404_NOT_FOUND, NEWS_NOT_FOUND)

    try:
        saved = await find_and_merge(store, parsed_id, patch)
    except NewsNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, NEWS_NOT_FOUND)
    except StorageError as e:
        logger.error("Edit failed on storage", news_id=parsed_id, error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    view = project([saved])[0]
    return JSONResponse(status_code=status.HTTP_200_OK, content=view.model_dump(by_alias=True))


@router.get("/list")
async def list_news(store: NewsStore = Depends(get_store)):
    """
    List every news item.
    """
    try:
        records = await store.get_all()
    except StorageError as e:
        logger.error("Listing failed on storage", error=str(e))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    body = NewsListResponse(success=True, news=project(records))
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump(by_alias=True))
