"""검색 API 라우트"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from catalog import (
    MAX_QUERY_LENGTH,
    MAX_SELECTION_LENGTH,
    EmptySearchTextError,
    classify,
    detection_message,
    inspect_selection,
    prepare_search,
)

router = APIRouter()

EMPTY_QUERY_DETAIL = "Please enter search text"


class QueryRequest(BaseModel):
    text: str
    max_length: int = Field(default=MAX_QUERY_LENGTH, ge=1, le=MAX_SELECTION_LENGTH)


class SelectionRequest(BaseModel):
    text: str | None = None


@router.post("/query")
async def build_query(req: QueryRequest):
    """
    검색어 생성 API

    1. 공백 정규화
    2. ISBN 분류 (ISBN-10 / ISBN-13 / possible / 텍스트)
    3. 카탈로그 검색 URL 생성
    """
    try:
        search = prepare_search(req.text, req.max_length)
    except EmptySearchTextError:
        raise HTTPException(status_code=400, detail=EMPTY_QUERY_DETAIL)

    return {
        **search.to_dict(),
        "message": detection_message(search.query.classification),
    }


@router.post("/selection")
async def check_selection(req: SelectionRequest):
    """
    선택 텍스트 확인 API

    검증 실패도 200으로 응답하고 success=false로 알린다.
    """
    response = inspect_selection(req.text)
    if response["success"]:
        response["message"] = detection_message(classify(response["text"]))
    return response


@router.get("/search")
async def redirect_search(q: str = ""):
    """카탈로그 검색 페이지로 리다이렉트"""
    try:
        search = prepare_search(q)
    except EmptySearchTextError:
        raise HTTPException(status_code=400, detail=EMPTY_QUERY_DETAIL)

    return RedirectResponse(search.url, status_code=307)
