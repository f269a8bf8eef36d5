"""FastAPI 앱 진입점"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from search_logging import SearchLogger

# 로깅 설정 (콘솔 출력)
SearchLogger.configure(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    console=True,
)

app = FastAPI(
    title="Catalog Search API",
    description="검색어를 정규화하고 ISBN을 판별하여 도서관 카탈로그 검색 URL을 만드는 API",
    version="0.1.0",
)

# CORS 설정 (확장 프로그램 팝업에서 호출)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_origin_regex=r"chrome-extension://.*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
from api.routes.search import router as search_router

app.include_router(search_router, prefix="/api")


@app.get("/")
async def root():
    return {"status": "ok", "service": "catalog-search-api"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
