"""공통 테스트 fixtures"""

import pytest

from catalog import CatalogEndpoint
from search_logging import SearchLogger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """카탈로그 환경변수 제거 및 .env 없는 작업 디렉토리"""
    monkeypatch.delenv("CATALOG_SEARCH_URL", raising=False)
    monkeypatch.delenv("CATALOG_QUERY_PARAM", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def endpoint():
    """테스트용 카탈로그 엔드포인트"""
    return CatalogEndpoint(base_url="https://catalog.example.org/search", query_param="q")


@pytest.fixture
def api_client():
    """FastAPI TestClient"""
    from fastapi.testclient import TestClient

    from api.app import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_logging():
    """테스트마다 로깅 핸들러 정리 (캡처 스트림 재사용 방지)"""
    yield
    SearchLogger.configure(level="WARNING", console=False)
