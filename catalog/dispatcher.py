"""카탈로그 검색 URL 생성

검색어를 URL 쿼리 컴포넌트로 인코딩하여 카탈로그 검색 주소를 만든다.

설정 (환경변수 또는 .env):
    CATALOG_SEARCH_URL: 검색 엔드포인트 (기본: 토론토 공공도서관)
    CATALOG_QUERY_PARAM: 검색어 파라미터 이름 (기본: Ntt)
"""

import os
import urllib.parse
from dataclasses import dataclass

from models.query import SearchRequest
from search_logging import SearchLogger

from .classifier import to_query
from .normalizer import normalize
from .rules import MAX_QUERY_LENGTH

logger = SearchLogger("dispatcher")

DEFAULT_SEARCH_URL = "https://www.torontopubliclibrary.ca/search.jsp"
DEFAULT_QUERY_PARAM = "Ntt"

# encodeURIComponent가 인코딩하지 않는 문자 (영숫자와 -_.~ 는 quote 기본값)
URI_COMPONENT_SAFE = "!*'()"


class EmptySearchTextError(ValueError):
    """정규화 후 검색어가 비어 있음"""


def _read_env_file(key: str) -> str | None:
    """.env 파일에서 값 읽기"""
    env_paths = [".env", os.path.join(os.path.dirname(__file__), "..", ".env")]
    for env_path in env_paths:
        if os.path.exists(env_path):
            with open(env_path, encoding="utf-8") as f:
                for line in f:
                    if line.startswith(f"{key}="):
                        return line.strip().split("=", 1)[1]
    return None


@dataclass(frozen=True)
class CatalogEndpoint:
    """카탈로그 검색 엔드포인트"""

    base_url: str = DEFAULT_SEARCH_URL
    query_param: str = DEFAULT_QUERY_PARAM

    @classmethod
    def from_env(cls) -> "CatalogEndpoint":
        """환경변수 → .env → 기본값 순으로 설정 로드"""
        base_url = os.environ.get("CATALOG_SEARCH_URL") or _read_env_file("CATALOG_SEARCH_URL")
        query_param = os.environ.get("CATALOG_QUERY_PARAM") or _read_env_file("CATALOG_QUERY_PARAM")
        return cls(
            base_url=base_url or DEFAULT_SEARCH_URL,
            query_param=query_param or DEFAULT_QUERY_PARAM,
        )


def encode_query_component(value: str) -> str:
    """encodeURIComponent와 같은 규칙으로 UTF-8 퍼센트 인코딩"""
    # 짝 없는 서로게이트는 UTF-8로 표현할 수 없어 치환된다
    return urllib.parse.quote(value, safe=URI_COMPONENT_SAFE, errors="replace")


def build_search_url(value: str, endpoint: CatalogEndpoint | None = None) -> str:
    """<base_url>?<param>=<인코딩된 검색어>"""
    endpoint = endpoint or CatalogEndpoint.from_env()
    separator = "&" if "?" in endpoint.base_url else "?"
    return f"{endpoint.base_url}{separator}{endpoint.query_param}={encode_query_component(value)}"


def prepare_search(
    raw: str,
    max_length: int = MAX_QUERY_LENGTH,
    endpoint: CatalogEndpoint | None = None,
) -> SearchRequest:
    """
    사용자 입력으로 검색 요청 생성

    Args:
        raw: 사용자 입력 원문
        max_length: 자유 텍스트 최대 길이
        endpoint: 카탈로그 엔드포인트 (None이면 환경 설정)

    Returns:
        SearchRequest

    Raises:
        TypeError: raw가 문자열이 아님
        EmptySearchTextError: 정규화 후 검색어가 비어 있음
    """
    if not isinstance(raw, str):
        raise TypeError(f"search text must be str, not {type(raw).__name__}")

    query = to_query(raw, max_length)
    if not query.value:
        logger.search_rejected("empty", raw_length=len(raw))
        raise EmptySearchTextError("Search text is empty after processing")

    url = build_search_url(query.value, endpoint)
    truncated = not query.kind.is_identifier and len(normalize(raw)) > len(query.value)
    logger.query_built(
        query.kind.value,
        query.value,
        url,
        raw_length=len(raw),
        truncated=truncated,
    )
    return SearchRequest(query=query, url=url)
