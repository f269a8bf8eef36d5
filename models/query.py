from dataclasses import dataclass
from enum import Enum


class QueryKind(str, Enum):
    """검색어 분류 종류"""

    ISBN10 = "isbn10"
    ISBN13 = "isbn13"
    POSSIBLE = "possible"
    FREE = "free"

    @property
    def label(self) -> str:
        """화면 표시용 이름"""
        return _LABELS[self]

    @property
    def is_identifier(self) -> bool:
        return self is not QueryKind.FREE


_LABELS = {
    QueryKind.ISBN10: "ISBN-10",
    QueryKind.ISBN13: "ISBN-13",
    QueryKind.POSSIBLE: "Possible ISBN",
    QueryKind.FREE: "Text",
}


@dataclass(frozen=True)
class Classification:
    """검색어 분류 결과

    kind가 식별자(isbn10/isbn13/possible)이면 canonical은 숫자(와 마지막 X)만
    남긴 정규형, free이면 None.
    """

    kind: QueryKind
    canonical: str | None = None

    @property
    def is_identifier(self) -> bool:
        return self.kind.is_identifier

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "canonical": self.canonical}


@dataclass(frozen=True)
class SearchQuery:
    """카탈로그 검색에 사용할 최종 검색어"""

    kind: QueryKind
    value: str

    @property
    def classification(self) -> Classification:
        canonical = self.value if self.kind.is_identifier else None
        return Classification(self.kind, canonical)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class SelectionResult:
    """페이지 선택 텍스트 검증 결과"""

    valid: bool
    text: str = ""
    error: str | None = None
    warning: str | None = None  # 잘림 등 사용자에게 알릴 내용
    info: str | None = None

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "text": self.text,
            "error": self.error,
            "warning": self.warning,
            "info": self.info,
        }


@dataclass(frozen=True)
class SearchRequest:
    """디스패처가 만든 검색 요청 (검색어 + 카탈로그 URL)"""

    query: SearchQuery
    url: str

    def to_dict(self) -> dict:
        return {
            "kind": self.query.kind.value,
            "label": self.query.kind.label,
            "value": self.query.value,
            "url": self.url,
        }

    def summary(self) -> str:
        """요약 문자열"""
        lines = [
            f"분류: {self.query.kind.label}",
            f"검색어: {self.query.value}",
            f"URL: {self.url}",
        ]
        return "\n".join(lines)
