"""ISBN 분류기

검색어에서 숫자와 X만 남긴 후보열(candidate)을 만들어 형태 규칙과 비교한다.

판정 순서:
1. X가 둘 이상이거나 마지막 자리가 아니면 → 자유 텍스트
2. 10자리, 숫자 9개 + 숫자/X → ISBN-10
3. 13자리, 978/979로 시작하는 숫자 → ISBN-13
4. 9, 11, 12자리 숫자 → ISBN일 수도 있음 (possible)
5. 나머지 → 자유 텍스트

체크 디지트 값은 검증하지 않는다.

사용 예:
    classify("978-0-13-235088-4")  # Classification(ISBN13, "9780132350884")
    to_query("  The   Great Gatsby  ")  # SearchQuery(FREE, "The Great Gatsby")
"""

from models.query import Classification, QueryKind, SearchQuery

from .normalizer import normalize, truncate
from .rules import (
    CHECK_CHAR,
    DIGITS_PATTERN,
    ISBN10_LENGTH,
    ISBN10_PATTERN,
    ISBN13_LENGTH,
    ISBN13_PATTERN,
    MAX_QUERY_LENGTH,
    NON_CANDIDATE_CHARS,
    POSSIBLE_LENGTHS,
)

FREE_TEXT = Classification(kind=QueryKind.FREE)


def candidate_digits(text: str) -> str:
    """숫자와 X만 남긴 후보열 (X는 대문자로)"""
    return NON_CANDIDATE_CHARS.sub("", text).upper()


def _x_misplaced(candidate: str) -> bool:
    """X가 둘 이상이거나 마지막 자리가 아닌지 확인"""
    count = candidate.count(CHECK_CHAR)
    if count == 0:
        return False
    return count > 1 or not candidate.endswith(CHECK_CHAR)


def classify(normalized: str) -> Classification:
    """
    검색어를 ISBN-10 / ISBN-13 / possible / 자유 텍스트 중 하나로 분류

    Args:
        normalized: normalize()를 거친 검색어

    Returns:
        Classification (식별자면 canonical에 정규형)
    """
    candidate = candidate_digits(normalized)

    if _x_misplaced(candidate):
        return FREE_TEXT

    length = len(candidate)

    if length == ISBN10_LENGTH and ISBN10_PATTERN.fullmatch(candidate):
        return Classification(QueryKind.ISBN10, candidate)

    if length == ISBN13_LENGTH and ISBN13_PATTERN.fullmatch(candidate):
        return Classification(QueryKind.ISBN13, candidate)

    # 978로 시작하는 12자리도 ISBN-13으로 올리지 않고 possible로 둔다
    if length in POSSIBLE_LENGTHS and DIGITS_PATTERN.fullmatch(candidate):
        return Classification(QueryKind.POSSIBLE, candidate)

    return FREE_TEXT


def to_query(raw: str, max_length: int = MAX_QUERY_LENGTH) -> SearchQuery:
    """
    최종 검색어 생성

    식별자는 정규형을 그대로 쓰고 (최대 13자), 자유 텍스트는
    max_length로 자른다.

    Raises:
        ValueError: max_length가 음수
    """
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")

    normalized = normalize(raw)
    classification = classify(normalized)

    if classification.is_identifier:
        return SearchQuery(classification.kind, classification.canonical)

    return SearchQuery(QueryKind.FREE, truncate(normalized, max_length))
