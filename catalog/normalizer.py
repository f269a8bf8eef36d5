"""검색어 공백 정규화

공백은 JavaScript 정규식 공백 클래스와 같은 문자 집합(rules.WHITESPACE_RUN)으로 판단한다.
str.strip()과 달리 U+001C~U+001F 같은 제어문자는 공백으로 보지 않는다.
"""

from .rules import WHITESPACE_RUN


def normalize(raw: str) -> str:
    """
    연속 공백을 스페이스 하나로 줄이고 앞뒤 공백 제거

    길이 제한은 호출하는 쪽에서 결정한다 (MAX_QUERY_LENGTH, MAX_SELECTION_LENGTH).

    Args:
        raw: 사용자 입력 원문

    Returns:
        정규화된 문자열 (빈 문자열일 수 있음)
    """
    return WHITESPACE_RUN.sub(" ", raw).strip(" ")


def truncate(text: str, max_length: int) -> str:
    """max_length 글자로 자르고 잘린 끝의 공백 제거"""
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip(" ")
