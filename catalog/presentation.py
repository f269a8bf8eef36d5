"""화면 표시용 헬퍼"""

import html

from models.query import Classification

BUTTON_TEXT_LENGTH = 20


def detection_message(classification: Classification) -> str | None:
    """ISBN 감지 안내 문구 (자유 텍스트면 None)"""
    if not classification.is_identifier:
        return None
    return f"Detected {classification.kind.label}: {classification.canonical}"


def truncate_text(text: str, max_length: int) -> str:
    """표시용 축약 (넘치면 ... 붙임)"""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def escape_html(text: str) -> str:
    return html.escape(text)


def selection_button_label(text: str) -> str:
    """선택 텍스트 검색 버튼 문구"""
    return f'Search: "{truncate_text(text, BUTTON_TEXT_LENGTH)}"'
