"""페이지 선택 텍스트 검증 및 추적"""

from typing import Any

from models.query import SelectionResult
from search_logging import SearchLogger

from .classifier import classify
from .normalizer import normalize, truncate
from .rules import MAX_SELECTION_LENGTH, SPECIAL_CHARS

logger = SearchLogger("selection")


def validate_selection(text: Any) -> SelectionResult:
    """
    선택된 텍스트 검증 및 정리

    Args:
        text: 선택 텍스트 (문자열이 아닐 수 있음)

    Returns:
        SelectionResult (500자 초과 시 잘라서 warning 포함)
    """
    if not text or not isinstance(text, str):
        result = SelectionResult(valid=False, error="No text selected")
        logger.selection_validated(False, 0, error=result.error)
        return result

    cleaned = normalize(text)

    if not cleaned:
        result = SelectionResult(valid=False, error="Selected text is empty")
    elif len(cleaned) > MAX_SELECTION_LENGTH:
        result = SelectionResult(
            valid=True,
            text=truncate(cleaned, MAX_SELECTION_LENGTH),
            warning=f"Text was truncated to {MAX_SELECTION_LENGTH} characters",
        )
    elif SPECIAL_CHARS.search(cleaned):
        # URL 인코딩되므로 검색에는 문제 없음
        result = SelectionResult(
            valid=True,
            text=cleaned,
            info="Special characters will be encoded for search",
        )
    else:
        result = SelectionResult(valid=True, text=cleaned)

    logger.selection_validated(result.valid, len(result.text), result.warning, result.error)
    return result


def inspect_selection(text: Any) -> dict[str, Any]:
    """
    선택 텍스트 검증 + ISBN 분류 결과 (팝업 응답 형식)

    Returns:
        성공: {"success": True, "text", "isbn", "warning", "info"}
        실패: {"success": False, "error"}
    """
    validation = validate_selection(text)
    if not validation.valid:
        return {"success": False, "error": validation.error}

    classification = classify(validation.text)
    return {
        "success": True,
        "text": validation.text,
        "isbn": {
            "is_isbn": classification.is_identifier,
            "kind": classification.kind.value,
            "type": classification.kind.label if classification.is_identifier else None,
            "cleaned": classification.canonical,
        },
        "warning": validation.warning,
        "info": validation.info,
    }


class SelectionTracker:
    """
    마지막 선택 텍스트 보관

    선택 이벤트를 받는 쪽이 인스턴스를 소유하고, 분류 함수에는
    텍스트를 명시적으로 넘긴다.
    """

    def __init__(self) -> None:
        self.last_selected_text = ""

    def update(self, text: str) -> bool:
        """새 선택 반영. 비어 있지 않고 이전과 다를 때만 True"""
        selected = text.strip()
        if selected and selected != self.last_selected_text:
            self.last_selected_text = selected
            return True
        return False

    def clear(self) -> None:
        self.last_selected_text = ""

    def inspect(self) -> dict[str, Any]:
        """현재 선택 텍스트의 검증/분류 결과"""
        return inspect_selection(self.last_selected_text)
