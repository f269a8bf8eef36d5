"""검색 전용 로거"""

import logging
import sys
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter


class SearchLogger:
    """
    검색 전용 로거

    - 콘솔: 사람이 읽기 쉬운 컬러 포맷
    - 파일: JSON Lines 포맷 (기계 분석용)

    Usage:
        logger = SearchLogger("dispatcher")
        logger.query_built("isbn13", "9780132350884", url, raw_length=17)
        logger.search_rejected("empty", raw_length=3)
    """

    _root_logger: logging.Logger | None = None
    _file_handler: logging.FileHandler | None = None
    _console_handler: logging.StreamHandler | None = None

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"search.{name}")
        self._request_id: str | None = None

    def set_request_id(self, request_id: str) -> None:
        """요청 단위 ID 설정"""
        self._request_id = request_id

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_file: str | Path | None = None,
        console: bool = True,
    ) -> None:
        """
        전역 로깅 설정

        Args:
            level: 로깅 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_file: JSON Lines 로그 파일 경로
            console: 콘솔 출력 여부
        """
        root = logging.getLogger("search")
        root.setLevel(getattr(logging, level.upper()))

        # 기존 핸들러 제거
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        cls._console_handler = None
        cls._file_handler = None

        # 콘솔 핸들러
        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ConsoleFormatter())
            root.addHandler(console_handler)
            cls._console_handler = console_handler

        # 파일 핸들러 (JSON Lines)
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)
            cls._file_handler = file_handler

        cls._root_logger = root

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        """구조화된 로그 출력"""
        extra = {
            "component": self.name,
            "event": event,
            "request_id": self._request_id,
            **kwargs,
        }
        self.logger.log(level, "", extra=extra)

    # === 검색어 로깅 ===

    def query_built(
        self,
        kind: str,
        value: str,
        url: str,
        raw_length: int = 0,
        truncated: bool = False,
    ) -> None:
        """
        검색어 생성 완료 로깅

        Args:
            kind: 분류 (isbn10, isbn13, possible, free)
            value: 최종 검색어
            url: 카탈로그 검색 URL
            raw_length: 입력 원문 길이
            truncated: 자유 텍스트가 잘렸는지 여부
        """
        self._log(
            logging.INFO,
            "query_built",
            kind=kind,
            value=value,
            url=url,
            raw_length=raw_length,
            truncated=truncated,
        )

    def search_rejected(self, reason: str, raw_length: int = 0) -> None:
        """검색 거부 로깅 (빈 검색어 등)"""
        self._log(
            logging.WARNING,
            "search_rejected",
            reason=reason,
            raw_length=raw_length,
        )

    def selection_validated(
        self,
        valid: bool,
        length: int,
        warning: str | None = None,
        error: str | None = None,
    ) -> None:
        """선택 텍스트 검증 로깅"""
        level = logging.DEBUG if valid and not warning else logging.INFO
        self._log(
            level,
            "selection_validated",
            valid=valid,
            length=length,
            warning=warning,
            error=error,
        )

    def batch_complete(self, total: int, counts: dict[str, int], elapsed_ms: float) -> None:
        """
        일괄 처리 요약 로깅

        JSON 로그 스키마가 일정하도록 분류별 개수를 모두 기록한다 (없으면 0).
        """
        summary: dict[str, Any] = {
            "total": total,
            "elapsed_ms": round(elapsed_ms, 1),
        }
        for kind, count in counts.items():
            summary[f"count_{kind}"] = count

        self._log(logging.INFO, "batch_complete", **summary)

    # === 에러 로깅 ===

    def error(self, event: str, error: str, context: dict[str, Any] | None = None) -> None:
        """에러 로깅"""
        self._log(
            logging.ERROR,
            event,
            error=error,
            **(context or {}),
        )

    # === 디버그 로깅 ===

    def debug(self, debug_msg: str, **kwargs: Any) -> None:
        """디버그 메시지 로깅"""
        self._log(logging.DEBUG, "debug", debug_msg=debug_msg, **kwargs)
