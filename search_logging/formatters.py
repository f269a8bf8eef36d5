"""로그 포매터"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# LogRecord 기본 속성 (extra 필드가 아닌 것)
SKIP_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class ConsoleFormatter(logging.Formatter):
    """
    콘솔용 사람이 읽기 쉬운 포맷

    출력 예시:
    2024-01-15 10:30:45 [INFO] [dispatcher] 검색어 생성: ISBN-13 "9780132350884"
    2024-01-15 10:30:45 [WARNING] [dispatcher] 검색 거부: empty
    """

    # ANSI 색상 코드
    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",   # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    KIND_LABELS = {
        "isbn10": "ISBN-10",
        "isbn13": "ISBN-13",
        "possible": "Possible ISBN",
        "free": "텍스트",
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        level_color = self.COLORS.get(record.levelno, "")
        level_name = record.levelname

        component = getattr(record, "component", "")
        event = getattr(record, "event", "")

        prefix = f"{self.DIM}{timestamp}{self.RESET} [{level_color}{level_name}{self.RESET}]"
        if component:
            prefix += f" [{self.BOLD}{component}{self.RESET}]"

        message = self._format_event(record, event)

        return f"{prefix} {message}"

    def _format_event(self, record: logging.LogRecord, event: str) -> str:
        """이벤트 타입별 메시지 포맷팅"""

        if event == "query_built":
            kind = getattr(record, "kind", "")
            value = getattr(record, "value", "")
            truncated = getattr(record, "truncated", False)

            label = self.KIND_LABELS.get(kind, kind)
            value = self._shorten(value, 60)
            suffix = " (잘림)" if truncated else ""
            return f"검색어 생성: {label} \"{value}\"{suffix}"

        elif event == "search_rejected":
            reason = getattr(record, "reason", "")
            return f"검색 거부: {reason}"

        elif event == "selection_validated":
            valid = getattr(record, "valid", False)
            length = getattr(record, "length", 0)
            if valid:
                warning = getattr(record, "warning", None)
                warning_str = f" - {warning}" if warning else ""
                return f"선택 텍스트 확인: {length}자{warning_str}"
            error = getattr(record, "error", "")
            return f"선택 텍스트 없음: {error}"

        elif event == "batch_complete":
            total = getattr(record, "total", 0)
            elapsed_ms = getattr(record, "elapsed_ms", 0)
            return f"일괄 처리 완료: {total:,}건 ({elapsed_ms:.0f}ms)"

        elif event == "debug":
            return getattr(record, "debug_msg", "")

        else:
            error = getattr(record, "error", "")
            if error:
                return f"{event}: {error}"
            return event

    @staticmethod
    def _shorten(text: str, limit: int) -> str:
        if len(text) > limit:
            return text[: limit - 3] + "..."
        return text


class JsonFormatter(logging.Formatter):
    """
    JSON Lines 포맷 (기계 분석용)

    출력 예시:
    {"ts":"2024-01-15T10:30:45.123Z","level":"INFO","component":"dispatcher","event":"query_built",...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
        }

        for key, value in record.__dict__.items():
            if key not in SKIP_ATTRS and not key.startswith("_"):
                # JSON 직렬화 가능한 값만 그대로
                if isinstance(value, (str, int, float, bool, type(None), list, dict)):
                    log_entry[key] = value
                else:
                    log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False)
