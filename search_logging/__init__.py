"""검색 로깅 모듈"""

from .logger import SearchLogger
from .formatters import ConsoleFormatter, JsonFormatter

__all__ = [
    "SearchLogger",
    "ConsoleFormatter",
    "JsonFormatter",
]
