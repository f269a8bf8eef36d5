from .rules import MAX_QUERY_LENGTH, MAX_SELECTION_LENGTH
from .normalizer import normalize
from .classifier import classify, to_query
from .selection import SelectionTracker, inspect_selection, validate_selection
from .dispatcher import (
    CatalogEndpoint,
    EmptySearchTextError,
    build_search_url,
    encode_query_component,
    prepare_search,
)
from .presentation import detection_message, escape_html, truncate_text

__all__ = [
    "MAX_QUERY_LENGTH",
    "MAX_SELECTION_LENGTH",
    "normalize",
    "classify",
    "to_query",
    "SelectionTracker",
    "inspect_selection",
    "validate_selection",
    "CatalogEndpoint",
    "EmptySearchTextError",
    "build_search_url",
    "encode_query_component",
    "prepare_search",
    "detection_message",
    "escape_html",
    "truncate_text",
]
