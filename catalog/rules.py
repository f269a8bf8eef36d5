"""검색어 길이 제한 및 ISBN 형태 규칙"""

import re

# 식별자 검색 경로의 최대 검색어 길이
MAX_QUERY_LENGTH = 200

# 페이지 선택 텍스트 검증 경로의 최대 길이 (분류 전에 적용)
MAX_SELECTION_LENGTH = 500

# 연속 공백 (JavaScript 정규식 공백 클래스와 같은 집합)
WHITESPACE_RUN = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

# ASCII 숫자와 X/x 이외의 문자
NON_CANDIDATE_CHARS = re.compile(r"[^0-9Xx]")

CHECK_CHAR = "X"

ISBN10_LENGTH = 10
ISBN13_LENGTH = 13

# 정확한 ISBN 형태가 아닌 "ISBN일 수도 있는" 숫자열 길이
POSSIBLE_LENGTHS = frozenset({9, 11, 12})

ISBN10_PATTERN = re.compile(r"[0-9]{9}[0-9X]")
ISBN13_PATTERN = re.compile(r"97[89][0-9]{10}")
DIGITS_PATTERN = re.compile(r"[0-9]+")

# 검색 전 URL 인코딩될 특수문자
SPECIAL_CHARS = re.compile(r"[<>\"'&]")
