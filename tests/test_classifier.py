"""ISBN 분류기 테스트"""

import pytest

from catalog import classify, to_query
from catalog.classifier import candidate_digits
from models.query import Classification, QueryKind


class TestCandidateDigits:
    """후보열 추출 테스트"""

    def test_keep_digits_and_x(self):
        assert candidate_digits("ISBN: 0-201-61586-x") == "020161586X"

    def test_ascii_digits_only(self):
        """전각/아라비아 숫자는 버림"""
        assert candidate_digits("０１２٣") == ""


class TestIsbn10:
    """ISBN-10 판별"""

    @pytest.mark.parametrize("raw, expected", [
        ("0123456789", "0123456789"),
        ("012345678X", "012345678X"),
        ("0-123-45678-9", "0123456789"),
        ("0 123 45678 9", "0123456789"),
        ("ISBN: 0123456789", "0123456789"),
        ("ISBN 012345678x", "012345678X"),
        ("0-201-61586-X", "020161586X"),
        ("0-596-52068-9", "0596520689"),
    ])
    def test_detect(self, raw, expected):
        assert classify(raw) == Classification(QueryKind.ISBN10, expected)

    def test_checksum_not_validated(self):
        """체크 디지트 값은 검증하지 않음"""
        assert classify("0000000001").kind is QueryKind.ISBN10


class TestIsbn13:
    """ISBN-13 판별"""

    @pytest.mark.parametrize("raw, expected", [
        ("978-0-13-235088-4", "9780132350884"),
        ("978 0 123 45678 6", "9780123456786"),
        ("ISBN: 9780123456786", "9780123456786"),
        ("979-0-987-65432-1", "9790987654321"),
        ("978-1-449-31884-0", "9781449318840"),
    ])
    def test_detect(self, raw, expected):
        assert classify(raw) == Classification(QueryKind.ISBN13, expected)

    @pytest.mark.parametrize("raw", ["9770123456786", "9800123456786", "9760123456786"])
    def test_invalid_prefix(self, raw):
        """978/979 이외의 접두어는 자유 텍스트"""
        assert classify(raw).kind is QueryKind.FREE

    def test_x_not_allowed(self):
        """13자리에 X가 있으면 어느 식별자도 아님"""
        assert classify("978012345678X").kind is QueryKind.FREE


class TestPossibleIdentifier:
    """ISBN일 수도 있는 숫자열"""

    @pytest.mark.parametrize("raw", ["123456789", "12345678901", "012345678901"])
    def test_detect(self, raw):
        assert classify(raw) == Classification(QueryKind.POSSIBLE, raw)

    def test_twelve_digits_with_isbn13_prefix(self):
        """978로 시작하는 12자리는 ISBN-13이 아닌 possible"""
        assert classify("978-0-13-235088") == Classification(QueryKind.POSSIBLE, "978013235088")

    def test_embedded_in_text(self):
        """텍스트 속 숫자도 후보열에 포함"""
        assert classify("Harry Potter 123456789").kind is QueryKind.POSSIBLE

    def test_nine_with_x_is_free(self):
        """9자리 possible 구간에는 X 불가"""
        assert classify("12345678X").kind is QueryKind.FREE


class TestXPlacementVeto:
    """X 위치 규칙"""

    @pytest.mark.parametrize("raw", [
        "X123456789",
        "01234X6789",
        "978X123456786",
        "12345X789",
        "0123456789XX",
        "X12345678901",
    ])
    def test_misplaced_or_repeated_x(self, raw):
        assert classify(raw).kind is QueryKind.FREE

    def test_single_trailing_x_short(self):
        """X 하나가 끝에 있어도 길이가 맞지 않으면 자유 텍스트"""
        assert classify("Xerox").kind is QueryKind.FREE


class TestFreeText:
    """자유 텍스트"""

    @pytest.mark.parametrize("raw", [
        "",
        "The Great Gatsby",
        "1984",
        "12345678",
        "978012345678901",
        "abcdefghij",
        "클린 코드",
    ])
    def test_free(self, raw):
        assert classify(raw) == Classification(QueryKind.FREE)


class TestToQuery:
    """최종 검색어 생성"""

    def test_free_text_normalized(self):
        query = to_query("  The   Great Gatsby  ", 200)
        assert query.kind is QueryKind.FREE
        assert query.value == "The Great Gatsby"

    def test_free_text_truncated(self):
        query = to_query("a" * 250, 200)
        assert len(query.value) == 200

    def test_truncation_strips_trailing_space(self):
        query = to_query("word " * 60, 200)
        assert len(query.value) <= 200
        assert not query.value.endswith(" ")

    def test_identifier_uses_canonical(self):
        query = to_query("ISBN: 978-0-13-235088-4", 200)
        assert query.kind is QueryKind.ISBN13
        assert query.value == "9780132350884"

    def test_identifier_not_capped(self):
        """식별자는 max_length로 자르지 않음"""
        query = to_query("978-0-13-235088-4", 5)
        assert query.value == "9780132350884"

    def test_possible_identifier(self):
        query = to_query("123-456-789", 200)
        assert query.kind is QueryKind.POSSIBLE
        assert query.value == "123456789"

    def test_empty(self):
        """빈 입력도 실패하지 않음"""
        query = to_query("   ", 200)
        assert query.kind is QueryKind.FREE
        assert query.value == ""

    def test_default_max_length(self):
        assert len(to_query("b" * 300).value) == 200

    @pytest.mark.parametrize("max_length", [-1, -200])
    def test_negative_max_length_rejected(self, max_length):
        """음수 max_length는 ValueError"""
        with pytest.raises(ValueError):
            to_query("abc def", max_length)

    def test_negative_max_length_rejected_for_identifier(self):
        with pytest.raises(ValueError):
            to_query("978-0-13-235088-4", -1)

    def test_zero_max_length(self):
        assert to_query("abc def", 0).value == ""
