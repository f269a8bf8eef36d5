#!/usr/bin/env python3
"""
Catalog Search - ISBN-aware Library Search Query Builder
검색어(또는 선택 텍스트)를 정규화하고 ISBN을 판별하여 카탈로그 검색 URL을 만듭니다.
"""

import argparse
import json
import sys
import time
import uuid
from pathlib import Path

import pandas as pd

from catalog import (
    MAX_QUERY_LENGTH,
    CatalogEndpoint,
    EmptySearchTextError,
    detection_message,
    prepare_search,
)
from models.query import QueryKind, SearchRequest
from search_logging import SearchLogger

# 메인 로거
logger = SearchLogger("main")


def build_requests(
    queries: list[str],
    max_length: int = MAX_QUERY_LENGTH,
    endpoint: CatalogEndpoint | None = None,
) -> list[SearchRequest]:
    """
    여러 검색어를 한 번에 처리

    빈 검색어는 건너뛰고, 분류별 개수를 요약 로그로 남긴다.

    Args:
        queries: 검색어 목록
        max_length: 자유 텍스트 최대 길이
        endpoint: 카탈로그 엔드포인트

    Returns:
        SearchRequest 목록 (빈 검색어 제외)
    """
    logger.set_request_id(uuid.uuid4().hex[:8])
    endpoint = endpoint or CatalogEndpoint.from_env()

    start_time = time.perf_counter()
    requests: list[SearchRequest] = []
    counts = {kind.value: 0 for kind in QueryKind}

    for raw in queries:
        try:
            request = prepare_search(raw, max_length, endpoint)
        except EmptySearchTextError:
            continue
        requests.append(request)
        counts[request.query.kind.value] += 1

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.batch_complete(len(requests), counts, elapsed_ms)

    return requests


def print_results(requests: list[SearchRequest]) -> None:
    """결과 출력"""
    print(f"\n{'=' * 60}")
    print(f"검색어 {len(requests)}건")
    print(f"{'=' * 60}")

    if not requests:
        print("검색할 텍스트가 없습니다.")
        return

    for request in requests:
        print()
        print(request.summary())
        message = detection_message(request.query.classification)
        if message:
            print(f"  {message}")

    print(f"\n{'-' * 60}")


def save_results(requests: list[SearchRequest], output: str, format: str) -> None:
    """결과 저장"""
    if format == "csv":
        df = pd.DataFrame([r.to_dict() for r in requests], columns=["kind", "label", "value", "url"])
        df.to_csv(output, index=False, encoding="utf-8-sig")
        print(f"\n결과가 {output}에 저장되었습니다.")

    elif format == "json":
        with open(output, "w", encoding="utf-8") as f:
            json.dump([r.to_dict() for r in requests], f, ensure_ascii=False, indent=2)
        print(f"\n결과가 {output}에 저장되었습니다.")


def read_queries(path: str) -> list[str]:
    """파일에서 한 줄에 하나씩 검색어 읽기"""
    return Path(path).read_text(encoding="utf-8").splitlines()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="검색어를 정규화하고 ISBN을 판별하여 도서관 카탈로그 검색 URL을 만듭니다.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  python main.py --query "978-0-13-235088-4"
  python main.py --query "  The   Great Gatsby  "
  python main.py --input isbns.txt --output queries.csv --format csv
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--query", "-q", type=str, help="검색어 (ISBN 또는 제목)")
    source.add_argument("--input", "-i", type=str, help="검색어 파일 (한 줄에 하나)")

    parser.add_argument(
        "--max-length",
        type=int,
        default=MAX_QUERY_LENGTH,
        help=f"자유 텍스트 최대 길이 (기본: {MAX_QUERY_LENGTH})",
    )

    parser.add_argument(
        "--output", "-o", type=str, default=None, help="출력 파일 경로"
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["csv", "json"],
        default="csv",
        help="출력 형식 (기본: csv)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="로깅 레벨 (기본: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="로그 파일 경로 (JSON Lines 포맷)",
    )

    args = parser.parse_args(argv)

    if args.max_length < 1:
        parser.error("--max-length는 1 이상이어야 합니다")

    # 로깅 설정
    SearchLogger.configure(
        level=args.log_level,
        log_file=args.log_file,
        console=True,
    )

    if args.query is not None:
        try:
            requests = [prepare_search(args.query, args.max_length)]
        except EmptySearchTextError:
            print("Error: 검색어를 입력해주세요", file=sys.stderr)
            return 1
    else:
        try:
            queries = read_queries(args.input)
        except OSError as e:
            logger.error("input_read_failed", str(e), {"path": args.input})
            print(f"Error: 입력 파일을 읽을 수 없습니다: {args.input}", file=sys.stderr)
            return 1
        requests = build_requests(queries, args.max_length)

    print_results(requests)

    if args.output:
        save_results(requests, args.output, args.format)

    return 0


if __name__ == "__main__":
    sys.exit(main())
