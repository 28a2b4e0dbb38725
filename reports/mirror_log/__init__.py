"""
reports/mirror_log - PyPI 미러 액세스 로그 분석 핵심 모듈

모듈:
    types.py        - 요청 분류 키 / 파싱 결과 타입
    grammar.py      - 로그 라인 문법 파서 (순수 함수)
    aggregator.py   - 스트리밍 집계기 (counts, sizes)
    ranking.py      - 전체 정렬 순위 및 요약 통계
    reader.py       - gzip 로그 파일 읽기
    analyzer.py     - 분석 파이프라인
    reporter/       - 콘솔 / 텍스트 덤프 / Excel 출력
"""

from .aggregator import UsageAggregator
from .analyzer import AnalysisResult, MirrorLogAnalyzer, aggregate_file
from .grammar import Fail, Ok, classify, parse_line
from .ranking import RankedListing, RankedPackage, RankedReport, UsageSummary, rank_usage
from .reader import FileStats, list_log_files, read_log_lines
from .types import (
    FULL_INDEX,
    Cached,
    Download,
    Fresh,
    FullIndexListing,
    ListingOf,
    ListKey,
    PackageKey,
    ParsedLine,
    RequestKind,
)

__all__: list[str] = [
    # 타입
    "PackageKey",
    "ListKey",
    "ListingOf",
    "Download",
    "FullIndexListing",
    "FULL_INDEX",
    "RequestKind",
    "Fresh",
    "Cached",
    "ParsedLine",
    # 문법
    "Ok",
    "Fail",
    "parse_line",
    "classify",
    # 집계 / 순위
    "UsageAggregator",
    "RankedListing",
    "RankedPackage",
    "RankedReport",
    "UsageSummary",
    "rank_usage",
    # 입력 / 파이프라인
    "FileStats",
    "list_log_files",
    "read_log_lines",
    "aggregate_file",
    "AnalysisResult",
    "MirrorLogAnalyzer",
]
