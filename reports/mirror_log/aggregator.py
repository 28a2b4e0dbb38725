"""
reports/mirror_log/aggregator.py - 요청 분류 스트리밍 집계기

한 번의 실행에서 사용되는 모든 가변 상태(counts, sizes)를 소유합니다.

    counts: RequestKind -> 요청 수 (200/304 구분 없이 라인마다 +1)
    sizes:  PackageKey  -> 바이트 크기 (첫 번째 200 응답 값만 기록, 이후 덮어쓰지 않음)

파일마다 초기화하지 않으며 실행 전체에 걸쳐 누적됩니다.
순위 계산(rank_usage)이 시작되면 seal()되어 더 이상 변경할 수 없습니다.
"""

from __future__ import annotations

from collections import Counter

from core.exceptions import AggregatorSealedError

from .grammar import classify
from .types import FULL_INDEX, Download, Fresh, ListingOf, PackageKey, ParsedLine, RequestKind


class UsageAggregator:
    """요청 분류 집계기

    Example:
        aggregator = UsageAggregator()
        for line in read_log_lines(path):
            aggregator.observe(line)

        report = rank_usage(aggregator)
    """

    def __init__(self) -> None:
        self.counts: Counter[RequestKind] = Counter()
        self.sizes: dict[PackageKey, int] = {}
        self._sealed = False

    def observe(self, line: bytes) -> bool:
        """로그 한 줄을 분류하여 집계

        Returns:
            집계에 반영되었으면 True, 문법에 맞지 않아 건너뛰었으면 False
        """
        self._check_open("observe")
        parsed = classify(line)
        if parsed is None:
            return False
        self.record(parsed)
        return True

    def record(self, parsed: ParsedLine) -> None:
        """파싱된 라인 하나를 반영"""
        self._check_open("record")
        self.counts[parsed.kind] += 1

        if isinstance(parsed, Fresh) and isinstance(parsed.kind, Download):
            # 첫 번째 기록만 유지
            self.sizes.setdefault(parsed.kind.key, parsed.size)

    def merge(self, other: UsageAggregator) -> None:
        """다른 집계기의 결과를 합침

        counts는 더하고, sizes는 이미 값이 있으면 유지합니다.
        입력 파일 순서대로 병합하면 순차 처리와 같은 결과가 됩니다.
        """
        self._check_open("merge")
        self.counts.update(other.counts)
        for key, size in other.sizes.items():
            self.sizes.setdefault(key, size)

    def seal(self) -> None:
        """집계 종료 (이후 변경 시 AggregatorSealedError)"""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def full_index_count(self) -> int:
        """전체 인덱스(/simple/) 요청 수"""
        return self.counts.get(FULL_INDEX, 0)

    @property
    def listing_count(self) -> int:
        """서로 다른 목록 키 수"""
        return sum(1 for kind in self.counts if isinstance(kind, ListingOf))

    @property
    def package_count(self) -> int:
        """서로 다른 패키지 키 수"""
        return sum(1 for kind in self.counts if isinstance(kind, Download))

    def _check_open(self, operation: str) -> None:
        if self._sealed:
            raise AggregatorSealedError(operation)

    def __repr__(self) -> str:
        return (
            f"UsageAggregator(kinds={len(self.counts)}, sizes={len(self.sizes)}, "
            f"sealed={self._sealed})"
        )
