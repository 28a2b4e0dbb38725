"""
reports/mirror_log/ranking.py - 순위 계산 및 요약 통계

집계기의 counts/sizes를 한 번만 소비하여 다음을 생성합니다.

    listings:  ListingOf 항목 전체 (요청 수 내림차순, 동률은 ListKey 오름차순)
    packages:  Download 항목 전체 (요청 수 내림차순, 동률은 PackageKey 오름차순)
    summary:   키 수, 요청 수 합계, 전송량, 크기 가중 평균 전송량

상위 N개만 표시하더라도 정렬과 통계는 항상 전체 집합을 대상으로 합니다.
FullIndexListing은 순위에 포함되지 않고 summary.full_index_count로 보고됩니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .aggregator import UsageAggregator
from .types import Download, ListingOf, ListKey, PackageKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedListing:
    """순위가 매겨진 목록 항목"""

    count: int
    key: ListKey


@dataclass(frozen=True)
class RankedPackage:
    """순위가 매겨진 패키지 항목

    Attributes:
        count: 요청 수
        key: 패키지 키
        size: 첫 번째 200 응답의 크기 (304로만 요청된 경우 None)
    """

    count: int
    key: PackageKey
    size: Optional[int] = None

    @property
    def transferred(self) -> int:
        """추정 전송량 (크기를 모르면 0)"""
        return self.count * (self.size or 0)


@dataclass(frozen=True)
class UsageSummary:
    """요약 통계

    Attributes:
        full_index_count: 전체 인덱스(/simple/) 요청 수
        listing_keys: 서로 다른 목록 키 수
        package_keys: 서로 다른 패키지 키 수
        listing_requests: 목록 요청 수 합계
        package_requests: 패키지 요청 수 합계
        transferred_bytes: Σ(요청 수 × 크기), 크기를 모르는 패키지는 0
        average_transfer: transferred_bytes / package_requests (요청이 없으면 None)
    """

    full_index_count: int = 0
    listing_keys: int = 0
    package_keys: int = 0
    listing_requests: int = 0
    package_requests: int = 0
    transferred_bytes: int = 0
    average_transfer: Optional[float] = None

    @property
    def average_defined(self) -> bool:
        return self.average_transfer is not None


@dataclass
class RankedReport:
    """순위 계산 결과"""

    listings: list[RankedListing] = field(default_factory=list)
    packages: list[RankedPackage] = field(default_factory=list)
    summary: UsageSummary = field(default_factory=UsageSummary)


def rank_listings(aggregator: UsageAggregator) -> list[RankedListing]:
    """목록 항목 전체를 요청 수 내림차순으로 정렬"""
    entries = [
        RankedListing(count=count, key=kind.key)
        for kind, count in aggregator.counts.items()
        if isinstance(kind, ListingOf)
    ]
    entries.sort(key=lambda entry: (-entry.count, entry.key))
    return entries


def rank_packages(aggregator: UsageAggregator) -> list[RankedPackage]:
    """패키지 항목 전체를 요청 수 내림차순으로 정렬 (크기 포함)"""
    entries = [
        RankedPackage(count=count, key=kind.key, size=aggregator.sizes.get(kind.key))
        for kind, count in aggregator.counts.items()
        if isinstance(kind, Download)
    ]
    entries.sort(key=lambda entry: (-entry.count, entry.key))
    return entries


def summarize(
    full_index_count: int,
    listings: list[RankedListing],
    packages: list[RankedPackage],
) -> UsageSummary:
    """정렬된 전체 시퀀스로부터 요약 통계 계산"""
    package_requests = sum(entry.count for entry in packages)
    transferred_bytes = sum(entry.transferred for entry in packages)

    if package_requests:
        average: Optional[float] = transferred_bytes / package_requests
    else:
        logger.warning("패키지 요청이 없어 평균 전송 크기를 계산할 수 없습니다")
        average = None

    return UsageSummary(
        full_index_count=full_index_count,
        listing_keys=len(listings),
        package_keys=len(packages),
        listing_requests=sum(entry.count for entry in listings),
        package_requests=package_requests,
        transferred_bytes=transferred_bytes,
        average_transfer=average,
    )


def rank_usage(aggregator: UsageAggregator) -> RankedReport:
    """집계 결과를 소비하여 순위와 요약 통계를 생성

    호출 시점에 집계기는 seal()되어 이후 변경할 수 없습니다.

    Args:
        aggregator: 모든 입력 파일을 반영한 집계기

    Returns:
        RankedReport
    """
    aggregator.seal()

    listings = rank_listings(aggregator)
    packages = rank_packages(aggregator)
    summary = summarize(aggregator.full_index_count, listings, packages)

    logger.debug(
        f"순위 계산 완료: 목록 {summary.listing_keys}개, 패키지 {summary.package_keys}개"
    )
    return RankedReport(listings=listings, packages=packages, summary=summary)
