"""
reports/mirror_log/types.py - 미러 로그 분석 데이터 타입

요청 분류 키:
    PackageKey        - 다운로드 가능한 패키지 파일 (/packages/<2>/<2>/<60>/<file>)
    ListKey           - 패키지 디렉토리 목록 (/simple/<name>/)

RequestKind (집계 키, 닫힌 태그 유니온):
    ListingOf(ListKey)
    Download(PackageKey)
    FullIndexListing       - 전체 인덱스 목록 (/simple/), 페이로드 없음

ParsedLine (문법 파서 결과):
    Fresh(kind, size)      - HTTP 200, 전송 크기 확인됨
    Cached(kind)           - HTTP 304, 재전송 없음
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# 경로 세그먼트 고정 길이 (바이트)
SEG_1_LENGTH = 2
SEG_2_LENGTH = 2
SEG_3_LENGTH = 60


@dataclass(frozen=True, order=True)
class PackageKey:
    """패키지 파일 식별자

    동등성/정렬은 (seg_1, seg_2, seg_3, package) 순서의 구조적 비교입니다.
    """

    seg_1: str
    seg_2: str
    seg_3: str
    package: str

    @property
    def path(self) -> str:
        """/packages/ 이하 경로"""
        return f"{self.seg_1}/{self.seg_2}/{self.seg_3}/{self.package}"


@dataclass(frozen=True, order=True)
class ListKey:
    """패키지 디렉토리 목록 식별자 (/simple/<name>/)"""

    name: str


@dataclass(frozen=True)
class ListingOf:
    """특정 패키지의 디렉토리 목록 요청"""

    key: ListKey


@dataclass(frozen=True)
class Download:
    """패키지 파일 다운로드 요청"""

    key: PackageKey


@dataclass(frozen=True)
class FullIndexListing:
    """전체 인덱스 목록 요청 (모든 인스턴스가 동일한 키)"""


FULL_INDEX = FullIndexListing()

RequestKind = Union[ListingOf, Download, FullIndexListing]


@dataclass(frozen=True)
class Fresh:
    """HTTP 200 응답 (전송 크기 포함)"""

    kind: RequestKind
    size: int


@dataclass(frozen=True)
class Cached:
    """HTTP 304 응답 (크기 없음)"""

    kind: RequestKind


ParsedLine = Union[Fresh, Cached]
