"""Full plain-text dumps of the ranked sequences.

파일 형식 (공백 구분, 순위 순서):

    목록 덤프                    패키지 덤프
    <레코드 수>                  <레코드 수>
    <name> <count>               <seg_1> <seg_2> <seg_3> <package> <count> <size>

크기를 모르는 패키지는 size를 0으로 기록합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from core.exceptions import ReportWriteError
from shared.io.file import write_lines

from ..ranking import RankedListing, RankedPackage

logger = logging.getLogger(__name__)


def listing_dump_lines(listings: list[RankedListing]) -> Iterator[str]:
    yield str(len(listings))
    for entry in listings:
        yield f"{entry.key.name} {entry.count}"


def package_dump_lines(packages: list[RankedPackage]) -> Iterator[str]:
    yield str(len(packages))
    for entry in packages:
        key = entry.key
        yield f"{key.seg_1} {key.seg_2} {key.seg_3} {key.package} {entry.count} {entry.size or 0}"


def _write(path: Union[str, Path], lines: Iterator[str]) -> Path:
    path = Path(path)
    try:
        written = write_lines(path, lines)
    except OSError as e:
        raise ReportWriteError(str(path), cause=e) from e

    logger.info(f"덤프 저장 완료: {path} ({written - 1}건)")
    return path


def write_listing_dump(path: Union[str, Path], listings: list[RankedListing]) -> Path:
    """목록 순위 전체를 파일로 저장

    Raises:
        ReportWriteError: 파일을 쓸 수 없는 경우
    """
    return _write(path, listing_dump_lines(listings))


def write_package_dump(path: Union[str, Path], packages: list[RankedPackage]) -> Path:
    """패키지 순위 전체를 파일로 저장

    Raises:
        ReportWriteError: 파일을 쓸 수 없는 경우
    """
    return _write(path, package_dump_lines(packages))
