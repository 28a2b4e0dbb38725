"""
reports/mirror_log/reader.py - 입력 로그 파일 제공자

디렉토리의 gzip 로그 파일을 나열하고 라인 단위로 읽습니다.

- 디렉토리 바로 아래의 일반 파일만 대상으로 하며 하위 디렉토리는 건너뜁니다.
- 파일은 이름순으로 정렬되어 실행마다 같은 순서로 처리됩니다.
- 열기/읽기/압축 해제 실패는 LogReadError로 전파되어 실행 전체를 중단합니다.
  (문법 불일치로 인한 라인 건너뛰기와는 구분됩니다)
"""

from __future__ import annotations

import logging
import zlib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from core.exceptions import LogReadError
from shared.io.file import iter_gzip_lines

logger = logging.getLogger(__name__)


@dataclass
class FileStats:
    """파일별 처리 통계 (진행 상황 보고용)

    Attributes:
        path: 로그 파일 경로
        total_lines: 읽은 전체 라인 수
        valid_lines: 집계에 반영된 라인 수
    """

    path: Path
    total_lines: int = 0
    valid_lines: int = 0

    @property
    def skipped_lines(self) -> int:
        return self.total_lines - self.valid_lines


def list_log_files(directory: Union[str, Path]) -> list[Path]:
    """디렉토리의 로그 파일 목록 (이름순)

    Args:
        directory: gzip 로그 파일이 있는 디렉토리

    Returns:
        정렬된 파일 경로 리스트

    Raises:
        LogReadError: 디렉토리를 읽을 수 없는 경우
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise LogReadError(str(directory), "디렉토리를 읽을 수 없습니다", cause=e) from e

    files = []
    for entry in entries:
        if entry.is_file():
            files.append(entry)
        else:
            logger.debug(f"파일이 아닌 항목 건너뜀: {entry}")
    return files


def read_log_lines(path: Union[str, Path]) -> Iterator[bytes]:
    """gzip 로그 파일의 라인을 지연 생성

    Args:
        path: gzip 로그 파일 경로

    Yields:
        개행 문자를 제외한 라인 바이트열

    Raises:
        LogReadError: 파일 열기/읽기/압축 해제 실패
    """
    try:
        yield from iter_gzip_lines(path)
    except (OSError, EOFError, zlib.error) as e:
        raise LogReadError(str(path), "파일을 읽거나 압축 해제할 수 없습니다", cause=e) from e
