"""
shared/io/file/io.py - 파일 I/O 유틸리티
"""

import gzip
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        생성된 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def iter_gzip_lines(filepath: Union[str, Path]) -> Iterator[bytes]:
    """gzip 파일을 한 줄씩 읽기 (지연 평가)

    줄 끝의 ``\\n`` / ``\\r\\n``은 제거됩니다.
    열기/읽기/압축 해제 오류는 그대로 전파됩니다 (OSError, EOFError, zlib.error).

    Args:
        filepath: gzip 파일 경로

    Yields:
        라인 바이트열
    """
    with gzip.open(filepath, "rb") as stream:
        for raw in stream:
            yield raw.rstrip(b"\r\n")


def write_lines(
    filepath: Union[str, Path],
    lines: Iterable[str],
    encoding: str = "utf-8",
) -> int:
    """텍스트 라인 쓰기 (상위 디렉토리 자동 생성)

    Args:
        filepath: 파일 경로
        lines: 개행 문자를 제외한 라인들
        encoding: 인코딩 (기본값: utf-8)

    Returns:
        작성한 라인 수
    """
    filepath = Path(filepath)
    ensure_dir(filepath.parent)

    written = 0
    with filepath.open("w", encoding=encoding, newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")
            written += 1
    return written
