"""
tests/conftest.py - pytest 공통 픽스처

액세스 로그 라인 생성 헬퍼와 gzip 로그 디렉토리 픽스처를 제공합니다.

Usage:
    def test_something(log_dir):
        directory = log_dir({"access-01.gz": [download_line(...)]})
        ...
"""

import gzip
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 라인 생성 헬퍼
# =============================================================================

SEG_3 = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789ab"
HEAD = '10.0.0.1 - - [19/Oct/2026:10:00:00 +0000] '
TAIL = ' "-" "pip/24.0"'


def request_line(url: str, status: int = 200, size: int = 100, protocol: str = "HTTP/1.1") -> bytes:
    """combined 형식 로그 한 줄 (개행 없음)"""
    return f'{HEAD}"GET {url} {protocol}" {status} {size}{TAIL}'.encode()


def download_line(
    package: str = "foo-1.0.tar.gz",
    status: int = 200,
    size: int = 100,
    seg_1: str = "ab",
    seg_2: str = "cd",
    seg_3: str = SEG_3,
    protocol: str = "HTTP/1.1",
) -> bytes:
    return request_line(f"/packages/{seg_1}/{seg_2}/{seg_3}/{package}", status, size, protocol)


def listing_line(name: str = "requests", status: int = 200, size: int = 100, protocol: str = "HTTP/1.1") -> bytes:
    return request_line(f"/simple/{name}/", status, size, protocol)


def full_index_line(status: int = 200, size: int = 512, protocol: str = "HTTP/1.1") -> bytes:
    return request_line("/simple/", status, size, protocol)


def write_gzip_log(path: Path, lines: List[bytes]) -> Path:
    """라인 목록을 gzip 파일로 저장"""
    with gzip.open(path, "wb") as f:
        for line in lines:
            f.write(line + b"\n")
    return path


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def clean_mirror_stats_env(monkeypatch):
    """MIRROR_STATS_* 환경변수 제거"""
    for key in list(os.environ):
        if key.startswith("MIRROR_STATS_"):
            monkeypatch.delenv(key, raising=False)
    yield


# =============================================================================
# 로그 디렉토리 픽스처
# =============================================================================


@pytest.fixture
def log_dir(tmp_path) -> Callable[[Dict[str, List[bytes]]], Path]:
    """파일명 -> 라인 목록 딕셔너리로 gzip 로그 디렉토리 생성"""

    def _create(files: Dict[str, List[bytes]], name: str = "logs") -> Path:
        directory = tmp_path / name
        directory.mkdir(exist_ok=True)
        for filename, lines in files.items():
            write_gzip_log(directory / filename, lines)
        return directory

    return _create


@pytest.fixture
def sample_log_dir(log_dir) -> Path:
    """여러 요청 유형이 섞인 2개 파일 디렉토리"""
    return log_dir(
        {
            "access-01.gz": [
                full_index_line(),
                listing_line("requests"),
                listing_line("requests"),
                listing_line("flask", status=304),
                download_line("foo-1.0.tar.gz", size=9001),
                b"garbage line without quotes",
                download_line("bar-2.0.whl", status=500),
            ],
            "access-02.gz": [
                download_line("foo-1.0.tar.gz", status=304),
                download_line("foo-1.0.tar.gz", size=1),
                download_line("bar-2.0.whl", size=200),
                listing_line("flask"),
            ],
        }
    )
