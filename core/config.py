"""
core/config.py - 중앙 설정 관리

버전 정보, 기본 설정값, 환경변수 헬퍼를 제공합니다.

환경변수:
    MIRROR_STATS_LIST_TOP           콘솔에 표시할 목록(listing) 순위 수 (기본 10)
    MIRROR_STATS_PACKAGE_TOP        콘솔에 표시할 패키지 순위 수 (기본 100)
    MIRROR_STATS_PROGRESS_INTERVAL  진행 상황 갱신 간격 (유효 라인 수, 기본 10000)
    MIRROR_STATS_WORKERS            파일 파싱 프로세스 수 (기본 1 = 순차 처리)
    LOG_LEVEL / LOG_FORMAT          로깅 설정

Usage:
    from core.config import AnalyzerSettings, get_version

    analyzer_settings = AnalyzerSettings.from_env()
    print(get_version())
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from importlib import metadata
from pathlib import Path

from core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PACKAGE_NAME = "pypi-mirror-stats"
ENV_PREFIX = "MIRROR_STATS_"


# =============================================================================
# 고정 설정
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """애플리케이션 상수 (불변)"""

    # 콘솔 미리보기
    DEFAULT_LIST_TOP: int = 10
    DEFAULT_PACKAGE_TOP: int = 100

    # 진행 상황 표시 (유효 라인 기준)
    DEFAULT_PROGRESS_INTERVAL: int = 10_000

    # 병렬 파싱
    DEFAULT_WORKERS: int = 1
    MAX_WORKERS: int = 64


settings = Settings()


# =============================================================================
# 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환 (core/ 상위 디렉토리)"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환

    version.txt 파일을 우선 사용하고, 없으면 설치된 패키지 메타데이터를 사용합니다.
    """
    version_file = get_project_root() / "version.txt"
    if version_file.exists():
        return version_file.read_text(encoding="utf-8").strip()

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환 (인식할 수 없는 값은 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (변환 실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        return int(value.strip())
    except ValueError:
        logger.warning(f"환경변수 {name}의 값이 정수가 아닙니다: {value!r} (기본값 {default} 사용)")
        return default


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정

    기본 레벨은 WARNING이며 LOG_LEVEL로 변경할 수 있습니다 (CLI의 --verbose는 DEBUG로 덮어씀).
    """

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드"""
        defaults = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", defaults.level).strip().upper(),
            format=os.environ.get("LOG_FORMAT", defaults.format),
        )

    @property
    def level_number(self) -> int:
        """logging 모듈 레벨 값 (알 수 없는 이름이면 WARNING)"""
        value = logging.getLevelName(self.level)
        if isinstance(value, int):
            return value
        logger.warning(f"알 수 없는 LOG_LEVEL: {self.level!r} (WARNING 사용)")
        return logging.WARNING


# =============================================================================
# 분석 설정
# =============================================================================


@dataclass(frozen=True)
class AnalyzerSettings:
    """로그 분석 실행 설정

    Attributes:
        list_top: 콘솔에 표시할 목록 순위 수
        package_top: 콘솔에 표시할 패키지 순위 수
        progress_interval: 진행 상황을 갱신할 유효 라인 간격
        workers: 파일 파싱 프로세스 수 (1이면 순차 처리)
    """

    list_top: int = settings.DEFAULT_LIST_TOP
    package_top: int = settings.DEFAULT_PACKAGE_TOP
    progress_interval: int = settings.DEFAULT_PROGRESS_INTERVAL
    workers: int = settings.DEFAULT_WORKERS

    def __post_init__(self) -> None:
        if self.list_top < 0:
            raise ValidationError("list_top", self.list_top, ">= 0")
        if self.package_top < 0:
            raise ValidationError("package_top", self.package_top, ">= 0")
        if self.progress_interval < 1:
            raise ValidationError("progress_interval", self.progress_interval, ">= 1")
        if not 1 <= self.workers <= settings.MAX_WORKERS:
            raise ValidationError("workers", self.workers, f"1~{settings.MAX_WORKERS}")

    @classmethod
    def from_env(cls) -> AnalyzerSettings:
        """MIRROR_STATS_* 환경변수에서 로드"""
        return cls(
            list_top=get_env_int(f"{ENV_PREFIX}LIST_TOP", settings.DEFAULT_LIST_TOP),
            package_top=get_env_int(f"{ENV_PREFIX}PACKAGE_TOP", settings.DEFAULT_PACKAGE_TOP),
            progress_interval=get_env_int(
                f"{ENV_PREFIX}PROGRESS_INTERVAL", settings.DEFAULT_PROGRESS_INTERVAL
            ),
            workers=get_env_int(f"{ENV_PREFIX}WORKERS", settings.DEFAULT_WORKERS),
        )

    def override(self, **values: int | None) -> AnalyzerSettings:
        """None이 아닌 값만 덮어쓴 새 설정 반환 (CLI 옵션용)"""
        changes = {key: value for key, value in values.items() if value is not None}
        return replace(self, **changes) if changes else self
