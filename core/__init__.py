# core/__init__.py
"""
core - PyPI Mirror Stats 인프라

설정과 예외 계층을 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── config.py       # 중앙 설정 관리 (상수, 환경변수, AnalyzerSettings)
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import AnalyzerSettings
    analyzer_settings = AnalyzerSettings.from_env()

    # 예외 처리
    from core.exceptions import MirrorStatsError, format_error_for_user
    try:
        result = analyzer.analyze()
    except MirrorStatsError as e:
        print(format_error_for_user(e))
"""

from core import config, exceptions

__all__: list[str] = [
    "config",
    "exceptions",
]
