"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    MirrorStatsError (베이스)
    ├── LogReadError (로그 파일 읽기/압축 해제 실패)
    ├── AggregatorSealedError (집계 종료 후 변경 시도)
    ├── ReportWriteError (리포트 파일 저장 실패)
    └── ConfigError (설정 관련)
        └── ValidationError (입력 검증)

라인 단위 파싱 실패는 예외가 아닙니다. 문법 파서는 실패를 값(Fail)으로
반환하고, 집계기는 해당 라인을 건너뜁니다.

Usage:
    from core.exceptions import LogReadError

    try:
        for line in read_log_lines(path):
            ...
    except OSError as e:
        raise LogReadError(str(path), "파일을 읽을 수 없습니다", cause=e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class MirrorStatsError(Exception):
    """Mirror Stats 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 입력/집계 관련 예외
# =============================================================================


class LogReadError(MirrorStatsError):
    """로그 파일 열기/읽기/압축 해제 실패

    실행 전체를 중단시키는 치명적 오류입니다. 부분 결과 복구나 재시도는 없습니다.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        cause: Optional[Exception] = None,
    ):
        message = f"로그 읽기 실패 [{path}]: {reason}"
        super().__init__(message, cause)
        self.path = path
        self.reason = reason
        self.details["path"] = path

    def __reduce__(self):
        # 워커 프로세스에서 부모 프로세스로 전달될 때 생성자 인자 복원
        return (self.__class__, (self.path, self.reason, self.cause))


class AggregatorSealedError(MirrorStatsError):
    """순위 계산이 시작된 집계기를 변경하려는 경우"""

    def __init__(self, operation: str):
        super().__init__(f"집계가 이미 종료되었습니다 [{operation}]")
        self.operation = operation
        self.details["operation"] = operation


class ReportWriteError(MirrorStatsError):
    """리포트 파일 저장 실패"""

    def __init__(
        self,
        path: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(f"리포트 저장 실패 [{path}]", cause)
        self.path = path
        self.details["path"] = path


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(MirrorStatsError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(ConfigError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(field, f"예상값 '{expected}', 실제값 '{value}'", cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def is_fatal(error: Exception) -> bool:
    """실행을 중단해야 하는 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        입력/출력 계열 오류이면 True
    """
    return isinstance(error, (LogReadError, ReportWriteError, OSError))


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, MirrorStatsError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    if isinstance(error, PermissionError):
        return f"권한이 없습니다: {error.filename or error}"

    if isinstance(error, FileNotFoundError):
        return f"파일을 찾을 수 없습니다: {error.filename or error}"

    return f"{error.__class__.__name__}: {error}"
