"""출력 값 포맷팅 헬퍼"""

from __future__ import annotations

_BYTE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_bytes(size: int | float | None) -> str:
    """바이트 수를 사람이 읽기 쉬운 문자열로 변환 (1024 단위)

    Args:
        size: 바이트 수

    Returns:
        "9.00 B", "8.79 KB", "1.50 GB" 형식 문자열 (변환 불가 시 "N/A")

    Example:
        >>> format_bytes(9001)
        '8.79 KB'
    """
    try:
        if size is None:
            size = 0
        size = float(size)
    except (ValueError, TypeError):
        return "N/A"

    for unit in _BYTE_UNITS:
        if abs(size) < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def format_count(value: int) -> str:
    """천 단위 구분 기호가 있는 정수 문자열"""
    return f"{value:,}"
