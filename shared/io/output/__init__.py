"""출력 포맷 헬퍼

Usage:
    from shared.io.output import format_bytes

    format_bytes(9001)  # '8.79 KB'
"""

from .format import format_bytes, format_count

__all__: list[str] = [
    "format_bytes",
    "format_count",
]
