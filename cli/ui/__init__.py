# cli/ui - 콘솔 컴포넌트 (rich)
"""
콘솔 UI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (콘솔 출력, 진행 상황 표시)
"""

from .console import (
    INDENT,
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    console,
    get_console,
    print_error,
    print_panel_header,
    print_sub_info,
    print_success,
)
from .progress import BaseTracker, FileProgressTracker, file_progress

__all__: list[str] = [
    "console",
    "get_console",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "INDENT",
    # 메시지 출력
    "print_success",
    "print_error",
    "print_sub_info",
    "print_panel_header",
    # Progress tracking
    "BaseTracker",
    "FileProgressTracker",
    "file_progress",
]
