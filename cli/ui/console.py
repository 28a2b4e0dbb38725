"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들
"""

import platform

from rich.console import Console
from rich.panel import Panel


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


# =============================================================================
# 표준 출력 스타일 (이모지 없이 Rich 스타일만 사용)
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러

INDENT = "   "  # 부작업 들여쓰기 (3칸)


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {message}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_sub_info(message: str) -> None:
    """하위 작업 정보 출력 (들여쓰기 + dim)

    Args:
        message: 정보 메시지
    """
    console.print(f"{INDENT}[dim]{message}[/dim]")


def print_panel_header(title: str, subtitle: str | None = None) -> None:
    """제목과 부제목을 포함한 패널 헤더를 출력합니다.

    Args:
        title: 제목
        subtitle: 부제목 (선택)
    """
    body = f"[bold blue]{title}[/]"
    if subtitle:
        body = f"{body}\n[dim]{subtitle}[/]"

    console.print(Panel(body, border_style="blue", padding=(1, 2)))
