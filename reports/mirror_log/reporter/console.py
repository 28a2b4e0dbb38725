"""Console preview of the ranked usage report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.markup import escape
from rich.table import Table

from shared.io.output import format_bytes, format_count

if TYPE_CHECKING:
    from rich.console import Console

    from ..ranking import RankedReport

UNKNOWN_SIZE = "Unknown size"
UNDEFINED = "undefined"


def _default_console() -> Console:
    from cli.ui import console

    return console


def build_listing_table(report: RankedReport, limit: int) -> Table:
    """상위 목록 테이블"""
    table = Table(title=f"Top {limit} listed directories", header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right")

    for rank, entry in enumerate(report.listings[:limit], start=1):
        table.add_row(str(rank), escape(entry.key.name), format_count(entry.count))
    return table


def build_package_table(report: RankedReport, limit: int) -> Table:
    """상위 패키지 테이블 (크기를 모르면 Unknown size)"""
    table = Table(title=f"Top {limit} requested packages", header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Package", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right")
    table.add_column("Size", justify="right")

    for rank, entry in enumerate(report.packages[:limit], start=1):
        size = format_bytes(entry.size) if entry.size is not None else f"[yellow]{UNKNOWN_SIZE}[/yellow]"
        table.add_row(str(rank), escape(entry.key.package), format_count(entry.count), size)
    return table


def render_console(
    report: RankedReport,
    list_top: int = 10,
    package_top: int = 100,
    console: Optional[Console] = None,
) -> None:
    """순위 미리보기와 요약 통계를 콘솔에 출력

    Args:
        report: 순위 계산 결과
        list_top: 표시할 목록 수
        package_top: 표시할 패키지 수 (정확히 이 개수까지만 표시)
        console: 출력 콘솔 (기본값: cli.ui.console)
    """
    cons = console or _default_console()
    summary = report.summary

    cons.print()
    cons.print("[bold underline cyan]Stats[/bold underline cyan]")
    cons.print(f"List alls: {summary.full_index_count}")
    cons.print()

    cons.print(f"Total parsed lists: {summary.listing_keys}")
    if list_top and report.listings:
        cons.print(build_listing_table(report, list_top))
    cons.print(f"Transfer count: {summary.listing_requests}")
    cons.print()

    cons.print(f"Total parsed packages: {summary.package_keys}")
    if package_top and report.packages:
        cons.print(build_package_table(report, package_top))
    cons.print(f"Transfer count: {summary.package_requests}")
    cons.print(f"Total transfer size: {format_bytes(summary.transferred_bytes)}")

    if summary.average_defined:
        cons.print(f"Average transfer size: {format_bytes(summary.average_transfer)}")
    else:
        cons.print(f"Average transfer size: [yellow]{UNDEFINED}[/yellow] (패키지 요청 없음)")
