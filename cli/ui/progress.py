"""
cli/ui/progress.py - 로그 파일 처리 진행 상황 표시

Components:
- BaseTracker: Rich Progress 래퍼 공통 기반
- FileProgressTracker: 파일 단위 M/N 진행률 + 현재 파일의 유효/전체 라인 수

Context managers:
- file_progress: 로그 파일 처리용

Example:
    from cli.ui.progress import file_progress

    with file_progress("로그 분석") as tracker:
        analyzer = MirrorLogAnalyzer(path, settings, tracker=tracker)
        result = analyzer.analyze()
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

if TYPE_CHECKING:
    from rich.console import Console

    from reports.mirror_log.reader import FileStats

from .console import console as default_console


class BaseTracker:
    """Base class for progress trackers."""

    def __init__(self, progress: Progress, task_id: TaskID, description: str) -> None:
        self._progress = progress
        self._task_id = task_id
        self._description = description

    @property
    def progress(self) -> Progress:
        """Access the underlying Rich Progress object."""
        return self._progress

    @property
    def task_id(self) -> TaskID:
        """Access the underlying task ID."""
        return self._task_id


class FileProgressTracker(BaseTracker):
    """Log file processing tracker.

    Display format:
        [spinner] 로그 분석 access-01.gz (valid/total: 20000/20480) 3/12 [bar] 00:15
    """

    def __init__(
        self,
        progress: Progress,
        task_id: TaskID,
        description: str,
    ) -> None:
        super().__init__(progress, task_id, description)
        self._completed_files = 0
        self._total_lines = 0
        self._valid_lines = 0

    def set_total(self, total: int) -> None:
        """Set the number of files to process."""
        self._progress.update(self._task_id, total=total)

    def start_file(self, path: Path) -> None:
        """Show the file currently being processed."""
        self._progress.update(self._task_id, description=f"[cyan]{self._description} {escape(path.name)}")

    def update(self, stats: FileStats) -> None:
        """Refresh valid/total line counts of the current file."""
        self._progress.update(
            self._task_id,
            description=(
                f"[cyan]{self._description} {escape(stats.path.name)} "
                f"[dim](valid/total: {stats.valid_lines}/{stats.total_lines})[/dim]"
            ),
        )

    def finish_file(self, stats: FileStats) -> None:
        """Mark one file as done."""
        self._completed_files += 1
        self._total_lines += stats.total_lines
        self._valid_lines += stats.valid_lines
        self._progress.advance(self._task_id)

    @property
    def completed_files(self) -> int:
        return self._completed_files

    @property
    def line_totals(self) -> tuple[int, int]:
        """(valid, total) lines over finished files."""
        return self._valid_lines, self._total_lines


@contextmanager
def file_progress(
    description: str,
    console: Console | None = None,
) -> Generator[FileProgressTracker, None, None]:
    """Context manager for log file processing progress.

    Args:
        description: Description for the progress bar
        console: Rich Console to use (default: cli.ui.console)

    Yields:
        FileProgressTracker
    """
    cons = console or default_console

    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=40),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=cons,
        expand=False,
    )

    with progress:
        task_id = progress.add_task(f"[cyan]{description}", total=None)
        tracker = FileProgressTracker(progress, task_id, description)

        try:
            yield tracker
        finally:
            progress.update(task_id, description=f"[green]{description} 완료")
