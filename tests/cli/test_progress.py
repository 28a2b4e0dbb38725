# tests/cli/test_progress.py
"""
cli/ui/progress 모듈 단위 테스트

로그 파일 처리 진행 상황 표시 컴포넌트.
"""

import io
from pathlib import Path

from rich.console import Console
from rich.progress import Progress

from cli.ui.progress import FileProgressTracker, file_progress
from reports.mirror_log.reader import FileStats

# =============================================================================
# FileProgressTracker 테스트
# =============================================================================


class TestFileProgressTracker:
    """FileProgressTracker 단위 테스트"""

    def test_initial_stats(self):
        """초기 상태 확인"""
        with Progress() as progress:
            task_id = progress.add_task("test", total=None)
            tracker = FileProgressTracker(progress, task_id, "test")

            assert tracker.completed_files == 0
            assert tracker.line_totals == (0, 0)

    def test_set_total(self):
        with Progress() as progress:
            task_id = progress.add_task("test", total=None)
            tracker = FileProgressTracker(progress, task_id, "test")

            tracker.set_total(3)
            assert progress.tasks[0].total == 3

    def test_finish_file(self):
        """파일 완료 시 진행률과 라인 합계 갱신"""
        with Progress() as progress:
            task_id = progress.add_task("test", total=2)
            tracker = FileProgressTracker(progress, task_id, "test")

            tracker.finish_file(FileStats(Path("a.gz"), total_lines=10, valid_lines=8))
            tracker.finish_file(FileStats(Path("b.gz"), total_lines=5, valid_lines=5))

            assert tracker.completed_files == 2
            assert tracker.line_totals == (13, 15)
            assert progress.tasks[0].completed == 2

    def test_update_description(self):
        with Progress() as progress:
            task_id = progress.add_task("test", total=1)
            tracker = FileProgressTracker(progress, task_id, "분석")

            tracker.start_file(Path("/logs/access-01.gz"))
            assert "access-01.gz" in progress.tasks[0].description

            tracker.update(FileStats(Path("/logs/access-01.gz"), total_lines=12, valid_lines=10))
            assert "10/12" in progress.tasks[0].description


class TestFileProgressContext:
    """file_progress 컨텍스트 매니저 테스트"""

    def test_yields_tracker(self):
        console = Console(file=io.StringIO())

        with file_progress("로그 분석", console=console) as tracker:
            assert isinstance(tracker, FileProgressTracker)
            tracker.set_total(1)
            tracker.finish_file(FileStats(Path("a.gz"), total_lines=1, valid_lines=1))

        assert "완료" in tracker.progress.tasks[0].description
