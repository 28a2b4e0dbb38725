"""
cli/headless.py - 분석 실행 Runner

mirror-stats 명령의 실제 실행 단계를 담당합니다.
대화형 입력 없이 동작하므로 cron, CI 파이프라인에서도 그대로 사용할 수 있습니다.

실행 단계:
    1. 로그 디렉토리 분석 (진행 상황 표시, quiet 모드에서는 생략)
    2. 텍스트 덤프 / Excel 보고서 저장 (옵션 지정 시)
    3. 콘솔 미리보기 출력

Usage:
    config = HeadlessConfig(directory=Path("/var/log/mirror"))
    exit_code = HeadlessRunner(config).run()
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from cli.ui import console, print_error, print_panel_header, print_sub_info, print_success
from core.config import AnalyzerSettings
from core.exceptions import MirrorStatsError, format_error_for_user
from shared.io.config import OutputConfig

logger = logging.getLogger(__name__)


@dataclass
class HeadlessConfig:
    """분석 실행 설정"""

    directory: Path
    settings: AnalyzerSettings = field(default_factory=AnalyzerSettings)
    output: OutputConfig = field(default_factory=OutputConfig)
    quiet: bool = False


class HeadlessRunner:
    """mirror-stats 분석 Runner

    분석기와 출력기를 순서대로 호출하고 종료 코드를 반환합니다.
    """

    def __init__(self, config: HeadlessConfig):
        self.config = config

    def run(self) -> int:
        """분석 실행

        Returns:
            0: 성공
            1: 실패 (읽기/쓰기 오류)
            130: 사용자 중단
        """
        try:
            result = self._analyze()
            self._save(result)
            self._render(result)
            return 0

        except KeyboardInterrupt:
            if not self.config.quiet:
                console.print("\n[dim]작업이 취소되었습니다.[/dim]")
            return 130
        except MirrorStatsError as e:
            logger.debug("분석 중단", exc_info=True)
            print_error(escape(format_error_for_user(e)))
            return 1

    def _analyze(self):
        from reports.mirror_log import MirrorLogAnalyzer

        config = self.config
        if config.quiet:
            return MirrorLogAnalyzer(config.directory, config.settings).analyze()

        from cli.ui.progress import file_progress

        print_panel_header("PyPI Mirror Stats", escape(str(config.directory)))
        with file_progress("로그 분석") as tracker:
            result = MirrorLogAnalyzer(config.directory, config.settings, tracker=tracker).analyze()

        print_sub_info(
            f"{len(result.files)}개 파일, 유효 라인 {result.valid_lines:,} / 전체 {result.total_lines:,}, "
            f"{result.elapsed:.1f}초"
        )
        return result

    def _render(self, result) -> None:
        if not self.config.output.should_output_console():
            return

        from reports.mirror_log.reporter import render_console

        render_console(
            result.report,
            list_top=self.config.settings.list_top,
            package_top=self.config.settings.package_top,
        )

    def _save(self, result) -> None:
        output = self.config.output
        report = result.report

        if output.should_output_text():
            from reports.mirror_log.reporter import write_listing_dump, write_package_dump

            if output.list_path:
                path = write_listing_dump(output.list_path, report.listings)
                self._print_saved("목록 순위", path)
            if output.package_path:
                path = write_package_dump(output.package_path, report.packages)
                self._print_saved("패키지 순위", path)

        if output.should_output_excel() and output.excel_path:
            from reports.mirror_log.reporter import MirrorExcelReporter

            path = MirrorExcelReporter(result).save(output.excel_path)
            self._print_saved("Excel 보고서", path)

    def _print_saved(self, label: str, path: Path) -> None:
        if not self.config.quiet:
            print_success(f"{label} 저장: {escape(str(path))}")
