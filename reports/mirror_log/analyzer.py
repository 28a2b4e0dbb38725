"""
reports/mirror_log/analyzer.py - 미러 로그 분석 파이프라인

입력 디렉토리 -> 파일별 라인 읽기 -> 문법 분류 -> 집계 -> 순위 계산

처리 방식:
    workers == 1  : 파일을 이름순으로 하나씩 순차 처리
    workers > 1   : 파일별로 프로세스 풀에서 파싱/부분 집계 후
                    부모 프로세스에서 파일 이름순으로 병합
                    (sizes의 첫 번째 기록 우선 규칙이 순차 처리와 동일하게 유지됨)

어느 파일이든 읽기/압축 해제에 실패하면 LogReadError로 전체 실행이 중단됩니다.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from core.config import AnalyzerSettings

from .aggregator import UsageAggregator
from .ranking import RankedReport, rank_usage
from .reader import FileStats, list_log_files, read_log_lines

if TYPE_CHECKING:
    from cli.ui.progress import FileProgressTracker

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """분석 실행 결과

    Attributes:
        report: 순위 및 요약 통계
        files: 파일별 처리 통계 (처리 순서)
        elapsed: 소요 시간 (초)
    """

    report: RankedReport
    files: list[FileStats] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def total_lines(self) -> int:
        return sum(stats.total_lines for stats in self.files)

    @property
    def valid_lines(self) -> int:
        return sum(stats.valid_lines for stats in self.files)


def aggregate_file(
    path: Path,
    aggregator: UsageAggregator,
    progress_interval: Optional[int] = 10_000,
    tracker: Optional[FileProgressTracker] = None,
) -> FileStats:
    """파일 하나의 모든 라인을 집계기에 반영

    Args:
        path: gzip 로그 파일
        aggregator: 누적 집계기 (파일마다 초기화하지 않음)
        progress_interval: 진행 상황을 알릴 유효 라인 간격 (None이면 알리지 않음)
        tracker: 진행 상황 표시기 (선택)

    Returns:
        파일 처리 통계
    """
    stats = FileStats(path=path)

    for line in read_log_lines(path):
        stats.total_lines += 1
        if not aggregator.observe(line):
            continue

        stats.valid_lines += 1
        if progress_interval and stats.valid_lines % progress_interval == 0:
            logger.debug(f"Progress(valid/total): {stats.valid_lines}/{stats.total_lines}")
            if tracker:
                tracker.update(stats)

    return stats


def _aggregate_file_worker(path: Path) -> tuple[UsageAggregator, FileStats]:
    """프로세스 풀 워커: 파일 하나에 대한 부분 집계"""
    aggregator = UsageAggregator()
    stats = aggregate_file(path, aggregator, progress_interval=None)
    return aggregator, stats


class MirrorLogAnalyzer:
    """미러 액세스 로그 분석기

    Example:
        analyzer = MirrorLogAnalyzer("/var/log/mirror", AnalyzerSettings(workers=4))
        result = analyzer.analyze()

        print(result.report.summary.average_transfer)
    """

    def __init__(
        self,
        directory: Union[str, Path],
        settings: Optional[AnalyzerSettings] = None,
        tracker: Optional[FileProgressTracker] = None,
    ):
        self.directory = Path(directory)
        self.settings = settings or AnalyzerSettings()
        self.tracker = tracker
        self.aggregator = UsageAggregator()

    def analyze(self) -> AnalysisResult:
        """모든 입력 파일을 처리하고 순위를 계산

        Raises:
            LogReadError: 입력 디렉토리/파일 읽기 실패
            AggregatorSealedError: 이미 analyze()가 완료된 인스턴스에서 재호출
        """
        start_time = time.monotonic()
        files = list_log_files(self.directory)

        if not files:
            logger.warning(f"처리할 로그 파일이 없습니다: {self.directory}")

        logger.info(f"분석 시작: {len(files)}개 파일, workers={self.settings.workers}")

        if self.tracker:
            self.tracker.set_total(len(files))

        if self.settings.workers > 1 and len(files) > 1:
            file_stats = self._run_parallel(files)
        else:
            file_stats = self._run_sequential(files)

        report = rank_usage(self.aggregator)
        elapsed = time.monotonic() - start_time

        logger.info(f"분석 완료: {len(files)}개 파일, {elapsed:.1f}초")
        return AnalysisResult(report=report, files=file_stats, elapsed=elapsed)

    def _run_sequential(self, files: list[Path]) -> list[FileStats]:
        results: list[FileStats] = []

        for path in files:
            logger.info(f"Processing {path}...")
            if self.tracker:
                self.tracker.start_file(path)

            stats = aggregate_file(
                path,
                self.aggregator,
                progress_interval=self.settings.progress_interval,
                tracker=self.tracker,
            )
            self._finish_file(stats)
            results.append(stats)

        return results

    def _run_parallel(self, files: list[Path]) -> list[FileStats]:
        results: list[FileStats] = []
        max_workers = min(self.settings.workers, len(files))

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            try:
                # map()은 입력 순서대로 결과를 반환하므로 병합 순서가 고정됨
                for partial, stats in executor.map(_aggregate_file_worker, files):
                    self.aggregator.merge(partial)
                    self._finish_file(stats)
                    results.append(stats)
            except BaseException:
                # 아직 시작하지 않은 파일은 파싱하지 않고 중단
                executor.shutdown(cancel_futures=True)
                raise

        return results

    def _finish_file(self, stats: FileStats) -> None:
        logger.info(
            f"Finish {stats.path.name}: Total lines: {stats.total_lines}, Valid lines: {stats.valid_lines}"
        )
        if self.tracker:
            self.tracker.finish_file(stats)
