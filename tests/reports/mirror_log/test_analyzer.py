# tests/reports/mirror_log/test_analyzer.py
"""
reports/mirror_log/analyzer.py 단위 테스트

파일 처리 순서, 병렬 처리 결과 동일성, 진행 상황 보고 테스트.
"""

from unittest.mock import MagicMock, patch

import pytest
from conftest import SEG_3, download_line, listing_line

from core.config import AnalyzerSettings
from core.exceptions import AggregatorSealedError, LogReadError
from reports.mirror_log.aggregator import UsageAggregator
from reports.mirror_log.analyzer import AnalysisResult, MirrorLogAnalyzer, aggregate_file
from reports.mirror_log.types import PackageKey

FOO = PackageKey("ab", "cd", SEG_3, "foo-1.0.tar.gz")


class TestAggregateFile:
    """aggregate_file 테스트"""

    def test_stats(self, sample_log_dir):
        agg = UsageAggregator()
        stats = aggregate_file(sample_log_dir / "access-01.gz", agg)

        assert stats.total_lines == 7
        assert stats.valid_lines == 5
        assert stats.skipped_lines == 2

    def test_progress_interval(self, log_dir):
        directory = log_dir({"a.gz": [listing_line("a")] * 7 + [b"bad"]})
        tracker = MagicMock()

        aggregate_file(directory / "a.gz", UsageAggregator(), progress_interval=3, tracker=tracker)

        assert tracker.update.call_count == 2

    def test_progress_disabled(self, log_dir):
        directory = log_dir({"a.gz": [listing_line("a")] * 5})
        tracker = MagicMock()

        aggregate_file(directory / "a.gz", UsageAggregator(), progress_interval=None, tracker=tracker)

        tracker.update.assert_not_called()


class TestMirrorLogAnalyzer:
    """MirrorLogAnalyzer 테스트"""

    def test_analyze_sample(self, sample_log_dir):
        result = MirrorLogAnalyzer(sample_log_dir).analyze()

        assert isinstance(result, AnalysisResult)
        assert [stats.path.name for stats in result.files] == ["access-01.gz", "access-02.gz"]
        assert result.total_lines == 11
        assert result.valid_lines == 9

        report = result.report
        assert report.summary.full_index_count == 1
        assert [(entry.key.name, entry.count) for entry in report.listings] == [("flask", 2), ("requests", 2)]

        foo = report.packages[0]
        assert foo.key == FOO
        assert foo.count == 3
        assert foo.size == 9001

    def test_first_size_follows_file_order(self, log_dir):
        """파일 이름순으로 처리하므로 앞 파일의 크기가 유지됨"""
        directory = log_dir(
            {
                "b.gz": [download_line(size=2)],
                "a.gz": [download_line(size=1)],
            }
        )
        result = MirrorLogAnalyzer(directory).analyze()

        assert result.report.packages[0].size == 1

    def test_deterministic(self, sample_log_dir):
        first = MirrorLogAnalyzer(sample_log_dir).analyze().report
        second = MirrorLogAnalyzer(sample_log_dir).analyze().report

        assert first.listings == second.listings
        assert first.packages == second.packages
        assert first.summary == second.summary

    def test_parallel_matches_sequential(self, log_dir):
        files = {
            f"access-{i:02d}.gz": [
                download_line(f"pkg-{i % 3}", size=100 + i),
                download_line("shared-1.0.whl", size=1000 + i),
                listing_line(f"name-{i % 4}"),
                download_line("shared-1.0.whl", status=304),
            ]
            for i in range(6)
        }
        directory = log_dir(files)

        sequential = MirrorLogAnalyzer(directory, AnalyzerSettings(workers=1)).analyze()
        parallel = MirrorLogAnalyzer(directory, AnalyzerSettings(workers=3)).analyze()

        assert parallel.report.listings == sequential.report.listings
        assert parallel.report.packages == sequential.report.packages
        assert parallel.report.summary == sequential.report.summary
        assert [s.valid_lines for s in parallel.files] == [s.valid_lines for s in sequential.files]

        shared = next(p for p in parallel.report.packages if p.key.package == "shared-1.0.whl")
        assert shared.size == 1000

    def test_tracker_calls(self, sample_log_dir):
        tracker = MagicMock()

        MirrorLogAnalyzer(sample_log_dir, tracker=tracker).analyze()

        tracker.set_total.assert_called_once_with(2)
        assert tracker.start_file.call_count == 2
        assert tracker.finish_file.call_count == 2

    def test_empty_directory(self, tmp_path):
        result = MirrorLogAnalyzer(tmp_path).analyze()

        assert result.files == []
        assert result.report.summary.average_transfer is None

    def test_corrupt_file_aborts(self, log_dir):
        directory = log_dir({"a.gz": [listing_line("a")]})
        (directory / "b.gz").write_bytes(b"not gzip at all")

        with pytest.raises(LogReadError) as exc_info:
            MirrorLogAnalyzer(directory).analyze()
        assert "b.gz" in exc_info.value.path

    def test_corrupt_file_aborts_parallel(self, log_dir):
        directory = log_dir({"a.gz": [listing_line("a")]})
        (directory / "b.gz").write_bytes(b"not gzip at all")

        with pytest.raises(LogReadError):
            MirrorLogAnalyzer(directory, AnalyzerSettings(workers=2)).analyze()

    def test_parallel_failure_cancels_pending(self, log_dir):
        """워커 오류 시 대기 중인 파일은 취소"""
        directory = log_dir({"a.gz": [listing_line("a")], "b.gz": [listing_line("b")]})

        with patch("reports.mirror_log.analyzer.ProcessPoolExecutor") as mock_cls:
            mock_cls.return_value.__exit__.return_value = False
            executor = mock_cls.return_value.__enter__.return_value
            executor.map.side_effect = LogReadError("b.gz", "손상")

            with pytest.raises(LogReadError):
                MirrorLogAnalyzer(directory, AnalyzerSettings(workers=2)).analyze()

        executor.shutdown.assert_called_once_with(cancel_futures=True)

    def test_analyze_twice_raises(self, sample_log_dir):
        analyzer = MirrorLogAnalyzer(sample_log_dir)
        analyzer.analyze()

        with pytest.raises(AggregatorSealedError):
            analyzer.analyze()
