"""
tests/cli/test_headless.py - cli/headless.py 테스트

분석 Runner 단위 테스트.
"""

from unittest.mock import patch

import pytest
from conftest import download_line, listing_line

from cli.headless import HeadlessConfig, HeadlessRunner
from core.config import AnalyzerSettings
from shared.io.config import OutputConfig, OutputFormat


class TestHeadlessConfig:
    """HeadlessConfig 테스트"""

    def test_default_values(self, tmp_path):
        """기본값 확인"""
        config = HeadlessConfig(directory=tmp_path)

        assert config.settings == AnalyzerSettings()
        assert config.output.formats == OutputFormat.CONSOLE
        assert config.quiet is False


class TestHeadlessRunner:
    """HeadlessRunner 테스트"""

    @pytest.fixture
    def logs(self, log_dir):
        return log_dir({"a.gz": [listing_line("a"), download_line(size=10)]})

    def test_run_success(self, logs, tmp_path):
        output = OutputConfig.from_options(list_path=tmp_path / "l.txt", package_path=tmp_path / "p.txt")
        runner = HeadlessRunner(HeadlessConfig(directory=logs, output=output, quiet=True))

        assert runner.run() == 0
        assert (tmp_path / "l.txt").exists()
        assert (tmp_path / "p.txt").exists()

    def test_run_with_progress(self, logs):
        runner = HeadlessRunner(HeadlessConfig(directory=logs))
        assert runner.run() == 0

    def test_console_disabled(self, logs):
        output = OutputConfig.from_options(console=False)
        runner = HeadlessRunner(HeadlessConfig(directory=logs, output=output, quiet=True))

        with patch("reports.mirror_log.reporter.render_console") as mock_render:
            assert runner.run() == 0
        mock_render.assert_not_called()

    def test_read_error_returns_1(self, log_dir):
        directory = log_dir({"a.gz": []})
        (directory / "b.gz").write_bytes(b"broken")

        assert HeadlessRunner(HeadlessConfig(directory=directory, quiet=True)).run() == 1

    def test_write_error_returns_1(self, logs, tmp_path):
        target = tmp_path / "dir_target"
        target.mkdir()
        output = OutputConfig.from_options(list_path=target)

        assert HeadlessRunner(HeadlessConfig(directory=logs, output=output, quiet=True)).run() == 1

    def test_keyboard_interrupt(self, logs):
        runner = HeadlessRunner(HeadlessConfig(directory=logs, quiet=True))

        with patch.object(runner, "_analyze", side_effect=KeyboardInterrupt):
            assert runner.run() == 130

    def test_dumps_saved_before_console_failure(self, logs, tmp_path):
        """콘솔 출력이 실패해도 덤프 파일은 이미 저장됨"""
        output = OutputConfig.from_options(list_path=tmp_path / "l.txt", package_path=tmp_path / "p.txt")
        runner = HeadlessRunner(HeadlessConfig(directory=logs, output=output, quiet=True))

        with patch("reports.mirror_log.reporter.render_console", side_effect=RuntimeError("console")):
            with pytest.raises(RuntimeError):
                runner.run()

        assert (tmp_path / "l.txt").read_text(encoding="utf-8").startswith("1")
        assert (tmp_path / "p.txt").exists()
