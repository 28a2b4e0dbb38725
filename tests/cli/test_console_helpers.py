# tests/cli/test_console_helpers.py
"""
cli/ui/console 헬퍼 함수 단위 테스트
"""

import importlib
import io

import pytest
from rich.console import Console


@pytest.fixture
def captured(monkeypatch):
    """전역 콘솔 출력을 StringIO로 교체"""
    console_module = importlib.import_module("cli.ui.console")

    buffer = io.StringIO()
    monkeypatch.setattr(console_module, "console", Console(file=buffer, width=120, color_system=None))
    return buffer


class TestPrintHelpers:
    """메시지 출력 헬퍼 테스트"""

    def test_print_success(self, captured):
        from cli.ui.console import SYMBOL_SUCCESS, print_success

        print_success("완료")
        assert f"{SYMBOL_SUCCESS} 완료" in captured.getvalue()

    def test_print_error(self, captured):
        from cli.ui.console import SYMBOL_ERROR, print_error

        print_error("실패")
        assert f"{SYMBOL_ERROR} 실패" in captured.getvalue()

    def test_print_sub_info_indented(self, captured):
        from cli.ui.console import INDENT, print_sub_info

        print_sub_info("3개 파일")
        assert captured.getvalue().startswith(f"{INDENT}3개 파일")

    def test_print_panel_header(self, captured):
        from cli.ui.console import print_panel_header

        print_panel_header("PyPI Mirror Stats", "/var/log/mirror")
        output = captured.getvalue()
        assert "PyPI Mirror Stats" in output
        assert "/var/log/mirror" in output


def test_get_console():
    from cli.ui.console import get_console

    assert isinstance(get_console(), Console)
