"""
reports/mirror_log/reporter - 분석 결과 출력

모듈:
    console.py     - 콘솔 미리보기 (rich)
    text_dump.py   - 순위 전체 텍스트 덤프
    excel.py       - Excel 보고서 (openpyxl)
"""

from .console import render_console
from .text_dump import write_listing_dump, write_package_dump

__all__: list[str] = [
    "render_console",
    "write_listing_dump",
    "write_package_dump",
    "MirrorExcelReporter",
]


def __getattr__(name: str):
    """Lazy import - openpyxl은 Excel 출력 시에만 로드"""
    if name == "MirrorExcelReporter":
        from .excel import MirrorExcelReporter

        return MirrorExcelReporter

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
