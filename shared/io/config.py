"""출력 설정 모듈

리포트 출력 형식 및 경로 설정

Usage:
    from shared.io.config import OutputConfig, OutputFormat

    config = OutputConfig.from_options(list_path="lists.txt", excel_path="report.xlsx")

    if config.should_output_text():
        # 텍스트 덤프 출력
        pass

    if config.should_output_excel():
        # Excel 출력
        pass
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag, auto
from pathlib import Path


class OutputFormat(Flag):
    """출력 형식 플래그

    Flag 타입으로 여러 형식을 조합하여 사용 가능

    Usage:
        fmt = OutputFormat.CONSOLE | OutputFormat.TEXT

        if OutputFormat.TEXT in fmt:
            ...
    """

    NONE = 0
    CONSOLE = auto()
    TEXT = auto()
    EXCEL = auto()
    ALL = CONSOLE | TEXT | EXCEL


@dataclass
class OutputConfig:
    """출력 설정

    Attributes:
        formats: 출력 형식 플래그 (기본값: 콘솔만)
        list_path: 목록 순위 전체 덤프 파일 경로
        package_path: 패키지 순위 전체 덤프 파일 경로
        excel_path: Excel 보고서 경로
    """

    formats: OutputFormat = field(default=OutputFormat.CONSOLE)
    list_path: Path | None = None
    package_path: Path | None = None
    excel_path: Path | None = None

    def should_output_console(self) -> bool:
        """Console 출력 여부"""
        return OutputFormat.CONSOLE in self.formats

    def should_output_text(self) -> bool:
        """텍스트 덤프 출력 여부"""
        return OutputFormat.TEXT in self.formats

    def should_output_excel(self) -> bool:
        """Excel 출력 여부"""
        return OutputFormat.EXCEL in self.formats

    @classmethod
    def from_options(
        cls,
        list_path: str | Path | None = None,
        package_path: str | Path | None = None,
        excel_path: str | Path | None = None,
        console: bool = True,
    ) -> OutputConfig:
        """CLI 옵션에서 OutputConfig 생성

        경로가 주어진 형식만 활성화됩니다.

        Args:
            list_path: 목록 덤프 파일 경로
            package_path: 패키지 덤프 파일 경로
            excel_path: Excel 보고서 경로
            console: 콘솔 미리보기 출력 여부

        Returns:
            OutputConfig 인스턴스
        """
        formats = OutputFormat.NONE
        if console:
            formats |= OutputFormat.CONSOLE
        if list_path or package_path:
            formats |= OutputFormat.TEXT
        if excel_path:
            formats |= OutputFormat.EXCEL

        return cls(
            formats=formats,
            list_path=Path(list_path) if list_path else None,
            package_path=Path(package_path) if package_path else None,
            excel_path=Path(excel_path) if excel_path else None,
        )
