"""Excel workbook export of the ranked usage report.

시트 구성:
    요약 (Summary)   - 요약 통계와 파일별 처리 통계
    Listings         - 목록 순위 전체
    Packages         - 패키지 순위 전체 (크기 미확인 행은 노란색)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from core.exceptions import ReportWriteError
from shared.io.excel import (
    ALIGN_CENTER,
    ALIGN_LEFT,
    ALIGN_RIGHT,
    NUMBER_FORMAT_DECIMAL,
    NUMBER_FORMAT_INTEGER,
    apply_style,
    get_header_style,
    get_thin_border,
    get_warning_fill,
)
from shared.io.file import ensure_dir
from shared.io.output import format_bytes

if TYPE_CHECKING:
    from ..analyzer import AnalysisResult
    from ..ranking import RankedReport

logger = logging.getLogger(__name__)

# openpyxl 시트 최대 행 수 (헤더 1행 제외)
MAX_DATA_ROWS = 1_048_575

SHEET_SUMMARY = "요약"
SHEET_LISTINGS = "Listings"
SHEET_PACKAGES = "Packages"

LISTING_HEADERS = ["순위", "Name", "Count"]
PACKAGE_HEADERS = ["순위", "seg_1", "seg_2", "seg_3", "Package", "Count", "Size (Bytes)", "Size", "Transferred (Bytes)"]
COLUMN_WIDTHS = {
    "순위": 8,
    "Name": 40,
    "Count": 14,
    "seg_1": 8,
    "seg_2": 8,
    "seg_3": 64,
    "Package": 60,
    "Size (Bytes)": 16,
    "Size": 14,
    "Transferred (Bytes)": 20,
}


def _clean(value: str) -> str:
    """워크시트에 쓸 수 없는 제어 문자 제거"""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


class _SummarySheetHelper:
    """요약 시트 작성 헬퍼 (라벨/값 2열)"""

    TITLE_FONT = Font(name="Consolas", size=16, bold=True, color="1F4E79")
    HEADER_FONT = Font(name="Consolas", size=12, bold=True, color="2F5597")
    LABEL_FONT = Font(name="Consolas", size=11, bold=True)
    VALUE_FONT = Font(name="Consolas", size=11)
    TITLE_FILL = PatternFill(start_color="D6EAF8", end_color="D6EAF8", fill_type="solid")
    HEADER_FILL = PatternFill(start_color="EBF1FA", end_color="EBF1FA", fill_type="solid")

    def __init__(self, ws, border):
        self._ws = ws
        self._border = border
        self._current_row = 1
        ws.column_dimensions["A"].width = 32
        ws.column_dimensions["B"].width = 28

    def add_title(self, title: str) -> "_SummarySheetHelper":
        """제목 추가"""
        ws = self._ws
        ws.merge_cells(f"A{self._current_row}:B{self._current_row}")
        cell = ws.cell(row=self._current_row, column=1, value=title)
        cell.font = self.TITLE_FONT
        cell.fill = self.TITLE_FILL
        cell.alignment = ALIGN_CENTER
        cell.border = self._border
        ws.cell(row=self._current_row, column=2).border = self._border
        ws.row_dimensions[self._current_row].height = 40
        self._current_row += 2
        return self

    def add_section(self, section_name: str) -> "_SummarySheetHelper":
        """섹션 헤더 추가"""
        ws = self._ws
        ws.merge_cells(f"A{self._current_row}:B{self._current_row}")
        cell = ws.cell(row=self._current_row, column=1, value=section_name)
        cell.font = self.HEADER_FONT
        cell.fill = self.HEADER_FILL
        cell.alignment = ALIGN_CENTER
        cell.border = self._border
        ws.cell(row=self._current_row, column=2).border = self._border
        self._current_row += 1
        return self

    def add_item(
        self,
        label: str,
        value: Any,
        number_format: Optional[str] = None,
        highlight: bool = False,
    ) -> "_SummarySheetHelper":
        """항목 추가"""
        ws = self._ws

        label_cell = ws.cell(row=self._current_row, column=1, value=label)
        label_cell.font = self.LABEL_FONT
        label_cell.alignment = ALIGN_LEFT
        label_cell.border = self._border

        value_cell = ws.cell(row=self._current_row, column=2, value=value)
        value_cell.font = self.VALUE_FONT
        value_cell.alignment = ALIGN_RIGHT
        value_cell.border = self._border
        if number_format:
            value_cell.number_format = number_format
        if highlight:
            value_cell.fill = get_warning_fill()

        self._current_row += 1
        return self

    def add_blank_row(self) -> "_SummarySheetHelper":
        """빈 행 추가"""
        self._current_row += 1
        return self


class MirrorExcelReporter:
    """미러 로그 분석 결과를 Excel 보고서로 생성하는 클래스"""

    def __init__(self, result: AnalysisResult) -> None:
        self.result = result
        self.header_style = get_header_style()
        self.thin_border = get_thin_border()

    @property
    def report(self) -> RankedReport:
        return self.result.report

    def save(self, output_path: Union[str, Path]) -> Path:
        """보고서를 생성하여 저장

        Raises:
            ReportWriteError: 파일을 쓸 수 없는 경우
        """
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        wb = self.build()
        try:
            ensure_dir(output_path.parent)
            wb.save(output_path)
        except OSError as e:
            raise ReportWriteError(str(output_path), cause=e) from e

        logger.info(f"Excel 보고서 저장 완료: {output_path}")
        return output_path

    def build(self) -> Workbook:
        """워크북 생성 (저장하지 않음)"""
        wb = Workbook()
        summary_ws = wb.active
        summary_ws.title = SHEET_SUMMARY

        self._create_summary_sheet(summary_ws)
        self._create_listing_sheet(wb.create_sheet(SHEET_LISTINGS))
        self._create_package_sheet(wb.create_sheet(SHEET_PACKAGES))
        return wb

    # =========================================================================
    # 시트 작성
    # =========================================================================

    def _create_summary_sheet(self, ws) -> None:
        summary = self.report.summary
        helper = _SummarySheetHelper(ws, self.thin_border)

        helper.add_title("PyPI 미러 사용량 분석")

        helper.add_section("요청 통계")
        helper.add_item("전체 인덱스 요청 (List alls)", summary.full_index_count, NUMBER_FORMAT_INTEGER)
        helper.add_item("목록 키 수", summary.listing_keys, NUMBER_FORMAT_INTEGER)
        helper.add_item("목록 요청 수", summary.listing_requests, NUMBER_FORMAT_INTEGER)
        helper.add_item("패키지 키 수", summary.package_keys, NUMBER_FORMAT_INTEGER)
        helper.add_item("패키지 요청 수", summary.package_requests, NUMBER_FORMAT_INTEGER)
        helper.add_blank_row()

        helper.add_section("전송량")
        helper.add_item("총 전송량 (Bytes)", summary.transferred_bytes, NUMBER_FORMAT_INTEGER)
        helper.add_item("총 전송량", format_bytes(summary.transferred_bytes))
        if summary.average_defined:
            helper.add_item("평균 전송 크기 (Bytes)", summary.average_transfer, NUMBER_FORMAT_DECIMAL)
            helper.add_item("평균 전송 크기", format_bytes(summary.average_transfer))
        else:
            helper.add_item("평균 전송 크기", "undefined", highlight=True)
        helper.add_blank_row()

        helper.add_section("입력 파일")
        helper.add_item("파일 수", len(self.result.files), NUMBER_FORMAT_INTEGER)
        helper.add_item("전체 라인", self.result.total_lines, NUMBER_FORMAT_INTEGER)
        helper.add_item("유효 라인", self.result.valid_lines, NUMBER_FORMAT_INTEGER)
        for stats in self.result.files:
            helper.add_item(_clean(stats.path.name), f"{stats.valid_lines:,} / {stats.total_lines:,}")

    def _create_listing_sheet(self, ws) -> None:
        listings = self._clip(self.report.listings, SHEET_LISTINGS)
        self._write_header_row(ws, LISTING_HEADERS)

        for rank, entry in enumerate(listings, start=1):
            ws.append([rank, _clean(entry.key.name), entry.count])

        self._finalize_sheet(ws, LISTING_HEADERS, len(listings))

    def _create_package_sheet(self, ws) -> None:
        packages = self._clip(self.report.packages, SHEET_PACKAGES)
        self._write_header_row(ws, PACKAGE_HEADERS)
        warning_fill = get_warning_fill()

        for rank, entry in enumerate(packages, start=1):
            key = entry.key
            size_text = format_bytes(entry.size) if entry.size is not None else "Unknown size"
            ws.append(
                [
                    rank,
                    _clean(key.seg_1),
                    _clean(key.seg_2),
                    _clean(key.seg_3),
                    _clean(key.package),
                    entry.count,
                    entry.size,
                    size_text,
                    entry.transferred,
                ]
            )
            if entry.size is None:
                for cell in ws[ws.max_row]:
                    cell.fill = warning_fill

        self._finalize_sheet(ws, PACKAGE_HEADERS, len(packages))

    # =========================================================================
    # 공통 헬퍼 메서드
    # =========================================================================

    def _clip(self, entries: List[Any], sheet_name: str) -> List[Any]:
        if len(entries) > MAX_DATA_ROWS:
            logger.warning(
                f"{sheet_name} 시트 행 수 제한으로 {len(entries) - MAX_DATA_ROWS:,}건은 제외됩니다 "
                "(전체 목록은 텍스트 덤프를 사용하세요)"
            )
            return entries[:MAX_DATA_ROWS]
        return entries

    def _write_header_row(self, ws, headers: List[str]) -> None:
        """헤더 행을 작성하고 스타일을 적용합니다."""
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            apply_style(cell, self.header_style)

    def _finalize_sheet(self, ws, headers: List[str], data_count: int) -> None:
        """시트 마무리: 컬럼 너비, 숫자 포맷, 필터, freeze panes"""
        for col_idx, header in enumerate(headers, start=1):
            letter = get_column_letter(col_idx)
            ws.column_dimensions[letter].width = COLUMN_WIDTHS.get(header, 15)
            if header in ("Count", "Size (Bytes)", "Transferred (Bytes)"):
                for row in range(2, data_count + 2):
                    ws.cell(row=row, column=col_idx).number_format = NUMBER_FORMAT_INTEGER

        ws.row_dimensions[1].height = 30
        if data_count > 0:
            ws.auto_filter.ref = f"A1:{get_column_letter(len(headers))}{data_count + 1}"
        ws.freeze_panes = ws.cell(row=2, column=1)
