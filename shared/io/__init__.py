"""입출력 유틸리티.

하위 모듈:
- excel: Excel 스타일 (openpyxl 기반)
- file: gzip 라인 읽기 및 텍스트 파일 쓰기
- output: 출력 값 포맷팅 (바이트 크기 등)
- config: 출력 설정 (OutputConfig, OutputFormat)
"""

from . import excel, file, output
from .config import OutputConfig, OutputFormat

__all__: list[str] = [
    # 하위 모듈
    "excel",
    "file",
    "output",
    # 설정
    "OutputConfig",
    "OutputFormat",
]
