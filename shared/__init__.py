"""공유 유틸리티 - reports에서 공통 사용.

- io: 입출력 유틸리티 (Excel 스타일, gzip 라인 읽기, 출력 포맷, 출력 설정)

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    reports
"""

from . import io

__all__ = ["io"]
