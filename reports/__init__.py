"""reports - 리포트 모듈

하위 모듈:
- mirror_log: PyPI 미러 액세스 로그 사용량 분석
"""
