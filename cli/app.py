"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    mirror-stats PATH                       # 콘솔 미리보기
    mirror-stats PATH -l lists.txt          # 목록 순위 전체 덤프
    mirror-stats PATH -p packages.txt       # 패키지 순위 전체 덤프
    mirror-stats PATH -x report.xlsx        # Excel 보고서
    mirror-stats PATH -w 4                  # 4개 프로세스로 파일 병렬 파싱
    mirror-stats --version

Usage:
    # 명령줄에서 직접 실행
    $ mirror-stats /var/log/pypi-mirror -l lists.txt -p packages.txt

    # 모듈로 실행
    $ python -m cli.app /var/log/pypi-mirror
"""

import logging
import sys
from pathlib import Path

import click

from core.config import AnalyzerSettings, LogConfig, get_version
from core.exceptions import ConfigError, format_error_for_user

# 기본 WARNING: INFO 로그가 도구 출력에 섞이지 않도록 함 (LOG_LEVEL로 변경 가능)
_log_config = LogConfig.from_env()
logging.basicConfig(
    level=_log_config.level_number,
    format=_log_config.format,
    datefmt=_log_config.date_format,
)

logger = logging.getLogger(__name__)

VERSION = get_version()


def _configure_verbosity(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug(f"mirror-stats {VERSION} 디버그 로그 활성화")


@click.command(name="mirror-stats")
@click.version_option(VERSION, "-V", "--version", prog_name="mirror-stats")
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-l", "--list", "list_path", type=click.Path(dir_okay=False, path_type=Path), help="목록 순위 전체 저장 경로"
)
@click.option(
    "-p",
    "--package",
    "package_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="패키지 순위 전체 저장 경로",
)
@click.option(
    "-x", "--excel", "excel_path", type=click.Path(dir_okay=False, path_type=Path), help="Excel 보고서 저장 경로"
)
@click.option("-w", "--workers", type=int, default=None, help="파일 파싱 프로세스 수 (기본 1 = 순차)")
@click.option("--list-top", type=int, default=None, help="콘솔에 표시할 목록 수 (기본 10)")
@click.option("--package-top", type=int, default=None, help="콘솔에 표시할 패키지 수 (기본 100)")
@click.option("-q", "--quiet", is_flag=True, help="진행 상황 표시 없이 결과만 출력")
@click.option("-v", "--verbose", is_flag=True, help="디버그 로그 출력")
def cli(
    path: Path,
    list_path: Path | None,
    package_path: Path | None,
    excel_path: Path | None,
    workers: int | None,
    list_top: int | None,
    package_top: int | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """PyPI 미러 액세스 로그(gzip) 디렉토리를 분석하여 사용량 순위를 출력합니다."""
    from cli.headless import HeadlessConfig, HeadlessRunner
    from shared.io.config import OutputConfig

    _configure_verbosity(verbose)

    try:
        settings = AnalyzerSettings.from_env().override(
            workers=workers,
            list_top=list_top,
            package_top=package_top,
        )
    except ConfigError as e:
        click.echo(format_error_for_user(e), err=True)
        raise SystemExit(1) from e

    config = HeadlessConfig(
        directory=path,
        settings=settings,
        output=OutputConfig.from_options(list_path, package_path, excel_path),
        quiet=quiet,
    )
    exit_code = HeadlessRunner(config).run()
    if exit_code:
        raise SystemExit(exit_code)


def main() -> None:
    """Entry point for the mirror-stats CLI."""
    cli()


if __name__ == "__main__":
    sys.exit(main())
