"""
reports/mirror_log/grammar.py - 액세스 로그 라인 문법 파서

combined 형식 액세스 로그 한 줄(bytes)을 ParsedLine으로 분류합니다.

모든 파서는 ``(data, pos) -> Ok | Fail`` 형태의 순수 함수입니다.
성공하면 값과 다음 위치를 담은 Ok, 실패하면 실패 위치와 기대값을 담은 Fail을
반환합니다. 실패는 예외가 아니라 일반 값이므로 조합 중에 그대로 전달됩니다.

문법 (왼쪽에서 오른쪽, 최상위는 선언 순서대로 첫 번째 성공):
    1. 첫 번째 ``"`` 직전까지 헤더 필드 건너뛰기
    2. ``"GET ``
    3. URL (순서 고정)
       a. /packages/<2>/<2>/<60>/<file> HTTP/1.1" | HTTP/2.0"   -> Download
       b. /simple/<name>/ HTTP/1.1" | HTTP/2.0"                  -> ListingOf
       c. /simple/ HTTP/1.1" | HTTP/2.0"                         -> FullIndexListing
    4. 상태 코드 리터럴 ``304`` 또는 ``200``
    5. 304 -> Cached (나머지 무시)
    6. 200 -> 공백 + 숫자열 -> Fresh(size)

Usage:
    from reports.mirror_log.grammar import Fail, parse_line

    result = parse_line(b'1.2.3.4 - - [..] "GET /simple/ HTTP/1.1" 200 512 "-" "pip"')
    if not isinstance(result, Fail):
        parsed = result.value  # Fresh(FullIndexListing(), 512)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple, Optional, Union

from .types import (
    FULL_INDEX,
    SEG_1_LENGTH,
    SEG_2_LENGTH,
    SEG_3_LENGTH,
    Cached,
    Download,
    Fresh,
    ListingOf,
    ListKey,
    PackageKey,
    ParsedLine,
)

# =============================================================================
# 결과 타입
# =============================================================================


class Ok(NamedTuple):
    """파싱 성공: 값과 소비 이후 위치"""

    value: Any
    pos: int


class Fail(NamedTuple):
    """파싱 실패: 실패 위치와 기대했던 입력"""

    pos: int
    expected: str


Result = Union[Ok, Fail]
Parser = Callable[[bytes, int], Result]


# =============================================================================
# 기본 파서 / 조합자
# =============================================================================


def tag(literal: bytes) -> Parser:
    """리터럴 바이트열과 정확히 일치"""

    def parse(data: bytes, pos: int) -> Result:
        if data.startswith(literal, pos):
            return Ok(literal, pos + len(literal))
        return Fail(pos, repr(literal))

    return parse


def take(count: int) -> Parser:
    """정확히 count 바이트 (입력이 부족하면 실패)"""

    def parse(data: bytes, pos: int) -> Result:
        end = pos + count
        if end > len(data):
            return Fail(pos, f"{count} bytes")
        return Ok(data[pos:end], end)

    return parse


def take_till(stop: bytes) -> Parser:
    """stop 바이트 직전까지 0바이트 이상 (stop이 없으면 실패)"""

    def parse(data: bytes, pos: int) -> Result:
        end = data.find(stop, pos)
        if end < 0:
            return Fail(pos, f"bytes until {stop!r}")
        return Ok(data[pos:end], end)

    return parse


def digits(data: bytes, pos: int) -> Result:
    """1개 이상의 ASCII 숫자"""
    end = pos
    length = len(data)
    while end < length and 0x30 <= data[end] <= 0x39:
        end += 1
    if end == pos:
        return Fail(pos, "digits")
    return Ok(data[pos:end], end)


def alt(*parsers: Parser) -> Parser:
    """선언 순서대로 시도하여 첫 번째 성공을 반환

    실패한 대안은 입력을 소비하지 않으므로 다음 대안은 같은 위치에서 시작합니다.
    """

    def parse(data: bytes, pos: int) -> Result:
        expected = []
        for parser in parsers:
            result = parser(data, pos)
            if isinstance(result, Ok):
                return result
            expected.append(result.expected)
        return Fail(pos, " | ".join(expected))

    return parse


def sequence(*parsers: Parser) -> Parser:
    """모든 파서를 순서대로 적용하여 값 튜플을 반환 (하나라도 실패하면 전체 실패)"""

    def parse(data: bytes, pos: int) -> Result:
        values = []
        current = pos
        for parser in parsers:
            result = parser(data, current)
            if isinstance(result, Fail):
                return result
            values.append(result.value)
            current = result.pos
        return Ok(tuple(values), current)

    return parse


def _decode(raw: bytes) -> Optional[str]:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


# =============================================================================
# 라인 구성 요소
# =============================================================================

_http_tail = alt(tag(b' HTTP/1.1" '), tag(b' HTTP/2.0" '))
_listing_tail = alt(tag(b'/ HTTP/1.1" '), tag(b'/ HTTP/2.0" '))
_slash = tag(b"/")

_download_shape = sequence(
    tag(b"/packages/"),
    take(SEG_1_LENGTH),
    _slash,
    take(SEG_2_LENGTH),
    _slash,
    take(SEG_3_LENGTH),
    _slash,
    take_till(b" "),
    _http_tail,
)
_listing_shape = sequence(tag(b"/simple/"), take_till(b"/"), _listing_tail)
_full_index_shape = sequence(tag(b"/simple/"), _http_tail)

_match_get = tag(b'"GET ')
_status = alt(tag(b"304"), tag(b"200"))
_size = sequence(tag(b" "), digits)


def skip_head(data: bytes, pos: int) -> Result:
    """첫 번째 따옴표 직전까지 건너뛰기"""
    quote = data.find(b'"', pos)
    if quote < 0:
        return Fail(pos, '"')
    return Ok(data[pos:quote], quote)


def parse_download(data: bytes, pos: int) -> Result:
    """/packages/<seg_1>/<seg_2>/<seg_3>/<package> -> Download"""
    result = _download_shape(data, pos)
    if isinstance(result, Fail):
        return result

    _, seg_1, _, seg_2, _, seg_3, _, package, _ = result.value
    fields = [_decode(raw) for raw in (seg_1, seg_2, seg_3, package)]
    if None in fields:
        return Fail(pos, "utf-8 package path")

    return Ok(Download(PackageKey(*fields)), result.pos)


def parse_listing(data: bytes, pos: int) -> Result:
    """/simple/<name>/ -> ListingOf"""
    result = _listing_shape(data, pos)
    if isinstance(result, Fail):
        return result

    name = _decode(result.value[1])
    if name is None:
        return Fail(pos, "utf-8 listing name")

    return Ok(ListingOf(ListKey(name)), result.pos)


def parse_full_index(data: bytes, pos: int) -> Result:
    """/simple/ -> FullIndexListing"""
    result = _full_index_shape(data, pos)
    if isinstance(result, Fail):
        return result
    return Ok(FULL_INDEX, result.pos)


# 우선순위 고정: Download > ListingOf > FullIndexListing
parse_url = alt(parse_download, parse_listing, parse_full_index)


# =============================================================================
# 라인 파서
# =============================================================================


def parse_line(line: bytes) -> Result:
    """로그 한 줄을 파싱

    Args:
        line: 개행 문자를 제외한 로그 라인

    Returns:
        Ok(ParsedLine, pos) 또는 Fail(pos, expected)
    """
    result = skip_head(line, 0)
    if isinstance(result, Fail):
        return result

    result = _match_get(line, result.pos)
    if isinstance(result, Fail):
        return result

    url = parse_url(line, result.pos)
    if isinstance(url, Fail):
        return url

    status = _status(line, url.pos)
    if isinstance(status, Fail):
        return status

    if status.value == b"304":
        return Ok(Cached(url.value), status.pos)

    size = _size(line, status.pos)
    if isinstance(size, Fail):
        return size

    return Ok(Fresh(url.value, int(size.value[1])), size.pos)


def classify(line: bytes) -> Optional[ParsedLine]:
    """파싱 성공 시 ParsedLine, 실패 시 None"""
    result = parse_line(line)
    if isinstance(result, Fail):
        return None
    return result.value
