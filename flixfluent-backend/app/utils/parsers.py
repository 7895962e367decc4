"""
FlixFluent XML 파서 모듈
YouTube timedtext 응답(자막 본문, 트랙 목록)을 내부 모델로 변환합니다.

두 함수 모두 I/O가 없는 순수 함수입니다.
자막이 없는 응답은 오류가 아니라 빈 리스트로 반환하며,
"자막 없음" 판단은 서비스 계층에서 합니다.
"""

import html
import math
import re
import xml.etree.ElementTree as ET
from typing import Optional

from app.models.subtitle import Cue, LanguageDescriptor


# 세미콜론으로 끝나는 완전한 엔티티 참조만 (&#39; &#x27; &quot;)
_ENTITY_PATTERN = re.compile(r"&(?:#\d+|#x[0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


class SubtitleParseError(ValueError):
    """XML 구조 또는 숫자 속성이 잘못된 경우 발생하는 예외"""
    pass


def _parse_root(xml_body: Optional[str]) -> Optional[ET.Element]:
    """
    XML 문자열을 파싱하여 루트 요소를 반환합니다.
    빈 응답은 None (자막 없음)으로 처리합니다.
    """
    if xml_body is None or not xml_body.strip():
        return None

    try:
        return ET.fromstring(xml_body)
    except ET.ParseError as e:
        raise SubtitleParseError(f"XML 파싱 실패: {e}") from e


def _children(root: Optional[ET.Element], root_tag: str, child_tag: str) -> list[ET.Element]:
    """
    루트 태그가 일치할 때 자식 요소 목록을 반환합니다.
    자식이 하나뿐이어도 항상 리스트로 정규화합니다.
    """
    if root is None or root.tag != root_tag:
        return []
    return list(root.findall(child_tag))


def _parse_seconds(value: Optional[str], name: str, default: Optional[float] = None) -> float:
    """초 단위 숫자 속성을 float로 변환합니다."""
    if value is None:
        if default is None:
            raise SubtitleParseError(f"'{name}' 속성이 없습니다")
        return default

    try:
        seconds = float(value)
    except ValueError as e:
        raise SubtitleParseError(f"'{name}' 속성이 숫자가 아닙니다: {value!r}") from e

    if not math.isfinite(seconds):
        raise SubtitleParseError(f"'{name}' 속성이 유한한 숫자가 아닙니다: {value!r}")
    return seconds


def _element_text(element: ET.Element) -> str:
    """
    요소의 내부 텍스트를 반환합니다.
    YouTube는 엔티티를 이중으로 이스케이프하므로 (&amp;#39;) 한 번 더 해제합니다.
    세미콜론 없는 '&not' 같은 문자열은 그대로 둡니다.
    """
    text = "".join(element.itertext())
    return _ENTITY_PATTERN.sub(lambda m: html.unescape(m.group(0)), text)


def parse_transcript_xml(xml_body: Optional[str]) -> list[Cue]:
    """
    자막 본문 XML을 Cue 리스트로 변환합니다.

    형식:
        <transcript>
            <text start="0.0" dur="2.5">Hello</text>
            ...
        </transcript>

    Args:
        xml_body: timedtext 응답 본문

    Returns:
        문서 순서대로 정렬된 Cue 리스트 (자막이 없으면 빈 리스트)

    Raises:
        SubtitleParseError: XML이 손상되었거나 start/dur 값이 숫자가 아닌 경우
    """
    root = _parse_root(xml_body)

    cues: list[Cue] = []
    for element in _children(root, "transcript", "text"):
        cues.append(Cue(
            start=_parse_seconds(element.get("start"), "start"),
            dur=_parse_seconds(element.get("dur"), "dur", default=0.0),
            text=_element_text(element),
        ))

    return cues


def parse_track_list_xml(xml_body: Optional[str]) -> list[LanguageDescriptor]:
    """
    자막 트랙 목록 XML을 LanguageDescriptor 리스트로 변환합니다.

    형식:
        <transcript_list docid="...">
            <track id="0" lang_code="en" lang_original="English" lang_translated="English"/>
            ...
        </transcript_list>

    표시 이름 우선순위: lang_original → lang_translated → lang_code
    lang_code가 없는 트랙은 건너뛰고, 중복 코드는 처음 것만 유지합니다.

    Args:
        xml_body: timedtext type=list 응답 본문

    Returns:
        문서 순서대로 정렬된 LanguageDescriptor 리스트
    """
    root = _parse_root(xml_body)

    languages: list[LanguageDescriptor] = []
    seen: set[str] = set()

    for track in _children(root, "transcript_list", "track"):
        code = track.get("lang_code")
        if not code or code in seen:
            continue

        name = track.get("lang_original") or track.get("lang_translated") or code
        languages.append(LanguageDescriptor(code=code, name=name))
        seen.add(code)

    return languages
