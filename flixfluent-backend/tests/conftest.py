"""
FlixFluent 테스트 공통 설정
가짜 timedtext 클라이언트, 가짜 Ollama 클라이언트, 샘플 XML을 제공합니다.
"""

import sys
from pathlib import Path

import pytest

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.modules.errors import UpstreamUnavailable


TRANSCRIPT_XML = """<?xml version="1.0" encoding="utf-8" ?>
<transcript>
    <text start="0.0" dur="2.5">Hello</text>
    <text start="2.5" dur="3.0">World</text>
</transcript>
"""

KOREAN_TRANSCRIPT_XML = """<?xml version="1.0" encoding="utf-8" ?>
<transcript>
    <text start="0.0" dur="1.5">안녕하세요</text>
    <text start="1.5" dur="2.0">반갑습니다</text>
    <text start="3.5" dur="1.0">사랑해요</text>
</transcript>
"""

EMPTY_TRANSCRIPT_XML = """<?xml version="1.0" encoding="utf-8" ?>
<transcript></transcript>
"""

TRACK_LIST_XML = """<?xml version="1.0" encoding="utf-8" ?>
<transcript_list docid="123">
    <track id="0" name="" lang_code="en" lang_original="English" lang_translated="English" lang_default="true"/>
    <track id="1" name="" lang_code="ko" lang_original="한국어" lang_translated="Korean"/>
</transcript_list>
"""


class FakeTimedTextClient:
    """
    메모리 기반 timedtext 클라이언트
    언어별 응답 본문 또는 예외를 지정하고, 호출 기록을 남깁니다.
    """

    def __init__(self, tracks: dict = None, track_list: str = "", list_error: Exception = None):
        self.tracks = tracks or {}
        self.track_list = track_list
        self.list_error = list_error
        self.calls: list[tuple] = []

    async def fetch_language_list(self, video_id: str) -> str:
        self.calls.append(("list", video_id))
        if self.list_error:
            raise self.list_error
        return self.track_list

    async def fetch_track(self, video_id: str, language_code: str) -> str:
        self.calls.append(("track", video_id, language_code))
        body = self.tracks.get(language_code, "")
        if isinstance(body, Exception):
            raise body
        return body


class StubOllamaClient:
    """ollama.Client 대체 객체"""

    def __init__(self, content: str = "", error: Exception = None):
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    def chat(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return {"message": {"role": "assistant", "content": self.content}}

    def list(self):
        if self.error:
            raise self.error
        return {"models": []}


@pytest.fixture
def upstream_down():
    return UpstreamUnavailable("timedtext 연결 실패: connection refused")
