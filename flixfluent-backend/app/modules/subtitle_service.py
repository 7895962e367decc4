"""
FlixFluent 자막 서비스 모듈

- LanguageAvailabilityService: 영상의 자막 언어 목록 조회
- SubtitleService: 단일 언어 자막 조회
- DualSubtitleService: 영어/한국어 자막 동시 조회 (한쪽만 있어도 성공)

파서는 "자막 없음"을 빈 리스트로 반환하고,
이 계층에서 NoCaptionsFound 예외로 바꿉니다.
"""

import asyncio

from config import get_settings
from app.models.subtitle import (
    LanguageListResult,
    SubtitleResult,
    LanguageSide,
    DualSubtitleResult,
)
from app.modules.errors import InvalidRequest, NoCaptionsFound
from app.modules.timedtext import TimedTextClient
from app.utils.parsers import parse_transcript_xml, parse_track_list_xml


settings = get_settings()


def _require_video_id(video_id: str) -> str:
    if not video_id:
        raise InvalidRequest("Video ID is required")
    return video_id


class LanguageAvailabilityService:
    """자막 언어 목록 조회 서비스"""

    def __init__(self, client: TimedTextClient):
        self.client = client

    async def list_languages(self, video_id: str) -> LanguageListResult:
        """
        영상에서 사용 가능한 자막 언어를 조회합니다.
        언어가 하나도 없어도 정상 응답입니다.
        """
        video_id = _require_video_id(video_id)

        body = await self.client.fetch_language_list(video_id)
        codes = [lang.code for lang in parse_track_list_xml(body)]

        result = LanguageListResult(
            video_id=video_id,
            languages=codes,
            has_english="en" in codes,
            has_korean="ko" in codes,
        )

        print(f"[SubtitleService] {video_id}: 자막 언어 {len(codes)}개 발견")
        print(f"[SubtitleService] 영어: {result.has_english}, 한국어: {result.has_korean}")

        return result


class SubtitleService:
    """단일 언어 자막 조회 서비스"""

    def __init__(self, client: TimedTextClient):
        self.client = client

    async def get_subtitles(self, video_id: str, language_code: str = "en") -> SubtitleResult:
        """
        영상의 특정 언어 자막을 조회합니다.

        Args:
            video_id: YouTube 영상 ID
            language_code: 자막 언어 코드 (기본값: "en")

        Returns:
            SubtitleResult (자막이 1개 이상)

        Raises:
            InvalidRequest: video_id가 없는 경우
            NoCaptionsFound: 해당 언어 자막이 없는 경우
            UpstreamUnavailable: timedtext 연결 실패
            SubtitleParseError: 응답 XML이 손상된 경우
        """
        video_id = _require_video_id(video_id)
        language_code = language_code or "en"

        body = await self.client.fetch_track(video_id, language_code)
        cues = parse_transcript_xml(body)

        if not cues:
            raise NoCaptionsFound(f"No {language_code} subtitles found for this video")

        print(f"[SubtitleService] {video_id}: '{language_code}' 자막 {len(cues)}개")

        return SubtitleResult(
            video_id=video_id,
            language=language_code,
            subtitles=cues,
        )


class DualSubtitleService:
    """
    영어/한국어 이중 자막 조회 서비스

    두 언어를 동시에 조회하고 결과를 각각 독립적으로 처리합니다.
    한쪽이 실패해도 다른 쪽은 끝까지 진행되며,
    두 언어 모두 실패한 경우에만 NoCaptionsFound를 발생시킵니다.
    """

    def __init__(
        self,
        subtitle_service: SubtitleService,
        english_code: str = None,
        korean_code: str = None,
    ):
        self.subtitle_service = subtitle_service
        self.english_code = english_code or settings.PRIMARY_LANGUAGE
        self.korean_code = korean_code or settings.SECONDARY_LANGUAGE

    @staticmethod
    def _to_side(outcome, video_id: str, language_code: str) -> LanguageSide:
        """개별 조회 결과를 LanguageSide로 변환합니다. 실패는 available=False."""
        if isinstance(outcome, SubtitleResult):
            return LanguageSide(available=True, subtitles=outcome.subtitles)

        if not isinstance(outcome, Exception):
            raise outcome

        print(f"[SubtitleService] {video_id}: '{language_code}' 자막 사용 불가 ({outcome})")
        return LanguageSide(available=False, subtitles=[])

    async def get_dual(self, video_id: str) -> DualSubtitleResult:
        video_id = _require_video_id(video_id)

        print(f"[SubtitleService] {video_id}: 영어/한국어 자막 동시 조회")

        english, korean = await asyncio.gather(
            self.subtitle_service.get_subtitles(video_id, self.english_code),
            self.subtitle_service.get_subtitles(video_id, self.korean_code),
            return_exceptions=True,
        )

        result = DualSubtitleResult(
            video_id=video_id,
            english=self._to_side(english, video_id, self.english_code),
            korean=self._to_side(korean, video_id, self.korean_code),
        )

        if not result.english.available and not result.korean.available:
            raise NoCaptionsFound(
                f"No {self.english_code} or {self.korean_code} subtitles found for this video"
            )

        return result
