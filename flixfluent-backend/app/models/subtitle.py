"""
FlixFluent 자막 데이터 모델
Pydantic을 사용하여 자막 데이터 구조를 정의합니다.
"""

from pydantic import BaseModel, ConfigDict, Field


class Cue(BaseModel):
    """
    개별 자막 큐 모델
    하나의 자막 구간을 나타냅니다. 파싱 후에는 변경되지 않습니다.
    """
    model_config = ConfigDict(frozen=True)

    start: float = Field(..., description="시작 시간 (초)")
    dur: float = Field(default=0.0, description="표시 시간 (초)")
    text: str = Field(default="", description="자막 텍스트")

    @property
    def duration(self) -> float:
        return self.dur

    @property
    def end(self) -> float:
        """종료 시간 (초)"""
        return self.start + self.dur


class LanguageDescriptor(BaseModel):
    """
    자막 트랙 언어 정보
    언어 코드 기준으로 식별됩니다.
    """
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="언어 코드 (예: en, ko)")
    name: str = Field(default="", description="언어 이름 (예: English, 한국어)")


class LanguageListResult(BaseModel):
    """사용 가능한 자막 언어 조회 결과"""
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")
    languages: list[str] = Field(default_factory=list, description="언어 코드 목록")
    has_english: bool = Field(default=False, alias="hasEnglish")
    has_korean: bool = Field(default=False, alias="hasKorean")


class SubtitleResult(BaseModel):
    """
    단일 언어 자막 조회 결과
    자막이 비어 있으면 생성되지 않습니다 (NoCaptionsFound).
    """
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")
    language: str = Field(..., description="자막 언어")
    subtitles: list[Cue] = Field(default_factory=list)


class LanguageSide(BaseModel):
    """이중 자막 응답의 한쪽 언어"""
    available: bool = False
    subtitles: list[Cue] = Field(default_factory=list)


class DualSubtitleResult(BaseModel):
    """
    영어/한국어 이중 자막 조회 결과
    최소 한쪽은 available=True 입니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")
    english: LanguageSide = Field(default_factory=LanguageSide)
    korean: LanguageSide = Field(default_factory=LanguageSide)
