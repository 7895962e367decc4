"""
FlixFluent 단어 번역 데이터 모델
LLM 응답(JSON)을 검증하기 위한 스키마를 정의합니다.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


PLACEHOLDER_TRANSLATION = "Could not parse translation data"


class TranslationExample(BaseModel):
    """
    예문 한 쌍 (원문 / 번역문)
    모델이 korean/english 키로 응답하는 경우도 허용합니다.
    """
    source: str = Field(
        default="",
        validation_alias=AliasChoices("source", "korean"),
        description="한국어 예문",
    )
    target: str = Field(
        default="",
        validation_alias=AliasChoices("target", "english"),
        description="영어 번역",
    )


class TranslationRecord(BaseModel):
    """
    단어 번역 결과 모델
    항상 모든 필드가 채워진 상태로 반환됩니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText", description="영어 번역")
    pronunciation: str = Field(default="", description="로마자 발음")
    part_of_speech: str = Field(default="", alias="partOfSpeech", description="품사")
    examples: list[TranslationExample] = Field(default_factory=list)

    @field_validator("pronunciation", "part_of_speech", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("examples", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v

    @classmethod
    def placeholder(cls) -> "TranslationRecord":
        """응답 파싱 실패 시 사용하는 대체 결과"""
        return cls(
            translated_text=PLACEHOLDER_TRANSLATION,
            pronunciation="",
            part_of_speech="",
            examples=[],
        )
