"""
FlixFluent 데이터 모델 패키지
"""

from .subtitle import (
    Cue,
    LanguageDescriptor,
    LanguageListResult,
    SubtitleResult,
    LanguageSide,
    DualSubtitleResult,
)
from .translation import (
    PLACEHOLDER_TRANSLATION,
    TranslationExample,
    TranslationRecord,
)

__all__ = [
    "Cue",
    "LanguageDescriptor",
    "LanguageListResult",
    "SubtitleResult",
    "LanguageSide",
    "DualSubtitleResult",
    "PLACEHOLDER_TRANSLATION",
    "TranslationExample",
    "TranslationRecord",
]
