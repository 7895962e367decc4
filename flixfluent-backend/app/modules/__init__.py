"""
FlixFluent 모듈 패키지
핵심 비즈니스 로직을 포함합니다.
"""

from .errors import (
    FlixFluentError,
    InvalidRequest,
    NoCaptionsFound,
    UpstreamUnavailable,
    TranslationUnavailable,
)

from .timedtext import TimedTextClient

from .subtitle_service import (
    LanguageAvailabilityService,
    SubtitleService,
    DualSubtitleService,
)

from .translator import (
    WordTranslator,
    create_ollama_client,
    build_translation_prompt,
)

__all__ = [
    # 예외
    "FlixFluentError",
    "InvalidRequest",
    "NoCaptionsFound",
    "UpstreamUnavailable",
    "TranslationUnavailable",
    # 자막
    "TimedTextClient",
    "LanguageAvailabilityService",
    "SubtitleService",
    "DualSubtitleService",
    # 번역
    "WordTranslator",
    "create_ollama_client",
    "build_translation_prompt",
]
