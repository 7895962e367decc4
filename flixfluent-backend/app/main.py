"""
FlixFluent Backend - FastAPI 메인 애플리케이션
YouTube 자막(영어/한국어) 조회 및 한국어 단어 번역 API를 제공합니다.
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from config import get_settings
from app.modules import (
    FlixFluentError,
    TimedTextClient,
    LanguageAvailabilityService,
    SubtitleService,
    DualSubtitleService,
    WordTranslator,
    create_ollama_client,
)
from app.utils import SubtitleParseError


settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="FlixFluent - YouTube 이중 자막 및 한국어 단어 번역 API",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 인스턴스 생성 (프로세스당 한 번)
timedtext_client = TimedTextClient()
language_service = LanguageAvailabilityService(timedtext_client)
subtitle_service = SubtitleService(timedtext_client)
dual_subtitle_service = DualSubtitleService(subtitle_service)
translator = WordTranslator(create_ollama_client())


# ===== 요청 로깅 미들웨어 =====

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    if request.url.path.startswith("/api/"):
        duration = time.time() - start_time
        print(f"[API] {request.method} {request.url.path} "
              f"({duration:.2f}초, status={response.status_code})")

    return response


# ===== Health =====

@app.get("/", tags=["Health"])
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    ollama_status = "connected" if translator.check_connection() else "disconnected"

    return {
        "status": "healthy",
        "ollama": ollama_status,
        "model": translator.model,
    }


# ===== Subtitles =====

@app.get("/api/subtitle-languages", tags=["Subtitles"])
async def list_subtitle_languages(
    video_id: Optional[str] = Query(default=None, alias="videoId", description="YouTube Video ID")
) -> dict:
    """영상에서 사용 가능한 자막 언어 목록을 조회합니다."""
    result = await language_service.list_languages(video_id)
    return result.model_dump(by_alias=True)


@app.get("/api/subtitles", tags=["Subtitles"])
async def get_subtitles(
    video_id: Optional[str] = Query(default=None, alias="videoId", description="YouTube Video ID"),
    lang: str = Query(default="en", description="자막 언어 코드")
) -> dict:
    """영상의 단일 언어 자막을 조회합니다."""
    result = await subtitle_service.get_subtitles(video_id, lang)
    return result.model_dump(by_alias=True)


@app.get("/api/dual-subtitles", tags=["Subtitles"])
async def get_dual_subtitles(
    video_id: Optional[str] = Query(default=None, alias="videoId", description="YouTube Video ID")
) -> dict:
    """
    영어/한국어 자막을 동시에 조회합니다.
    한쪽 언어만 있어도 성공하며, 둘 다 없으면 404를 반환합니다.
    """
    result = await dual_subtitle_service.get_dual(video_id)
    return result.model_dump(by_alias=True)


# ===== Translation =====

@app.get("/api/translate", tags=["Translation"])
@app.get("/api/translate-openai", tags=["Translation"], include_in_schema=False)
async def translate_word(
    word: Optional[str] = Query(default=None, description="번역할 한국어 단어 또는 구")
) -> dict:
    """한국어 단어의 영어 번역, 발음, 품사, 예문을 반환합니다."""
    record = await translator.translate(word)
    return {"translation": record.model_dump(by_alias=True)}


# ===== 예외 핸들러 =====

@app.exception_handler(FlixFluentError)
async def flixfluent_error_handler(request: Request, exc: FlixFluentError):
    print(f"[API] ❌ {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(SubtitleParseError)
async def subtitle_parse_error_handler(request: Request, exc: SubtitleParseError):
    print(f"[API] ❌ {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to parse subtitles", "message": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
