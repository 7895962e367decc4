"""
FlixFluent 단어 번역 모듈

한국어 단어 하나를 LLM(Ollama)에 보내 영어 번역, 발음, 품사, 예문을
JSON 형식으로 받아옵니다.

번역 흐름:
1. 고정 프롬프트에 단어 삽입
2. JSON 출력 모드(format="json")로 chat 호출
3. 응답을 TranslationRecord 스키마로 검증
4. 검증 실패 시 대체 결과 반환 (예외를 올리지 않음)
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx
import ollama
from pydantic import ValidationError

from config import get_settings
from app.models.translation import TranslationRecord
from app.modules.errors import InvalidRequest, TranslationUnavailable


settings = get_settings()

_executor = ThreadPoolExecutor(max_workers=2)

SYSTEM_PROMPT = "You are a helpful Korean language teacher assistant."


def create_ollama_client(host: str = None, timeout: float = None) -> ollama.Client:
    """설정값으로 Ollama 클라이언트를 생성합니다. 프로세스 시작 시 한 번만 호출합니다."""
    return ollama.Client(
        host=host or settings.OLLAMA_HOST,
        timeout=timeout if timeout is not None else settings.LLM_TIMEOUT,
    )


def build_translation_prompt(word: str) -> str:
    """단어 번역 프롬프트 생성"""
    return f"""
I want you to act as a Korean language teacher. I will provide a Korean word or phrase.
Please provide:
1. The English translation
2. The pronunciation in romanized form (if applicable)
3. The part of speech (noun, verb, adjective, etc.)
4. 2-3 example sentences in both Korean and English that use this word

Format your response as a JSON object with exactly these properties:
- translatedText: the English translation
- pronunciation: romanized pronunciation
- partOfSpeech: part of speech
- examples: array of objects with "source" (Korean sentence) and "target" (English translation) properties

The Korean word or phrase is: {word}
"""


class WordTranslator:
    """LLM 기반 단어 번역기"""

    def __init__(
        self,
        client: ollama.Client,
        model: str = None,
        temperature: float = None,
    ):
        """
        Args:
            client: 프로세스 시작 시 생성한 Ollama 클라이언트
            model: 사용할 모델 이름
            temperature: 샘플링 온도
        """
        self.client = client
        self.model = model or settings.LLM_MODEL
        self.temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE

        print(f"[Translator] 모델: {self.model}")

    # ==========================================
    # LLM 호출
    # ==========================================

    def _complete_sync(self, prompt: str) -> str:
        """동기 chat 호출. 응답 본문(content)을 반환합니다."""
        try:
            response = self.client.chat(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                format="json",
                options={"temperature": self.temperature},
            )
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            raise TranslationUnavailable(f"LLM 호출 실패: {e}") from e

        return response["message"]["content"] or ""

    # ==========================================
    # 응답 파싱
    # ==========================================

    def parse_response(self, response_text: str) -> TranslationRecord:
        """
        응답 JSON을 TranslationRecord로 변환합니다.
        JSON이 아니거나 스키마에 맞지 않으면 대체 결과를 반환합니다.
        """
        try:
            return TranslationRecord.model_validate_json(response_text)
        except ValidationError as e:
            print(f"[Translator] 응답 파싱 실패: {e.error_count()}개 오류")
            return TranslationRecord.placeholder()

    # ==========================================
    # 메인 번역 함수
    # ==========================================

    async def translate(self, word: str) -> TranslationRecord:
        """
        한국어 단어를 번역합니다.

        Raises:
            InvalidRequest: word가 없는 경우
            TranslationUnavailable: LLM 서버 연결 실패
        """
        if not word or not word.strip():
            raise InvalidRequest("Word parameter is required")

        word = word.strip()
        print(f"[Translator] 단어 번역: \"{word}\"")

        loop = asyncio.get_running_loop()
        response_text = await loop.run_in_executor(
            _executor,
            self._complete_sync,
            build_translation_prompt(word),
        )
        print(f"[Translator] 응답 길이: {len(response_text)} chars")

        return self.parse_response(response_text)

    # ==========================================
    # 유틸리티
    # ==========================================

    def check_connection(self) -> bool:
        try:
            self.client.list()
            return True
        except Exception:
            return False
