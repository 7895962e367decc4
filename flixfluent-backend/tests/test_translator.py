"""
FlixFluent 단어 번역기 테스트
Ollama 클라이언트를 가짜 객체로 대체하여 테스트합니다.
"""

import asyncio
import json

import httpx
import ollama
import pytest

from app.models.translation import PLACEHOLDER_TRANSLATION, TranslationRecord
from app.modules.errors import InvalidRequest, TranslationUnavailable
from app.modules.translator import WordTranslator, build_translation_prompt
from conftest import StubOllamaClient


VALID_RESPONSE = json.dumps({
    "translatedText": "love",
    "pronunciation": "sarang",
    "partOfSpeech": "noun",
    "examples": [
        {"source": "사랑은 아름다워요.", "target": "Love is beautiful."},
        {"source": "사랑해요.", "target": "I love you."},
    ],
}, ensure_ascii=False)


def translate(client, word: str) -> TranslationRecord:
    return asyncio.run(WordTranslator(client, model="test-model").translate(word))


class TestBuildTranslationPrompt:
    """build_translation_prompt 함수 테스트"""

    def test_contains_word_and_fields(self):
        """프롬프트에 단어와 필드 이름 포함"""
        prompt = build_translation_prompt("사랑")

        assert "사랑" in prompt
        for field_name in ("translatedText", "pronunciation", "partOfSpeech", "examples"):
            assert field_name in prompt


class TestWordTranslator:
    """WordTranslator 테스트"""

    def test_valid_response(self):
        """정상 JSON 응답"""
        client = StubOllamaClient(content=VALID_RESPONSE)
        record = translate(client, "사랑")

        assert record.translated_text == "love"
        assert record.pronunciation == "sarang"
        assert record.part_of_speech == "noun"
        assert len(record.examples) == 2
        assert record.examples[1].source == "사랑해요."
        assert record.examples[1].target == "I love you."

    def test_chat_request_shape(self):
        """JSON 출력 모드, 시스템/사용자 메시지, 모델 이름 확인"""
        client = StubOllamaClient(content=VALID_RESPONSE)
        translate(client, "사랑")

        assert len(client.calls) == 1
        call = client.calls[0]
        assert call["model"] == "test-model"
        assert call["format"] == "json"
        assert [m["role"] for m in call["messages"]] == ["system", "user"]
        assert "사랑" in call["messages"][1]["content"]

    def test_wire_names(self):
        """응답 직렬화는 camelCase 필드 이름"""
        record = translate(StubOllamaClient(content=VALID_RESPONSE), "사랑")
        data = record.model_dump(by_alias=True)

        assert set(data) == {"translatedText", "pronunciation", "partOfSpeech", "examples"}
        assert data["examples"][0] == {"source": "사랑은 아름다워요.", "target": "Love is beautiful."}

    def test_korean_english_example_keys(self):
        """korean/english 키로 된 예문도 허용"""
        content = json.dumps({
            "translatedText": "water",
            "pronunciation": "mul",
            "partOfSpeech": "noun",
            "examples": [{"korean": "물 주세요.", "english": "Water, please."}],
        }, ensure_ascii=False)
        record = translate(StubOllamaClient(content=content), "물")

        assert record.examples[0].source == "물 주세요."
        assert record.examples[0].target == "Water, please."

    def test_missing_optional_fields(self):
        """선택 필드가 없거나 null이면 빈 값으로 채움"""
        content = json.dumps({"translatedText": "hello", "pronunciation": None})
        record = translate(StubOllamaClient(content=content), "안녕")

        assert record.translated_text == "hello"
        assert record.pronunciation == ""
        assert record.part_of_speech == ""
        assert record.examples == []

    def test_invalid_json_returns_placeholder(self):
        """JSON이 아닌 응답은 예외 없이 대체 결과"""
        record = translate(StubOllamaClient(content="{not json"), "사랑")

        assert record.model_dump(by_alias=True) == {
            "translatedText": PLACEHOLDER_TRANSLATION,
            "pronunciation": "",
            "partOfSpeech": "",
            "examples": [],
        }

    def test_schema_mismatch_returns_placeholder(self):
        """스키마에 맞지 않는 JSON도 대체 결과"""
        record = translate(StubOllamaClient(content='["love"]'), "사랑")

        assert record.translated_text == PLACEHOLDER_TRANSLATION

    def test_empty_content_returns_placeholder(self):
        """빈 응답도 대체 결과"""
        record = translate(StubOllamaClient(content=""), "사랑")

        assert record == TranslationRecord.placeholder()

    def test_no_retry_on_malformed_json(self):
        """잘못된 JSON에 대해 재시도하지 않음"""
        client = StubOllamaClient(content="{not json")
        translate(client, "사랑")

        assert len(client.calls) == 1

    @pytest.mark.parametrize("error", [
        ConnectionError("Failed to connect to Ollama"),
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
        ollama.ResponseError("model not found", 404),
    ])
    def test_transport_error(self, error):
        """LLM 연결 실패는 TranslationUnavailable"""
        with pytest.raises(TranslationUnavailable):
            translate(StubOllamaClient(error=error), "사랑")

    def test_missing_word(self):
        """word가 없으면 LLM 호출 전에 실패"""
        client = StubOllamaClient(content=VALID_RESPONSE)

        with pytest.raises(InvalidRequest):
            translate(client, "")
        with pytest.raises(InvalidRequest):
            translate(client, None)

        assert client.calls == []

    def test_check_connection(self):
        """연결 확인"""
        assert WordTranslator(StubOllamaClient()).check_connection() is True
        assert WordTranslator(StubOllamaClient(error=ConnectionError())).check_connection() is False
