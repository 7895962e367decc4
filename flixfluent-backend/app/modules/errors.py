"""
FlixFluent 서비스 예외 정의
각 예외는 HTTP 상태 코드와 사용자용 메시지를 가집니다.
"""


class FlixFluentError(Exception):
    """서비스 계층 예외의 기본 클래스"""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class InvalidRequest(FlixFluentError):
    """필수 파라미터(videoId, word)가 없는 경우"""

    status_code = 400
    error = "Invalid request"


class NoCaptionsFound(FlixFluentError):
    """업스트림은 정상이지만 사용할 수 있는 자막이 없는 경우"""

    status_code = 404
    error = "No subtitles found"


class UpstreamUnavailable(FlixFluentError):
    """YouTube timedtext 엔드포인트 연결 실패 (연결 오류, 타임아웃, 2xx 외 응답)"""

    status_code = 500
    error = "Failed to fetch subtitles"


class TranslationUnavailable(FlixFluentError):
    """LLM 서버 연결 실패"""

    status_code = 500
    error = "Failed to translate text"
