"""
FlixFluent timedtext 클라이언트 모듈
YouTube의 비공식 timedtext 엔드포인트에 HTTP GET 요청을 보냅니다.

- type=list&v=VIDEO_ID   → 자막 트랙 목록 XML
- lang=CODE&v=VIDEO_ID   → 자막 본문 XML

응답 본문은 해석하지 않고 그대로 반환합니다 (파싱은 app.utils.parsers 담당).
"""

from typing import Optional

import httpx

from config import get_settings
from app.modules.errors import UpstreamUnavailable


settings = get_settings()


class TimedTextClient:
    """
    timedtext 엔드포인트 클라이언트

    요청마다 새 AsyncClient를 열고 닫으며, 인스턴스는 요청 간 상태를 갖지 않습니다.
    재시도는 하지 않습니다.
    """

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        user_agent: str = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: timedtext 엔드포인트 URL
            timeout: 요청 타임아웃 (초)
            user_agent: User-Agent 헤더
            transport: httpx 전송 계층 (테스트용 MockTransport 주입)
        """
        self.base_url = base_url or settings.TIMEDTEXT_URL
        self.timeout = timeout if timeout is not None else settings.TIMEDTEXT_TIMEOUT
        self.user_agent = user_agent or settings.TIMEDTEXT_USER_AGENT
        self._transport = transport

    async def _get(self, params: dict[str, str]) -> str:
        """timedtext 엔드포인트에 GET 요청을 보내고 본문을 반환합니다."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as e:
            raise UpstreamUnavailable(
                f"timedtext 요청 타임아웃 ({self.timeout}초)"
            ) from e
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailable(
                f"timedtext 응답 오류: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"timedtext 연결 실패: {e}") from e

    async def fetch_language_list(self, video_id: str) -> str:
        """영상의 자막 트랙 목록 XML을 가져옵니다."""
        print(f"[TimedText] 트랙 목록 요청: video={video_id}")
        return await self._get({"type": "list", "v": video_id})

    async def fetch_track(self, video_id: str, language_code: str) -> str:
        """영상의 특정 언어 자막 XML을 가져옵니다."""
        print(f"[TimedText] 자막 요청: video={video_id}, lang={language_code}")
        return await self._get({"lang": language_code, "v": video_id})
