"""
HTTP клиент для запросов к buff.163.com.
"""
from typing import Optional
from loguru import logger
import httpx

from .config import Config


class BuffHttpClient:
    """Класс для управления HTTP запросами к buff.163.com."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Инициализация HTTP клиента.

        Args:
            base_url: Базовый URL (по умолчанию Config.BUFF_BASE_URL)
            user_agent: User-Agent (по умолчанию мобильный UA из Config)
            timeout: Таймаут запроса в секундах
            transport: Транспорт httpx (для тестов)
        """
        self.base_url = base_url or Config.BUFF_BASE_URL
        self.user_agent = user_agent or Config.BUFF_USER_AGENT
        self.timeout = timeout or Config.HTTP_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Заголовки мобильного браузера: без них buff отдает другую верстку."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Создает HTTP клиент, если он еще не создан."""
        if self._client is None:
            timeout_config = httpx.Timeout(
                timeout=self.timeout,
                connect=min(10.0, self.timeout * 0.5),
                read=self.timeout,
                write=5.0,
                pool=5.0
            )
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._get_headers(),
                timeout=timeout_config,
                follow_redirects=False,  # 302 разбираем сами
                transport=self._transport,
            )
            logger.debug(f"🌐 BuffHttpClient: Создан HTTP клиент для {self.base_url}")
        return self._client

    @property
    def client(self) -> httpx.AsyncClient:
        """Возвращает HTTP клиент (создает при первом обращении)."""
        return self._ensure_client()

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """GET запрос относительно base_url."""
        return await self._ensure_client().get(url, **kwargs)

    async def close(self):
        """Закрывает HTTP клиент."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("🔒 BuffHttpClient: HTTP клиент закрыт")
