"""
Загрузка страницы item_detail buff.163.com.
"""
from loguru import logger
import httpx

from core.buff_constants import ITEM_DETAIL_PATH, GAME
from core.buff_http_client import BuffHttpClient
from core.exceptions import FetchFailedError


class PageFetcher:
    """Один GET запрос страницы предмета, без повторов."""

    def __init__(self, http_client: BuffHttpClient):
        self.http_client = http_client

    @staticmethod
    def build_url(query: str) -> str:
        return f"{ITEM_DETAIL_PATH}?game={GAME}&{query}"

    async def fetch(self, query: str) -> str:
        """
        Получает HTML страницы предмета.

        Args:
            query: Каноническая строка параметров ассета

        Returns:
            HTML содержимое страницы

        Raises:
            FetchFailedError: При сетевой ошибке, таймауте или не-2xx статусе
        """
        url = self.build_url(query)
        logger.debug(f"📄 PageFetcher: Запрос страницы предмета: {url}")
        try:
            response = await self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchFailedError(
                f"HTTP {e.response.status_code} for {url}",
                status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailedError(f"Request failed for {url}: {e!r}") from e

        logger.debug(f"📄 PageFetcher: Получено {len(response.text)} символов")
        return response.text
