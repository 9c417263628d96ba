"""
Парсер предметов buff.163.com: ссылка -> SkinRecord.
"""
import asyncio
from typing import Optional

from core.buff_constants import MAX_KEYCHAIN_SLOTS
from core.buff_http_client import BuffHttpClient
from core.exceptions import ScrapeCancelledError
from core.models import SkinRecord
from parsers.item_detail_parser import ItemDetailParser
from .link_resolver import LinkResolver
from .name_index import NameIndex
from .page_fetcher import PageFetcher


class BuffScraper:
    """
    Разрешает ссылку, загружает страницу и парсит ее.

    Общее состояние между вызовами - только неизменяемый NameIndex и пул соединений httpx,
    поэтому scrape можно вызывать параллельно.

    Пример:
        async with BuffScraper(NameIndex.builtin()) as scraper:
            record = await scraper.scrape("https://buff.163.com/...")
    """

    def __init__(
        self,
        name_index: Optional[NameIndex] = None,
        http_client: Optional[BuffHttpClient] = None,
        keychain_slots: int = MAX_KEYCHAIN_SLOTS,
        high_res_image: bool = True,
    ):
        """
        Args:
            name_index: Индекс названий; None - пустой индекс (все названия нераспознаны)
            http_client: HTTP клиент; если не передан, создается свой и закрывается в close()
            keychain_slots: Количество слотов брелков (1 или 2)
            high_res_image: Подменять высоту картинки на увеличенную
        """
        self.name_index = name_index or NameIndex.empty()
        self._owns_http_client = http_client is None
        self.http_client = http_client or BuffHttpClient()
        self.link_resolver = LinkResolver(self.http_client)
        self.page_fetcher = PageFetcher(self.http_client)
        self.item_parser = ItemDetailParser(
            self.name_index, keychain_slots=keychain_slots, high_res_image=high_res_image
        )
        self._shutdown = asyncio.Event()
        self._pending: set[asyncio.Future] = set()
        self._closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def _scrape(self, url: str) -> SkinRecord:
        query = await self.link_resolver.resolve(url)
        html = await self.page_fetcher.fetch(query)
        return self.item_parser.parse(html)

    async def scrape(self, url: str, cancel_event: Optional[asyncio.Event] = None) -> SkinRecord:
        """
        Получает данные о скине по share-ссылке.

        Args:
            url: Ссылка buff.163.com
            cancel_event: Событие отмены для этого вызова

        Returns:
            SkinRecord

        Raises:
            ScrapeCancelledError: Если сработал cancel_event или парсер остановлен
            ScrapeError: Любая другая ошибка разрешения, загрузки или парсинга
        """
        if self._closed:
            raise ScrapeCancelledError("Scraper is closed")
        if cancel_event is not None and cancel_event.is_set():
            raise ScrapeCancelledError()

        pipeline = asyncio.ensure_future(self._scrape(url))
        self._pending.add(pipeline)
        pipeline.add_done_callback(self._pending.discard)
        watchers = [asyncio.ensure_future(self._shutdown.wait())]
        if cancel_event is not None:
            watchers.append(asyncio.ensure_future(cancel_event.wait()))

        try:
            await asyncio.wait([pipeline, *watchers], return_when=asyncio.FIRST_COMPLETED)
        finally:
            for watcher in watchers:
                watcher.cancel()
            if not pipeline.done():
                pipeline.cancel()

        # Готовый результат важнее отмены, пришедшей одновременно с ним
        if pipeline.done() and not pipeline.cancelled():
            return pipeline.result()

        await asyncio.gather(pipeline, return_exceptions=True)
        if self._shutdown.is_set():
            raise ScrapeCancelledError("Scraper is shutting down")
        raise ScrapeCancelledError()

    async def close(self):
        """Останавливает парсер: текущие scrape получают ScrapeCancelledError. Повторный вызов ничего не делает."""
        if self._closed:
            return
        self._closed = True
        self._shutdown.set()
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        # Клиент закрываем только после того, как запросы отменены
        await asyncio.gather(*pending, return_exceptions=True)
        if self._owns_http_client:
            await self.http_client.close()
