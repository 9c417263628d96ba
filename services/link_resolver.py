"""
Разрешение share-ссылки buff.163.com в параметры ассета.
"""
import re
from urllib.parse import urlsplit
from loguru import logger
import httpx

from core.buff_constants import BUFF_HOST
from core.buff_http_client import BuffHttpClient
from core.exceptions import (
    InvalidLinkError, UnexpectedStatusError, EmptyRedirectError,
    MissingParametersError, FetchFailedError
)
from core.models import AssetQuery

SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def split_buff_url(url: str) -> str:
    """
    Убирает схему и хост из ссылки buff.

    Args:
        url: Ссылка вида https://buff.163.com/... или buff.163.com/...

    Returns:
        Путь с query после хоста ('/' если пусто)

    Raises:
        InvalidLinkError: Если ссылка не на buff.163.com
    """
    cleaned = SCHEME_PATTERN.sub("", url.strip(), count=1)
    if not cleaned.lower().startswith(BUFF_HOST):
        raise InvalidLinkError(url)

    remainder = cleaned[len(BUFF_HOST):]
    # buff.163.com.example.org не наш хост
    if remainder and remainder[0] not in "/?":
        raise InvalidLinkError(url)
    if not remainder.startswith("/"):
        remainder = "/" + remainder
    return remainder


class LinkResolver:
    """Превращает share-ссылку в каноническую строку параметров ассета."""

    def __init__(self, http_client: BuffHttpClient):
        self.http_client = http_client

    async def resolve(self, url: str) -> str:
        """
        Разрешает ссылку в 'classid=..&instanceid=..&contextid=..&assetid=..'.

        Если все четыре параметра уже есть в ссылке, запроса не будет.
        Иначе делается один запрос без следования редиректам и разбирается Location из 302.

        Raises:
            InvalidLinkError, UnexpectedStatusError, EmptyRedirectError,
            MissingParametersError, FetchFailedError
        """
        path = split_buff_url(url)

        direct = AssetQuery.from_query_string(urlsplit(path).query)
        if direct.is_complete():
            logger.debug(f"🔗 LinkResolver: Параметры ассета уже в ссылке: {path}")
            return direct.to_query_string()

        redirect = await self._fetch_redirect(path)
        asset_query = AssetQuery.from_query_string(urlsplit(redirect).query)
        missing = asset_query.missing()
        if missing:
            raise MissingParametersError(missing)

        query = asset_query.to_query_string()
        logger.debug(f"🔗 LinkResolver: {path} -> {query}")
        return query

    async def _fetch_redirect(self, path: str) -> str:
        """Запрашивает share-ссылку и возвращает Location из 302 ответа."""
        try:
            response = await self.http_client.get(path)
        except httpx.InvalidURL as e:
            # httpx отклоняет путь до отправки (например, управляющие символы)
            raise InvalidLinkError(path) from e
        except httpx.HTTPError as e:
            raise FetchFailedError(f"Redirect request failed: {e!r}") from e

        if response.status_code != httpx.codes.FOUND:
            raise UnexpectedStatusError(response.status_code)

        location = response.headers.get("Location", "").strip()
        if not location:
            raise EmptyRedirectError()
        return location
