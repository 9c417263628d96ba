"""
Исключения парсера buff.163.com.
Каждая ошибка завершает текущий вызов scrape, повторов внутри нет.
"""
from typing import Optional, Sequence


class ScrapeError(Exception):
    """Базовая ошибка парсинга предмета."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class InvalidLinkError(ScrapeError):
    """Ссылка не относится к buff.163.com."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Not a buff.163.com URL: {url}")


class UnexpectedStatusError(ScrapeError):
    """При разрешении ссылки вместо редиректа пришел другой статус."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Expected redirect, got HTTP {status_code}")


class EmptyRedirectError(ScrapeError):
    """Редирект без заголовка Location."""

    def __init__(self):
        super().__init__("Empty redirect")


class MissingParametersError(ScrapeError):
    """В ссылке нет обязательных параметров ассета."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Missing: {', '.join(self.missing)}")


class FetchFailedError(ScrapeError):
    """Сетевая ошибка или не-2xx ответ при запросе страницы."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TitleNotFoundError(ScrapeError):
    """На странице нет заголовка предмета."""

    def __init__(self):
        super().__init__("Title not found")


class InfoBlockNotFoundError(ScrapeError):
    """На странице нет блока со свойствами предмета."""

    def __init__(self):
        super().__init__("Info not found")


class UnknownWeaponError(ScrapeError):
    """Заголовок не совпал ни с одним оружием из каталога."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Unknown weapon: {title}")


class FieldParseFailedError(ScrapeError):
    """Обязательное числовое поле не найдено или не распарсилось."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Cannot parse {field}")


class ScrapeCancelledError(ScrapeError):
    """Операция отменена вызывающим кодом или остановкой парсера."""

    def __init__(self, message: str = "Scrape cancelled"):
        super().__init__(message)


class CatalogError(ScrapeError):
    """Не удалось загрузить каталог названий."""
