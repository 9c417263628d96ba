"""
Скрипт для получения данных о скине по ссылке buff.163.com.

Использование:
    python inspect_buff.py <url> [--catalog catalog.json] [--json]
"""
import argparse
import asyncio
import signal
import sys
from typing import Optional, Sequence
from loguru import logger

from core import Config, ScrapeError, SkinRecord
from core.logger import setup_logging
from services import BuffScraper, NameIndex, load_catalog_or_none


def build_name_index(catalog_path: Optional[str], language: Optional[str]) -> NameIndex:
    """Индекс из каталога, если он задан, иначе встроенная таблица оружия."""
    catalog = load_catalog_or_none(catalog_path)
    if catalog is None:
        logger.info("📚 Каталог не задан, используется встроенная таблица оружия")
        return NameIndex.builtin()
    return NameIndex.from_catalog(catalog, language=language)


def format_record(record: SkinRecord, as_json: bool = False) -> str:
    if as_json:
        return record.model_dump_json(indent=2)
    return record.describe()


async def inspect(url: str, name_index: NameIndex, as_json: bool = False) -> int:
    """
    Парсит одну ссылку и печатает результат.

    Returns:
        Код выхода: 0 - успех, 1 - ошибка парсинга
    """
    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, cancel_event.set)
        signal_installed = True
    except (NotImplementedError, RuntimeError):
        signal_installed = False  # Windows: Ctrl-C прервет asyncio.run

    try:
        async with BuffScraper(
            name_index,
            keychain_slots=Config.KEYCHAIN_SLOTS,
            high_res_image=Config.HIGH_RES_IMAGE,
        ) as scraper:
            try:
                record = await scraper.scrape(url, cancel_event=cancel_event)
            except ScrapeError as e:
                logger.error(f"❌ {url}: {e!r}")
                print(f"Error: {e}")
                return 1
    finally:
        if signal_installed:
            loop.remove_signal_handler(signal.SIGINT)

    print(format_record(record, as_json=as_json))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Данные о скине по ссылке buff.163.com")
    parser.add_argument("url", help="Ссылка buff.163.com (share-ссылка или ссылка с параметрами ассета)")
    parser.add_argument("--catalog", default=Config.CATALOG_PATH or None, help="JSON каталог названий")
    parser.add_argument("--language", default=Config.CATALOG_LANGUAGE, help="Язык названий в каталоге")
    parser.add_argument("--json", action="store_true", help="Вывести результат в JSON")
    args = parser.parse_args(argv)

    setup_logging("inspect_buff")
    try:
        Config.validate()
        name_index = build_name_index(args.catalog, args.language)
    except (ValueError, ScrapeError) as e:
        print(f"Error: {e}")
        return 2

    return asyncio.run(inspect(args.url, name_index, as_json=args.json))


if __name__ == "__main__":
    sys.exit(main())
