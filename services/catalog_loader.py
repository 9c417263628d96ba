"""
Загрузка снимка каталога сервиса скинов из JSON файла.
"""
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import ValidationError

from core.exceptions import CatalogError
from core.models import SkinCatalog


def load_catalog(path: Union[str, Path]) -> SkinCatalog:
    """
    Читает каталог из JSON.

    Формат: {"weapons": ..., "stickers": ..., "keychains": ...}, где каждый раздел -
    список {"index": 7, "localized_names": {"zh-CN": "AK-47"}}
    или словарь {"7": {"zh-CN": "AK-47"}}.

    Raises:
        CatalogError: Если файл не читается или не соответствует формату
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        catalog = SkinCatalog.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e.error_count()} error(s)") from e

    logger.debug(
        f"📂 Каталог загружен из {path}: оружие {len(catalog.weapons)}, "
        f"наклейки {len(catalog.stickers)}, брелки {len(catalog.keychains)}"
    )
    return catalog


def load_catalog_or_none(path: Optional[Union[str, Path]]) -> Optional[SkinCatalog]:
    """Загружает каталог, если путь задан; иначе None."""
    if not path:
        return None
    return load_catalog(path)
