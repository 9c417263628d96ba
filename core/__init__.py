"""
Основные модули приложения.
"""
from .config import Config
from .models import (
    SkinCategory, detect_category, AssetQuery, Decoration, StickerSlot, KeychainSlot,
    SkinRecord, CatalogEntry, SkinCatalog
)
from .exceptions import (
    ScrapeError, InvalidLinkError, UnexpectedStatusError, EmptyRedirectError,
    MissingParametersError, FetchFailedError, TitleNotFoundError,
    InfoBlockNotFoundError, UnknownWeaponError, FieldParseFailedError,
    ScrapeCancelledError, CatalogError
)
from .buff_http_client import BuffHttpClient

__all__ = [
    'Config',
    'SkinCategory',
    'detect_category',
    'AssetQuery',
    'Decoration',
    'StickerSlot',
    'KeychainSlot',
    'SkinRecord',
    'CatalogEntry',
    'SkinCatalog',
    'ScrapeError',
    'InvalidLinkError',
    'UnexpectedStatusError',
    'EmptyRedirectError',
    'MissingParametersError',
    'FetchFailedError',
    'TitleNotFoundError',
    'InfoBlockNotFoundError',
    'UnknownWeaponError',
    'FieldParseFailedError',
    'ScrapeCancelledError',
    'CatalogError',
    'BuffHttpClient',
]
