"""
Сервисы приложения.
"""
from .name_index import NameIndex
from .catalog_loader import load_catalog, load_catalog_or_none
from .link_resolver import LinkResolver, split_buff_url
from .page_fetcher import PageFetcher
from .buff_scraper import BuffScraper

__all__ = [
    'NameIndex',
    'load_catalog',
    'load_catalog_or_none',
    'LinkResolver',
    'split_buff_url',
    'PageFetcher',
    'BuffScraper',
]
