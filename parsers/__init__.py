"""
Модуль парсеров для извлечения данных из HTML страниц buff.163.com.
"""
from .item_detail_parser import ItemDetailParser, normalize_image_url, split_name_tag
from .info_parser import InfoParser
from .decorations_parser import DecorationsParser, sticker_condition
from .item_type_detector import detect_category, is_knife, is_glove

__all__ = [
    'ItemDetailParser',
    'InfoParser',
    'DecorationsParser',
    'normalize_image_url',
    'split_name_tag',
    'sticker_condition',
    'detect_category',
    'is_knife',
    'is_glove',
]
