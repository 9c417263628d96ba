"""
Основной парсер страницы item_detail buff.163.com.
Собирает SkinRecord из заголовка, блока свойств, бирки, картинки и украшений.
"""
from typing import Optional, TYPE_CHECKING
from bs4 import BeautifulSoup
from loguru import logger

from core.buff_constants import (
    TITLE_SELECTOR, INFO_BLOCK_SELECTOR, IMAGE_SELECTOR, IMAGE_ATTR, NAME_TAG_SELECTOR,
    NAME_TAG_SEPARATORS, IMAGE_HEIGHT_PATTERN, HIGH_RES_IMAGE_HEIGHT, MAX_KEYCHAIN_SLOTS
)
from core.exceptions import TitleNotFoundError, InfoBlockNotFoundError, UnknownWeaponError
from core.models import SkinRecord
from .decorations_parser import DecorationsParser
from .info_parser import InfoParser

if TYPE_CHECKING:
    from services.name_index import NameIndex


def normalize_image_url(url: Optional[str], high_res: bool = True) -> Optional[str]:
    """
    Подставляет большую высоту в путь картинки (/h/<n> -> /h/2600).

    Returns:
        URL картинки или None, если его нет
    """
    if not url:
        return None
    if high_res:
        return IMAGE_HEIGHT_PATTERN.sub(HIGH_RES_IMAGE_HEIGHT, url)
    return url


def split_name_tag(text: str) -> Optional[str]:
    """
    Возвращает текст бирки после первого двоеточия (':' или '：').

    Пример: "名称：阎王" -> "阎王"
    """
    positions = [pos for pos in (text.find(sep) for sep in NAME_TAG_SEPARATORS) if pos >= 0]
    if not positions:
        return None
    tag = text[min(positions) + 1:].strip()
    return tag or None


class ItemDetailParser:
    """Парсер страницы предмета. Не хранит состояние между вызовами parse."""

    def __init__(
        self,
        name_index: "NameIndex",
        keychain_slots: int = MAX_KEYCHAIN_SLOTS,
        high_res_image: bool = True,
    ):
        """
        Args:
            name_index: Индекс названий оружия, наклеек и брелков
            keychain_slots: Количество слотов брелков (1 или 2)
            high_res_image: Подменять высоту картинки на увеличенную
        """
        self.name_index = name_index
        self.high_res_image = high_res_image
        self.decorations_parser = DecorationsParser(name_index, keychain_slots=keychain_slots)

    def parse(self, html: str) -> SkinRecord:
        """
        Парсит HTML страницы предмета.

        Raises:
            TitleNotFoundError: Нет заголовка
            InfoBlockNotFoundError: Нет блока свойств
            UnknownWeaponError: Заголовок не совпал ни с одним оружием
            FieldParseFailedError: Не распарсилось обязательное числовое поле
        """
        soup = BeautifulSoup(html, 'lxml')

        title = self.parse_title(soup)
        info_lines = self.parse_info_lines(soup)

        definition_index = self.name_index.match_weapon(title)
        if definition_index is None:
            raise UnknownWeaponError(title)

        paint_index = InfoParser.parse_paint_index(info_lines)
        paint_seed = InfoParser.parse_paint_seed(info_lines)
        paint_wear = InfoParser.parse_paint_wear(info_lines)

        stickers, keychains = self.decorations_parser.parse(soup)

        record = SkinRecord(
            title=title,
            image=self.parse_image(soup),
            name_tag=self.parse_name_tag(soup),
            definition_index=definition_index,
            paint_index=paint_index,
            paint_seed=paint_seed,
            paint_wear=paint_wear,
            stickers=stickers,
            keychains=keychains,
        )
        logger.info(
            f"✅ ItemDetailParser: {title} | DefIndex={definition_index} PaintIndex={paint_index} "
            f"Seed={paint_seed} Wear={paint_wear}"
        )
        return record

    @staticmethod
    def parse_title(soup: BeautifulSoup) -> str:
        node = soup.select_one(TITLE_SELECTOR)
        title = node.get_text(" ", strip=True) if node else ""
        if not title:
            raise TitleNotFoundError()
        return title

    @staticmethod
    def parse_info_lines(soup: BeautifulSoup) -> list[str]:
        block = soup.select_one(INFO_BLOCK_SELECTOR)
        if block is None:
            raise InfoBlockNotFoundError()
        return InfoParser.get_lines(block)

    def parse_image(self, soup: BeautifulSoup) -> Optional[str]:
        node = soup.select_one(IMAGE_SELECTOR)
        src = node.get(IMAGE_ATTR) if node else None
        return normalize_image_url(src, high_res=self.high_res_image)

    @staticmethod
    def parse_name_tag(soup: BeautifulSoup) -> Optional[str]:
        node = soup.select_one(NAME_TAG_SELECTOR)
        if node is None:
            return None
        return split_name_tag(node.get_text(strip=True))
