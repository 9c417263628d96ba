"""
Парсер наклеек и брелков со страницы item_detail buff.163.com.
"""
from typing import Optional, TYPE_CHECKING
from bs4 import BeautifulSoup, Tag
from loguru import logger

from core.buff_constants import (
    DECORATION_CARD_SELECTOR, DECORATION_NAME_SELECTOR, STICKER_WEAR_MARKER,
    KEYCHAIN_TEMPLATE_MARKER, INT_PATTERN, FLOAT_PATTERN, STICKER_SLOTS, MAX_KEYCHAIN_SLOTS
)
from core.models import StickerSlot, KeychainSlot, empty_stickers, empty_keychains

if TYPE_CHECKING:
    from services.name_index import NameIndex

UNRESOLVED_ID = -1


def sticker_condition(damage_percent: float) -> float:
    """
    Переводит "износ" наклейки в процентах со страницы в состояние 0.0-1.0.

    buff показывает износ, а сервис скинов ждет clamp(100 - износ, 0, 100) / 100.
    """
    return min(max(100.0 - damage_percent, 0.0), 100.0) / 100.0


def _number_after(text: str, marker: str, pattern) -> Optional[str]:
    index = text.find(marker)
    if index < 0:
        return None
    match = pattern.search(text, index + len(marker))
    return match.group() if match else None


class DecorationsParser:
    """Раскладывает карточки украшений по слотам наклеек и брелков."""

    def __init__(self, name_index: "NameIndex", keychain_slots: int = MAX_KEYCHAIN_SLOTS):
        """
        Args:
            name_index: Индекс названий
            keychain_slots: Сколько слотов брелков заполнять (1 или 2)
        """
        if not 1 <= keychain_slots <= MAX_KEYCHAIN_SLOTS:
            raise ValueError(f"keychain_slots должен быть от 1 до {MAX_KEYCHAIN_SLOTS}, получено {keychain_slots}")
        self.name_index = name_index
        self.keychain_slots = keychain_slots

    @staticmethod
    def is_keychain_card(card: Tag) -> bool:
        return KEYCHAIN_TEMPLATE_MARKER in card.get_text(" ", strip=True)

    @staticmethod
    def card_name(card: Tag) -> str:
        node = card.select_one(DECORATION_NAME_SELECTOR)
        return node.get_text(strip=True) if node else ""

    def parse(self, soup: BeautifulSoup) -> tuple[list[StickerSlot], list[KeychainSlot]]:
        """
        Извлекает наклейки и брелки в порядке появления на странице.

        Returns:
            (6 слотов наклеек, keychain_slots слотов брелков); пустые слоты имеют id 0
        """
        stickers = empty_stickers()
        keychains = empty_keychains(self.keychain_slots)
        sticker_slot = 0
        keychain_slot = 0

        for card in soup.select(DECORATION_CARD_SELECTOR):
            if self.is_keychain_card(card):
                if keychain_slot >= self.keychain_slots:
                    logger.debug(f"    🔑 Лишний брелок пропущен: {self.card_name(card)}")
                    continue
                keychains[keychain_slot] = self.parse_keychain(card, keychain_slot)
                keychain_slot += 1
            else:
                if sticker_slot >= STICKER_SLOTS:
                    logger.debug(f"    🏷️ Лишняя наклейка пропущена: {self.card_name(card)}")
                    continue
                stickers[sticker_slot] = self.parse_sticker(card, sticker_slot)
                sticker_slot += 1

        if sticker_slot or keychain_slot:
            logger.debug(f"    🏷️ DecorationsParser: Наклеек: {sticker_slot}, брелков: {keychain_slot}")
        return stickers, keychains

    def parse_sticker(self, card: Tag, slot: int) -> StickerSlot:
        name = self.card_name(card)
        sticker_id = self.name_index.sticker_id(name) if name else None
        if sticker_id is None:
            logger.warning(f"    ⚠️ Наклейка не найдена в каталоге: '{name}' (слот {slot})")
            return StickerSlot(id=UNRESOLVED_ID, slot=slot, name=name)

        # Без строки износа состояние 0 ("неизвестно"), формула не применяется
        wear = 0.0
        damage = _number_after(card.get_text(" ", strip=True), STICKER_WEAR_MARKER, FLOAT_PATTERN)
        if damage is not None:
            wear = sticker_condition(float(damage))
        return StickerSlot(id=sticker_id, slot=slot, wear=wear, name=name)

    def parse_keychain(self, card: Tag, slot: int) -> KeychainSlot:
        name = self.card_name(card)
        seed_text = _number_after(card.get_text(" ", strip=True), KEYCHAIN_TEMPLATE_MARKER, INT_PATTERN)
        seed = int(seed_text) if seed_text is not None else 0

        keychain_id = self.name_index.keychain_id(name) if name else None
        if keychain_id is None:
            logger.warning(f"    ⚠️ Брелок не найден в каталоге: '{name}' (слот {slot})")
            return KeychainSlot(id=UNRESOLVED_ID, slot=slot, seed=seed, name=name)
        return KeychainSlot(id=keychain_id, slot=slot, seed=seed, name=name)
