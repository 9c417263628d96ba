"""
Pydantic модели для данных о предмете с buff.163.com.
"""
from enum import Enum
from typing import Optional
from urllib.parse import parse_qs, urlencode
from pydantic import BaseModel, Field, computed_field, field_validator

from .buff_constants import (
    ASSET_PARAMS, STICKER_SLOTS, MAX_KEYCHAIN_SLOTS, KNIFE_INDEX_RANGE, GLOVE_INDEX_MIN
)


class SkinCategory(str, Enum):
    """Категория предмета."""
    WEAPON = "weapon"
    KNIFE = "knife"
    GLOVE = "glove"


def detect_category(definition_index: int) -> SkinCategory:
    """
    Определяет категорию по definition index.

    Правила:
    - 500-526 → нож
    - 4725 и выше → перчатки
    - остальное → оружие

    Args:
        definition_index: Definition index предмета

    Returns:
        SkinCategory
    """
    knife_min, knife_max = KNIFE_INDEX_RANGE
    if knife_min <= definition_index <= knife_max:
        return SkinCategory.KNIFE
    if definition_index >= GLOVE_INDEX_MIN:
        return SkinCategory.GLOVE
    return SkinCategory.WEAPON


class AssetQuery(BaseModel):
    """
    Параметры ассета (classid, instanceid, contextid, assetid).

    Пустая строка и None одинаково считаются отсутствующим параметром.
    """
    classid: Optional[str] = None
    instanceid: Optional[str] = None
    contextid: Optional[str] = None
    assetid: Optional[str] = None

    @classmethod
    def from_query_string(cls, query: str) -> "AssetQuery":
        """
        Извлекает параметры ассета из строки запроса.
        Лишние параметры игнорируются, при повторах берется первое значение.

        Args:
            query: Строка запроса с '?' или без

        Returns:
            AssetQuery (возможно неполный)
        """
        parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
        return cls(**{name: parsed[name][0] for name in ASSET_PARAMS if name in parsed})

    def missing(self) -> list[str]:
        """Возвращает отсутствующие или пустые параметры в фиксированном порядке."""
        return [name for name in ASSET_PARAMS if not getattr(self, name)]

    def is_complete(self) -> bool:
        return not self.missing()

    def to_query_string(self) -> str:
        """
        Собирает каноническую строку запроса из четырех параметров.
        Значения кодируются заново: parse_qs их уже раскодировал.

        Raises:
            ValueError: Если какие-то параметры отсутствуют
        """
        missing = self.missing()
        if missing:
            raise ValueError(f"Отсутствуют параметры ассета: {', '.join(missing)}")
        return urlencode([(name, getattr(self, name)) for name in ASSET_PARAMS])


class Decoration(BaseModel):
    """
    Базовая модель украшения (наклейка или брелок).

    id: 0 - пустой слот, -1 - название не найдено в каталоге, >0 - ID из каталога.
    """
    id: int = Field(default=0, ge=-1, description="ID украшения в каталоге")
    slot: int = Field(ge=0, description="Номер слота")
    name: str = Field(default="", description="Оригинальное название со страницы")

    @property
    def is_empty(self) -> bool:
        return self.id == 0

    @property
    def is_resolved(self) -> bool:
        return self.id > 0


class StickerSlot(Decoration):
    """Наклейка в слоте 0-5."""
    slot: int = Field(ge=0, lt=STICKER_SLOTS, description="Позиция наклейки (0-5)")
    wear: float = Field(default=0.0, ge=0.0, le=1.0, description="Состояние наклейки (0 - новая или неизвестно)")
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __str__(self) -> str:
        return f"[{self.slot}] {self.name} (ID:{self.id}, Wear:{self.wear:.0%}) Offset: ({self.offset_x}, {self.offset_y})"


class KeychainSlot(Decoration):
    """Брелок в слоте 0-1."""
    slot: int = Field(ge=0, lt=MAX_KEYCHAIN_SLOTS, description="Позиция брелка (0-1)")
    seed: int = Field(default=0, ge=0, description="Паттерн брелка")
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0

    def __str__(self) -> str:
        return (
            f"[{self.slot}] {self.name} (ID:{self.id}, Seed:{self.seed}) "
            f"Offset: ({self.offset_x}, {self.offset_y}, {self.offset_z})"
        )


def empty_stickers() -> list[StickerSlot]:
    """Полный набор пустых слотов наклеек."""
    return [StickerSlot(slot=i) for i in range(STICKER_SLOTS)]


def empty_keychains(slots: int = MAX_KEYCHAIN_SLOTS) -> list[KeychainSlot]:
    """Полный набор пустых слотов брелков."""
    return [KeychainSlot(slot=i) for i in range(slots)]


class SkinRecord(BaseModel):
    """Распарсенные данные о скине."""
    title: str = Field(description="Название предмета со страницы")
    image: Optional[str] = Field(None, description="URL картинки предмета")
    name_tag: Optional[str] = Field(None, description="Текст именной бирки")
    definition_index: int = Field(gt=0, description="Definition index оружия/ножа/перчаток")
    paint_index: int = Field(description="Paint index скина")
    paint_seed: int = Field(description="Паттерн скина")
    paint_wear: float = Field(description="Float-значение в том виде, как оно на странице")
    stickers: list[StickerSlot] = Field(default_factory=empty_stickers, description="Слоты наклеек")
    keychains: list[KeychainSlot] = Field(default_factory=empty_keychains, description="Слоты брелков")

    @computed_field
    @property
    def category(self) -> SkinCategory:
        """Категория всегда выводится из definition index."""
        return detect_category(self.definition_index)

    @field_validator('stickers')
    @classmethod
    def validate_stickers(cls, v):
        if len(v) != STICKER_SLOTS:
            raise ValueError(f'Должно быть ровно {STICKER_SLOTS} слотов наклеек, получено {len(v)}')
        if [s.slot for s in v] != list(range(STICKER_SLOTS)):
            raise ValueError('Слоты наклеек должны идти по порядку с 0')
        return v

    @field_validator('keychains')
    @classmethod
    def validate_keychains(cls, v):
        if not 1 <= len(v) <= MAX_KEYCHAIN_SLOTS:
            raise ValueError(f'Должно быть от 1 до {MAX_KEYCHAIN_SLOTS} слотов брелков, получено {len(v)}')
        if [k.slot for k in v] != list(range(len(v))):
            raise ValueError('Слоты брелков должны идти по порядку с 0')
        return v

    def describe(self) -> str:
        """Текстовое описание для ответа пользователю."""
        lines = [
            f"Title: {self.title} ({self.category.value})",
            f"NameTag: {self.name_tag or ''}",
            f"DefinitionIndex: {self.definition_index}, PaintIndex: {self.paint_index}",
            f"Seed: {self.paint_seed}, Wear: {self.paint_wear:.10f}",
            f"Image: {self.image or ''}",
        ]
        stickers = [s for s in self.stickers if not s.is_empty]
        if stickers:
            lines.append(f"Stickers: {', '.join(s.name for s in stickers)}")
        keychains = [k for k in self.keychains if not k.is_empty]
        if keychains:
            lines.append(f"Keychains: {', '.join(str(k) for k in keychains)}")
        return "\n".join(lines)


class CatalogEntry(BaseModel):
    """Запись каталога сервиса скинов: индекс и локализованные названия."""
    index: int = Field(gt=0, description="Числовой ID в каталоге")
    localized_names: dict[str, str] = Field(default_factory=dict, description="Язык -> название")


class SkinCatalog(BaseModel):
    """Снимок каталога сервиса скинов (только чтение)."""
    weapons: list[CatalogEntry] = Field(default_factory=list)
    stickers: list[CatalogEntry] = Field(default_factory=list)
    keychains: list[CatalogEntry] = Field(default_factory=list)

    @field_validator('weapons', 'stickers', 'keychains', mode='before')
    @classmethod
    def accept_index_mapping(cls, v):
        # Сервис скинов отдает {"7": {"zh-CN": "AK-47", ...}, ...}
        if isinstance(v, dict):
            return [{"index": int(index), "localized_names": names} for index, names in v.items()]
        return v
