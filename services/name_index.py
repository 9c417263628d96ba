"""
Индекс названий: локализованное название -> числовой ID.
Строится один раз из каталога сервиса скинов и дальше не меняется.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional
from loguru import logger

from core.buff_constants import BUILTIN_WEAPON_NAMES
from core.models import CatalogEntry, SkinCatalog

_EMPTY: Mapping[str, int] = MappingProxyType({})


def _build_map(entries: Iterable[CatalogEntry], language: Optional[str]) -> Mapping[str, int]:
    """
    Собирает таблицу название -> индекс.

    Если language задан, берутся только названия на этом языке,
    иначе все локализованные названия. При совпадении названий побеждает первое.
    """
    names: dict[str, int] = {}
    for entry in entries:
        if language is not None:
            localized = [entry.localized_names[language]] if language in entry.localized_names else []
        else:
            localized = list(entry.localized_names.values())
        for name in localized:
            name = name.strip()
            if name and name not in names:
                names[name] = entry.index
    return MappingProxyType(names)


class NameIndex:
    """Неизменяемые таблицы названий оружия, наклеек и брелков."""

    def __init__(
        self,
        weapons: Optional[Mapping[str, int]] = None,
        stickers: Optional[Mapping[str, int]] = None,
        keychains: Optional[Mapping[str, int]] = None,
    ):
        self._weapons = MappingProxyType(dict(weapons)) if weapons else _EMPTY
        self._stickers = MappingProxyType(dict(stickers)) if stickers else _EMPTY
        self._keychains = MappingProxyType(dict(keychains)) if keychains else _EMPTY
        # Длинные названия проверяем первыми: "M4A1 消音型" раньше "M4A1"
        self._weapon_prefixes = tuple(
            sorted(((name.casefold(), index) for name, index in self._weapons.items()),
                   key=lambda item: len(item[0]), reverse=True)
        )

    @classmethod
    def from_catalog(cls, catalog: Optional[SkinCatalog], language: Optional[str] = None) -> "NameIndex":
        """
        Строит индекс из каталога.

        Args:
            catalog: Каталог сервиса скинов или None
            language: Код языка названий (например, 'zh-CN'); None - все языки

        Returns:
            NameIndex; при отсутствии каталога все таблицы пустые
        """
        if catalog is None:
            logger.warning("⚠️ NameIndex: Каталог не предоставлен, все названия будут нераспознаны")
            return cls.empty()

        index = cls(
            weapons=_build_map(catalog.weapons, language),
            stickers=_build_map(catalog.stickers, language),
            keychains=_build_map(catalog.keychains, language),
        )
        logger.info(
            f"📚 NameIndex: Оружие: {len(index.weapons)}, наклейки: {len(index.stickers)}, "
            f"брелки: {len(index.keychains)} (язык: {language or 'все'})"
        )
        return index

    @classmethod
    def empty(cls) -> "NameIndex":
        return cls()

    @classmethod
    def builtin(cls) -> "NameIndex":
        """Индекс только со встроенной таблицей оружия (без наклеек и брелков)."""
        return cls(weapons=BUILTIN_WEAPON_NAMES)

    @property
    def weapons(self) -> Mapping[str, int]:
        return self._weapons

    @property
    def stickers(self) -> Mapping[str, int]:
        return self._stickers

    @property
    def keychains(self) -> Mapping[str, int]:
        return self._keychains

    def match_weapon(self, title: str) -> Optional[int]:
        """
        Ищет оружие, название которого является префиксом заголовка (без учета регистра).
        Заголовок на buff содержит название скина после названия оружия,
        поэтому точное совпадение не подходит.

        Returns:
            Definition index самого длинного совпавшего названия или None
        """
        folded = title.strip().casefold()
        for name, index in self._weapon_prefixes:
            if folded.startswith(name):
                return index
        return None

    def sticker_id(self, name: str) -> Optional[int]:
        return self._stickers.get(name.strip())

    def keychain_id(self, name: str) -> Optional[int]:
        return self._keychains.get(name.strip())
