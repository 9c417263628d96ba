"""
Парсер числовых полей из блока свойств предмета (paint index, paint seed, float).
"""
import re
from typing import Optional, Sequence
from bs4 import Tag

from core.buff_constants import (
    INFO_LINE_SELECTOR, INT_PATTERN, FLOAT_PATTERN,
    PAINT_INDEX_LABEL, PAINT_SEED_LABEL, PAINT_WEAR_LABEL
)
from core.exceptions import FieldParseFailedError


class InfoParser:
    """Класс для парсинга строк блока свойств."""

    @staticmethod
    def get_lines(info_block: Tag) -> list[str]:
        """Тексты всех строк блока свойств в порядке документа."""
        return [p.get_text(" ", strip=True) for p in info_block.select(INFO_LINE_SELECTOR)]

    @staticmethod
    def find_line(lines: Sequence[str], label: str) -> Optional[str]:
        """Первая строка, содержащая метку (без учета регистра)."""
        folded = label.casefold()
        for line in lines:
            if folded in line.casefold():
                return line
        return None

    @classmethod
    def _search(cls, lines: Sequence[str], label: str, pattern: re.Pattern, field: str) -> str:
        line = cls.find_line(lines, label)
        if line is None:
            raise FieldParseFailedError(field)
        match = pattern.search(line)
        if not match:
            raise FieldParseFailedError(field)
        return match.group()

    @classmethod
    def parse_int(cls, lines: Sequence[str], label: str, field: str) -> int:
        """
        Первая последовательность цифр в строке с меткой.

        Raises:
            FieldParseFailedError: Если метки нет или в строке нет числа
        """
        return int(cls._search(lines, label, INT_PATTERN, field))

    @classmethod
    def parse_float(cls, lines: Sequence[str], label: str, field: str) -> float:
        """
        Первое число вида 0.1234 в строке с меткой. Значение не ограничивается.

        Raises:
            FieldParseFailedError: Если метки нет или в строке нет числа
        """
        return float(cls._search(lines, label, FLOAT_PATTERN, field))

    @classmethod
    def parse_paint_index(cls, lines: Sequence[str]) -> int:
        return cls.parse_int(lines, PAINT_INDEX_LABEL, "paint index")

    @classmethod
    def parse_paint_seed(cls, lines: Sequence[str]) -> int:
        return cls.parse_int(lines, PAINT_SEED_LABEL, "paint seed")

    @classmethod
    def parse_paint_wear(cls, lines: Sequence[str]) -> float:
        return cls.parse_float(lines, PAINT_WEAR_LABEL, "paint wear")
