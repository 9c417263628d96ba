"""
Модуль для определения категории предмета (оружие, нож или перчатки).
Правила живут в core.models, чтобы SkinRecord не зависел от парсеров.
"""
from core.models import SkinCategory, detect_category


def is_knife(definition_index: int) -> bool:
    return detect_category(definition_index) is SkinCategory.KNIFE


def is_glove(definition_index: int) -> bool:
    return detect_category(definition_index) is SkinCategory.GLOVE


__all__ = ['detect_category', 'is_knife', 'is_glove']
