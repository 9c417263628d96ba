"""
Общие фикстуры для тестов парсера buff.163.com.
"""
from typing import Callable, Optional, Sequence

import httpx
import pytest

from core.buff_constants import BUILTIN_WEAPON_NAMES
from core.buff_http_client import BuffHttpClient
from services.name_index import NameIndex

DEFAULT_INFO_LINES = ("paint index: 42", "paint seed: 7", "磨损 0.1234")

SHARE_LOCATION = (
    "https://buff.163.com/goods/33960?from=market"
    "&classid=310776767&instanceid=302028390&contextid=2&assetid=35712584729#tab=selling"
)
CANONICAL_QUERY = "classid=310776767&instanceid=302028390&contextid=2&assetid=35712584729"


def sticker_card(name: str, damage: Optional[str] = None) -> str:
    """Карточка наклейки; damage - износ в процентах, как на странице."""
    wear = f"<p>印花磨损：{damage}%</p>" if damage is not None else ""
    return f'<div class="stickers-card-item"><div class="name">{name}</div>{wear}</div>'


def keychain_card(name: str, seed: Optional[str] = None) -> str:
    """Карточка брелка с маркером шаблона."""
    template = f"模板：{seed}" if seed is not None else "模板：未知"
    return f'<div class="stickers-card-item"><div class="name">{name}</div><p>{template}</p></div>'


def build_detail_html(
    title: Optional[str] = "AK-47 | 红线 (略有磨损)",
    info_lines: Optional[Sequence[str]] = DEFAULT_INFO_LINES,
    name_tag: Optional[str] = None,
    image: Optional[str] = None,
    cards: Sequence[str] = (),
) -> str:
    """Собирает страницу item_detail в формате мобильной версии buff."""
    parts = ["<html><head><meta charset='utf-8'></head><body>"]
    if image is not None:
        parts.append(f'<img class="show_inspect_img" src="{image}">')
    if title is not None:
        parts.append(f"<h3>{title}</h3>")
    if info_lines is not None:
        lines = "".join(f"<p>{line}</p>" for line in info_lines)
        parts.append(f'<div class="title-info-wrapper">{lines}</div>')
    if name_tag is not None:
        parts.append(f'<p class="name_tag">{name_tag}</p>')
    if cards:
        parts.append('<div class="stickers-card">' + "".join(cards) + "</div>")
    parts.append("</body></html>")
    return "".join(parts)


@pytest.fixture
def name_index() -> NameIndex:
    """Индекс со встроенным оружием и несколькими наклейками и брелками."""
    return NameIndex(
        weapons=BUILTIN_WEAPON_NAMES,
        stickers={"Crown (Foil)": 1001, "Howling Dawn": 1002, "印花 | 胜利": 1003},
        keychains={"Lil Squirt": 37, "Baby Karat": 38},
    )


@pytest.fixture
def make_http_client() -> Callable[[Callable], BuffHttpClient]:
    """Фабрика BuffHttpClient поверх httpx.MockTransport."""
    def factory(handler: Callable) -> BuffHttpClient:
        return BuffHttpClient(
            base_url="https://buff.163.com",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )
    return factory
