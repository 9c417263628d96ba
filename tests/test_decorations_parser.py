"""
Тесты для DecorationsParser.
Проверяют раскладку наклеек и брелков по слотам и перевод износа в состояние.
"""
import pytest
from bs4 import BeautifulSoup

from parsers.decorations_parser import DecorationsParser, sticker_condition

from conftest import sticker_card, keychain_card


def make_soup(*cards: str) -> BeautifulSoup:
    return BeautifulSoup(f"<html><body>{''.join(cards)}</body></html>", 'lxml')


class TestStickerCondition:
    """Тесты для sticker_condition."""

    @pytest.mark.parametrize("damage, expected", [
        (0, 1.0),
        (35, 0.65),
        (100, 0.0),
        (150, 0.0),
        (-20, 1.0),
    ])
    def test_inversion(self, damage, expected):
        """Тест: clamp(100 - износ, 0, 100) / 100."""
        assert sticker_condition(damage) == pytest.approx(expected)

    def test_always_in_unit_range(self):
        for damage in [x / 4 for x in range(-40, 441)]:
            assert 0.0 <= sticker_condition(damage) <= 1.0


class TestDecorationsParser:
    """Тесты для DecorationsParser.parse."""

    @pytest.fixture(autouse=True)
    def setup(self, name_index):
        self.name_index = name_index
        self.parser = DecorationsParser(name_index)

    def test_no_cards(self):
        """Тест: без карточек все слоты пустые, но их полное количество."""
        stickers, keychains = self.parser.parse(make_soup())
        assert [s.slot for s in stickers] == [0, 1, 2, 3, 4, 5]
        assert [k.slot for k in keychains] == [0, 1]
        assert all(s.is_empty for s in stickers)
        assert all(k.is_empty for k in keychains)

    def test_recognized_sticker_wear(self):
        stickers, _ = self.parser.parse(make_soup(sticker_card("Crown (Foil)", damage="35")))
        assert stickers[0].id == 1001
        assert stickers[0].wear == pytest.approx(0.65)
        assert stickers[0].name == "Crown (Foil)"

    def test_recognized_sticker_without_wear_text(self):
        """Тест: нет строки износа - состояние 0 (неизвестно)."""
        stickers, _ = self.parser.parse(make_soup(sticker_card("Howling Dawn")))
        assert stickers[0].id == 1002
        assert stickers[0].wear == 0.0

    def test_unrecognized_sticker(self):
        """Тест: неизвестное название - id -1, имя сохранено, износ 0."""
        stickers, _ = self.parser.parse(make_soup(
            sticker_card("Crown (Foil)", damage="10"),
            sticker_card("Titan | Katowice 2014", damage="50"),
        ))
        assert stickers[1].id == -1
        assert stickers[1].slot == 1
        assert stickers[1].wear == 0.0
        assert stickers[1].name == "Titan | Katowice 2014"
        assert not stickers[1].is_resolved

    def test_more_than_six_stickers(self):
        """Тест: лишние наклейки пропускаются, слотов всегда 6."""
        cards = [sticker_card("Crown (Foil)", damage=str(i * 10)) for i in range(8)]
        stickers, _ = self.parser.parse(make_soup(*cards))
        assert len(stickers) == 6
        assert all(s.id == 1001 for s in stickers)
        assert stickers[5].wear == pytest.approx(0.5)

    def test_keychain_seed(self):
        _, keychains = self.parser.parse(make_soup(keychain_card("Lil Squirt", seed="98765")))
        assert keychains[0].id == 37
        assert keychains[0].seed == 98765

    def test_keychain_without_seed(self):
        """Тест: паттерн брелка не найден - 0, это не ошибка."""
        _, keychains = self.parser.parse(make_soup(keychain_card("Baby Karat")))
        assert keychains[0].id == 38
        assert keychains[0].seed == 0

    def test_unrecognized_keychain(self):
        _, keychains = self.parser.parse(make_soup(keychain_card("Hot Howl", seed="5")))
        assert keychains[0].id == -1
        assert keychains[0].name == "Hot Howl"
        assert keychains[0].seed == 5

    def test_keychains_do_not_take_sticker_slots(self):
        stickers, keychains = self.parser.parse(make_soup(
            keychain_card("Lil Squirt", seed="1"),
            sticker_card("Crown (Foil)", damage="0"),
            keychain_card("Baby Karat", seed="2"),
            keychain_card("Lil Squirt", seed="3"),
        ))
        assert stickers[0].id == 1001
        assert stickers[1].id == 0
        assert [(k.id, k.seed) for k in keychains] == [(37, 1), (38, 2)]

    def test_single_keychain_slot_first_wins(self):
        parser = DecorationsParser(self.name_index, keychain_slots=1)
        _, keychains = parser.parse(make_soup(
            keychain_card("Baby Karat", seed="2"),
            keychain_card("Lil Squirt", seed="1"),
        ))
        assert len(keychains) == 1
        assert (keychains[0].id, keychains[0].seed) == (38, 2)

    @pytest.mark.parametrize("slots", [0, 3])
    def test_invalid_keychain_slots(self, slots):
        with pytest.raises(ValueError):
            DecorationsParser(self.name_index, keychain_slots=slots)

    def test_card_without_name_node(self):
        soup = make_soup('<div class="stickers-card-item"><p>印花磨损：0%</p></div>')
        stickers, _ = self.parser.parse(soup)
        assert stickers[0].id == -1
        assert stickers[0].name == ""
