"""
Тесты для скрипта inspect_buff.
"""
import json

import httpx
import pytest

import inspect_buff
from core.config import Config
from services.buff_scraper import BuffScraper

from conftest import SHARE_LOCATION, build_detail_html


@pytest.fixture
def mock_scraper(monkeypatch, make_http_client):
    """Подменяет BuffScraper в скрипте на версию с MockTransport."""
    pages = {"html": build_detail_html()}

    def handler(request):
        if request.url.path.startswith("/s/"):
            return httpx.Response(302, headers={"Location": SHARE_LOCATION})
        return httpx.Response(200, html=pages["html"])

    def factory(name_index, **kwargs):
        return BuffScraper(name_index, http_client=make_http_client(handler), **kwargs)

    monkeypatch.setattr(inspect_buff, "BuffScraper", factory)
    return pages


@pytest.mark.asyncio
async def test_inspect_prints_description(mock_scraper, name_index, capsys):
    code = await inspect_buff.inspect("https://buff.163.com/s/AbCdEf", name_index)
    out = capsys.readouterr().out
    assert code == 0
    assert "Title: AK-47 | 红线 (略有磨损) (weapon)" in out
    assert "Seed: 7, Wear: 0.1234000000" in out


@pytest.mark.asyncio
async def test_inspect_prints_json(mock_scraper, name_index, capsys):
    code = await inspect_buff.inspect("https://buff.163.com/s/AbCdEf", name_index, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["definition_index"] == 7
    assert data["category"] == "weapon"
    assert len(data["stickers"]) == 6


@pytest.mark.asyncio
async def test_inspect_reports_error(mock_scraper, name_index, capsys):
    """Тест: ошибка парсинга печатается и дает код 1."""
    mock_scraper["html"] = build_detail_html(title="未知 | 皮肤")
    code = await inspect_buff.inspect("https://buff.163.com/s/AbCdEf", name_index)
    assert code == 1
    assert "Error: Unknown weapon: 未知 | 皮肤" in capsys.readouterr().out


def test_build_name_index_builtin():
    index = inspect_buff.build_name_index(None, "zh-CN")
    assert index.match_weapon("AWP | 二西莫夫") == 9


def test_build_name_index_from_catalog(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"weapons": {"9": {"en": "AWP"}}}), encoding="utf-8")
    index = inspect_buff.build_name_index(str(path), "en")
    assert index.match_weapon("AWP | Asiimov") == 9
    assert index.match_weapon("AK-47 | Redline") is None


def test_main_invalid_config(monkeypatch, capsys):
    """Тест: невалидная конфигурация - код 2 без запросов."""
    monkeypatch.setattr(Config, "KEYCHAIN_SLOTS", 5)
    monkeypatch.setattr(inspect_buff, "setup_logging", lambda *args, **kwargs: None)
    code = inspect_buff.main(["https://buff.163.com/s/AbCdEf"])
    assert code == 2
    assert "KEYCHAIN_SLOTS" in capsys.readouterr().out


def test_main_missing_catalog(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(Config, "KEYCHAIN_SLOTS", 2)
    monkeypatch.setattr(Config, "CATALOG_PATH", "")
    monkeypatch.setattr(inspect_buff, "setup_logging", lambda *args, **kwargs: None)
    code = inspect_buff.main(["https://buff.163.com/s/AbCdEf", "--catalog", str(tmp_path / "none.json")])
    assert code == 2
    assert "Cannot read catalog" in capsys.readouterr().out
