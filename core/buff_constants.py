"""
Константы для парсера buff.163.com.

Все селекторы и текстовые маркеры шаблона страницы собраны здесь:
при изменении верстки buff правится только этот модуль.
"""
import re

# Хост и эндпоинты
BUFF_HOST = "buff.163.com"
ITEM_DETAIL_PATH = "/market/m/item_detail"
GAME = "csgo"

# Параметры ассета в фиксированном порядке
ASSET_PARAMS = ("classid", "instanceid", "contextid", "assetid")

# Селекторы страницы item_detail (мобильная версия)
TITLE_SELECTOR = "h3"
INFO_BLOCK_SELECTOR = "div.title-info-wrapper"
INFO_LINE_SELECTOR = "p"
IMAGE_SELECTOR = "img.show_inspect_img"
IMAGE_ATTR = "src"
NAME_TAG_SELECTOR = "p.name_tag"
DECORATION_CARD_SELECTOR = "div.stickers-card-item"
DECORATION_NAME_SELECTOR = "div.name"

# Метки строк в блоке свойств
PAINT_INDEX_LABEL = "paint index"
PAINT_SEED_LABEL = "paint seed"
PAINT_WEAR_LABEL = "磨损"

# Маркеры внутри карточек наклеек/брелков
STICKER_WEAR_MARKER = "印花磨损"
KEYCHAIN_TEMPLATE_MARKER = "模板"

# Разделители имени на бирке (ASCII и полноширинное двоеточие)
NAME_TAG_SEPARATORS = (":", "：")

# Регулярные выражения
INT_PATTERN = re.compile(r"\d+")
FLOAT_PATTERN = re.compile(r"\d+(?:\.\d*)?")
IMAGE_HEIGHT_PATTERN = re.compile(r"/h/\d+")
HIGH_RES_IMAGE_HEIGHT = "/h/2600"

# Количество слотов
STICKER_SLOTS = 6
MAX_KEYCHAIN_SLOTS = 2

# Диапазоны definition index
KNIFE_INDEX_RANGE = (500, 526)
GLOVE_INDEX_MIN = 4725

# Встроенная таблица оружия (китайская локализация buff).
# Используется, когда сервис скинов не предоставил каталог.
BUILTIN_WEAPON_NAMES = {
    "沙漠之鹰": 1,
    "双持贝瑞塔": 2,
    "FN57": 3,
    "格洛克 18 型": 4,
    "P2000": 32,
    "P250": 36,
    "Tec-9": 30,
    "CZ75 自动手枪": 63,
    "USP 消音版": 61,
    "R8 左轮手枪": 64,
    "MAC-10": 17,
    "MP5-SD": 23,
    "MP7": 33,
    "MP9": 34,
    "PP-野牛": 26,
    "P90": 19,
    "UMP-45": 24,
    "AK-47": 7,
    "AUG": 8,
    "AWP": 9,
    "法玛斯": 10,
    "G3SG1": 11,
    "加利尔 AR": 13,
    "M4A4": 16,
    "M4A1 消音型": 60,
    "SCAR-20": 38,
    "SG 553": 39,
    "SSG 08": 40,
    "M249": 14,
    "MAG-7": 27,
    "内格夫": 28,
    "新星": 35,
    "截短霰弹枪": 29,
    "XM1014": 25,
    # Ножи
    "刺刀": 500,
    "海豹短刀": 503,
    "折叠刀": 505,
    "穿肠刀": 506,
    "爪子刀": 507,
    "M9 刺刀": 508,
    "猎杀者匕首": 509,
    "弯刀": 512,
    "鲍伊猎刀": 514,
    "蝴蝶刀": 515,
    "暗影双匕": 516,
    "系绳匕首": 517,
    "求生匕首": 518,
    "熊刀": 519,
    "折刀": 520,
    "流浪者匕首": 521,
    "短剑": 522,
    "锯齿爪刀": 523,
    "骷髅匕首": 525,
    "廓尔喀刀": 526,
    # Перчатки
    "狂牙手套": 4725,
    "血猎手套": 5027,
    "运动手套": 5030,
    "驾驶手套": 5031,
    "手部束带": 5032,
    "摩托手套": 5033,
    "专业手套": 5034,
    "九头蛇手套": 5035,
}
