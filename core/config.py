"""
Конфигурация приложения из переменных окружения.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Ищем .env в корне проекта (на уровень выше core/)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Пробуем загрузить из текущей директории (для Docker)
    load_dotenv()


class Config:
    """Класс конфигурации приложения."""

    # Buff
    BUFF_BASE_URL: str = os.getenv("BUFF_BASE_URL", "https://buff.163.com")
    BUFF_USER_AGENT: str = os.getenv(
        "BUFF_USER_AGENT",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 16_1 like Mac OS X) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) buff iPhone"
    )

    # HTTP Client
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "15.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    # Каталог названий (JSON снимок от сервиса скинов)
    CATALOG_PATH: str = os.getenv("CATALOG_PATH", "")
    CATALOG_LANGUAGE: str = os.getenv("CATALOG_LANGUAGE", "zh-CN")

    # Парсинг
    KEYCHAIN_SLOTS: int = int(os.getenv("KEYCHAIN_SLOTS", "2"))  # 1 или 2 слота брелков
    HIGH_RES_IMAGE: bool = os.getenv("HIGH_RES_IMAGE", "true").lower() == "true"

    @classmethod
    def validate(cls) -> bool:
        """
        Проверяет, что все настройки заданы корректно.

        Returns:
            True если все настройки валидны

        Raises:
            ValueError: Если какие-то настройки невалидны
        """
        errors = []
        if not cls.BUFF_BASE_URL.startswith(("http://", "https://")):
            errors.append(f"BUFF_BASE_URL должен начинаться с http:// или https:// (сейчас: {cls.BUFF_BASE_URL!r})")
        if not cls.BUFF_USER_AGENT:
            errors.append("BUFF_USER_AGENT не задан")
        if cls.HTTP_TIMEOUT <= 0:
            errors.append(f"HTTP_TIMEOUT должен быть больше 0 (сейчас: {cls.HTTP_TIMEOUT})")
        if cls.KEYCHAIN_SLOTS not in (1, 2):
            errors.append(f"KEYCHAIN_SLOTS должен быть 1 или 2 (сейчас: {cls.KEYCHAIN_SLOTS})")
        if cls.CATALOG_PATH and not Path(cls.CATALOG_PATH).is_file():
            errors.append(f"CATALOG_PATH указывает на несуществующий файл: {cls.CATALOG_PATH}")

        if errors:
            error_msg = "\n".join(f"  - {e}" for e in errors)
            raise ValueError(
                f"Ошибка конфигурации:\n{error_msg}\n\n"
                f"Проверьте .env файл или переменные окружения."
            )
        return True
