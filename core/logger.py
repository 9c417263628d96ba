"""
Централизованное логирование.
Использует loguru для логирования в файлы с ротацией по датам.
"""
import sys
from typing import Optional
from pathlib import Path
from loguru import logger

from .config import Config

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def setup_logging(
    service_name: str,
    enable_console: bool = True,
    enable_file: bool = True,
    log_dir: Optional[str] = None,
) -> None:
    """
    Настраивает логирование для сервиса.

    Args:
        service_name: Имя сервиса (например, 'inspect_buff')
        enable_console: Включить ли вывод в консоль (stderr)
        enable_file: Включить ли запись логов в файлы
        log_dir: Директория логов (по умолчанию Config.LOG_DIR)
    """
    # Удаляем все существующие handlers
    logger.remove()

    if enable_console:
        logger.add(
            sys.stderr,
            level=Config.LOG_LEVEL,
            format=CONSOLE_FORMAT,
            colorize=True
        )

    if not enable_file:
        return

    log_path = Path(log_dir or Config.LOG_DIR)
    try:
        log_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Если не удалось создать директорию, логируем только в stderr
        logger.warning(f"Не удалось создать директорию логов {log_path}: {e}. Логирование только в stderr.")
        return

    # Основной файл лога для сервиса (ротация по датам)
    main_log_file = log_path / f"{service_name}_{{time:YYYY-MM-DD}}.log"
    try:
        logger.add(
            str(main_log_file),
            rotation="00:00",  # Ротация в полночь
            retention="30 days",
            level=Config.LOG_LEVEL,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            encoding="utf-8",
            backtrace=True,
            diagnose=False
        )
    except OSError as e:
        logger.warning(f"Не удалось создать файл лога {main_log_file}: {e}.")

    # Отдельный файл для ошибок (ERROR и CRITICAL)
    errors_log_file = log_path / f"{service_name}_errors_{{time:YYYY-MM-DD}}.log"
    try:
        logger.add(
            str(errors_log_file),
            rotation="00:00",
            retention="90 days",  # Ошибки храним дольше
            level="ERROR",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}",
            encoding="utf-8",
            backtrace=True,
            diagnose=False
        )
    except OSError as e:
        logger.warning(f"Не удалось создать файл лога ошибок {errors_log_file}: {e}.")


__all__ = ['logger', 'setup_logging']
