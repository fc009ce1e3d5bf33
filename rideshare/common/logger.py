# rideshare/common/logger.py
"""
Модуль структурированного логирования.
Поддерживает JSON и цветной текстовый формат, запись в файл с ротацией.
"""

from __future__ import annotations

import inspect
import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rideshare.common.constants import TypeMsg


# Имя корневого логгера проекта
DEFAULT_LOGGER_NAME = "rideshare"

# Глобальный файловый хендлер (один для всех логгеров)
_GLOBAL_FILE_HANDLER: logging.Handler | None = None

# Флаг инициализации (предотвращает повторную настройку)
_LOGGING_INITIALIZED: bool = False


# =============================================================================
# ФОРМАТТЕРЫ И ХЕНДЛЕРЫ
# =============================================================================

class JsonFormatter(logging.Formatter):
    """Форматтер для JSON логов."""

    def format(self, record: logging.LogRecord) -> str:
        """Форматирует запись лога в JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Цветной форматтер для консоли."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"
    GRAY = "\033[90m"

    def format(self, record: logging.LogRecord) -> str:
        """Форматирует запись лога с цветом."""
        color = self.COLORS.get(record.levelname, self.GRAY)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        caller_info = ""
        extra_data = getattr(record, "extra_data", None)
        if extra_data and extra_data.get("caller_function"):
            caller_info = (
                f" {self.GRAY}[{extra_data.get('caller_module')}."
                f"{extra_data.get('caller_function')}() "
                f"{extra_data.get('caller_file')}:{extra_data.get('caller_line')}]{self.RESET}"
            )

        message = (
            f"{timestamp} {color}[{record.levelname}]{self.RESET}{caller_info} "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class DateBasedRotatingFileHandler(RotatingFileHandler):
    """
    Хендлер с ротацией по размеру.
    Пишет в фиксированный файл (например, rideshare.log), а при превышении
    размера переименовывает его, добавляя дату и время.
    """

    def __init__(self, log_dir: str, max_bytes: int, logger_name: str = "app", encoding: str = "utf-8"):
        """
        Args:
            log_dir: Директория для логов
            max_bytes: Максимальный размер файла в байтах
            logger_name: Имя файла лога без расширения
            encoding: Кодировка файла
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.logger_name = logger_name

        super().__init__(
            filename=str(self.log_dir / f"{logger_name}.log"),
            maxBytes=max_bytes,
            backupCount=0,
            encoding=encoding,
        )

    def doRollover(self) -> None:
        """Переименовывает текущий файл в архивный и открывает новый."""
        if self.stream:
            self.stream.close()
            self.stream = None

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        archive_filename = self.log_dir / f"{self.logger_name}_{timestamp}.log"

        if os.path.exists(self.baseFilename):
            os.replace(self.baseFilename, archive_filename)

        self.stream = self._open()


# =============================================================================
# ЛОГГЕР
# =============================================================================

_loggers: dict[str, logging.Logger] = {}


def setup_logging() -> None:
    """
    Инициализирует систему логирования.
    Вызывается при старте CLI. Повторные вызовы ничего не делают.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED:
        return

    _LOGGING_INITIALIZED = True
    get_logger(DEFAULT_LOGGER_NAME)


def _read_logging_settings() -> dict[str, Any]:
    """Читает секцию logging из настроек, при недоступности берутся значения по умолчанию."""
    defaults: dict[str, Any] = {
        "level": "INFO",
        "format": "colored",
        "to_file": False,
        "file_path": "logs/rideshare.log",
        "max_bytes": 10485760,
    }
    try:
        from rideshare.config import settings
        from rideshare.config.loader import resolve_project_path
    except (ImportError, FileNotFoundError, ValueError):
        return defaults

    log_settings = settings.logging
    return {
        "level": log_settings.LOG_LEVEL,
        "format": log_settings.LOG_FORMAT,
        "to_file": log_settings.LOG_TO_FILE,
        "file_path": resolve_project_path(log_settings.LOG_FILE_PATH),
        "max_bytes": log_settings.LOG_MAX_BYTES,
    }


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Возвращает настроенный логгер.
    Использует кэширование для избежания дублирования хендлеров.

    Args:
        name: Имя логгера

    Returns:
        Настроенный логгер
    """
    if name in _loggers:
        return _loggers[name]

    config = _read_logging_settings()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(config["level"]).upper(), logging.INFO))

    if logger.handlers:
        _loggers[name] = logger
        return logger

    formatter: logging.Formatter = JsonFormatter() if config["format"] == "json" else ColoredFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config["to_file"]:
        global _GLOBAL_FILE_HANDLER
        if _GLOBAL_FILE_HANDLER is None:
            log_path = Path(config["file_path"])
            _GLOBAL_FILE_HANDLER = DateBasedRotatingFileHandler(
                log_dir=str(log_path.parent),
                max_bytes=config["max_bytes"],
                logger_name=log_path.stem,
            )
            _GLOBAL_FILE_HANDLER.setFormatter(JsonFormatter())
        logger.addHandler(_GLOBAL_FILE_HANDLER)

    # Не дублируем записи в корневом логгере
    logger.propagate = False

    _loggers[name] = logger
    return logger


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ ЛОГИРОВАНИЯ
# =============================================================================

def _get_caller_info() -> dict[str, Any]:
    """
    Получает информацию о коде, вызвавшем функцию логирования.

    Returns:
        Словарь с ключами caller_function, caller_module, caller_file, caller_line
    """
    frame = inspect.currentframe()
    try:
        # Пропускаем фреймы самого модуля логирования (log_debug -> log_info -> ...)
        caller_frame = frame.f_back if frame else None
        while caller_frame is not None and caller_frame.f_globals.get("__name__") == __name__:
            caller_frame = caller_frame.f_back
        if caller_frame is None:
            return {}

        caller_module = inspect.getmodule(caller_frame)
        return {
            "caller_function": caller_frame.f_code.co_name,
            "caller_module": caller_module.__name__ if caller_module else "unknown",
            "caller_file": Path(caller_frame.f_code.co_filename).name,
            "caller_line": caller_frame.f_lineno,
        }
    finally:
        # Освобождаем ссылки на фреймы
        del frame


def log_info(
    message: str,
    *,
    type_msg: TypeMsg = TypeMsg.INFO,
    logger_name: str = DEFAULT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """
    Логирует сообщение с уровнем, заданным type_msg.

    Args:
        message: Сообщение для логирования
        type_msg: Тип сообщения
        logger_name: Имя логгера
        extra: Дополнительные данные
    """
    logger = get_logger(logger_name)
    record_extra = {"extra_data": {**_get_caller_info(), **(extra or {})}}

    match type_msg:
        case TypeMsg.DEBUG:
            logger.debug(message, extra=record_extra)
        case TypeMsg.WARNING:
            logger.warning(message, extra=record_extra)
        case TypeMsg.ERROR:
            logger.error(message, extra=record_extra)
        case TypeMsg.CRITICAL:
            logger.critical(message, extra=record_extra)
        case _:
            logger.info(message, extra=record_extra)


def log_debug(
    message: str,
    logger_name: str = DEFAULT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """Логирование DEBUG уровня."""
    log_info(message, type_msg=TypeMsg.DEBUG, logger_name=logger_name, extra=extra)


def log_warning(
    message: str,
    logger_name: str = DEFAULT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """Логирование WARNING уровня."""
    log_info(message, type_msg=TypeMsg.WARNING, logger_name=logger_name, extra=extra)


def log_error(
    message: str,
    logger_name: str = DEFAULT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
    exc_info: bool = False,
) -> None:
    """
    Логирование ERROR уровня.

    Args:
        message: Сообщение об ошибке
        logger_name: Имя логгера
        extra: Дополнительные данные
        exc_info: Включать ли трейсбек исключения
    """
    logger = get_logger(logger_name)
    record_extra = {"extra_data": {**_get_caller_info(), **(extra or {})}}
    logger.error(message, extra=record_extra, exc_info=exc_info)
