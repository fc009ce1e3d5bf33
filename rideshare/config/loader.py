# rideshare/config/loader.py
"""
Загрузчик конфигурации проекта.
Источник значений: config/config.json.
Отдельные параметры переопределяются переменными окружения (и файлом .env).
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУТЕЙ
# =============================================================================

def get_project_root() -> Path:
    """Возвращает корневую директорию проекта."""
    return Path(__file__).parent.parent.parent


def get_config_path() -> Path:
    """Возвращает путь к файлу конфигурации."""
    return get_project_root() / "config" / "config.json"


def resolve_project_path(value: str | Path) -> Path:
    """Относительный путь отсчитывается от корня проекта, абсолютный не меняется."""
    path = Path(value)
    if path.is_absolute():
        return path
    return get_project_root() / path


def load_config_json() -> dict[str, Any]:
    """Загружает config.json и возвращает словарь."""
    config_path = get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Файл конфигурации не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# PYDANTIC МОДЕЛИ КОНФИГУРАЦИИ
# =============================================================================

class SystemSettings(BaseModel):
    """Системные настройки."""
    PROJECT_NAME: str = "rideshare"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"


class LoggingSettings(BaseModel):
    """Настройки логирования."""
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "colored"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/rideshare.log"
    LOG_MAX_BYTES: int = 10485760

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Приводит уровень логирования к верхнему регистру."""
        return str(v).upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Допускаются только форматы colored и json."""
        if v not in ("colored", "json"):
            raise ValueError(f"Неизвестный формат логов: {v}")
        return v


class FareSettings(BaseModel):
    """
    Настройки расчёта выручки водителя.
    Выручка с поездки: (стоимость - TRIP_FEE) * DRIVER_SHARE.
    """
    TRIP_FEE: float = Field(1.65, ge=0.0)
    DRIVER_SHARE: float = Field(0.8, gt=0.0, le=1.0)
    ROUND_DIGITS: int = Field(2, ge=0)


class DataSettings(BaseModel):
    """Расположение CSV-файлов с исходными данными."""
    DATA_DIR: str = "data"
    USERS_FILE: str = "users.csv"
    DRIVERS_FILE: str = "drivers.csv"
    TRIPS_FILE: str = "trips.csv"

    @property
    def data_path(self) -> Path:
        """Абсолютный путь к директории с данными."""
        return resolve_project_path(self.DATA_DIR)


# =============================================================================
# ГЛАВНЫЙ КЛАСС НАСТРОЕК
# =============================================================================

class Settings(BaseSettings):
    """
    Главный класс настроек приложения.
    Агрегирует все секции конфигурации.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    fares: FareSettings = Field(default_factory=FareSettings)
    data: DataSettings = Field(default_factory=DataSettings)

    @classmethod
    def from_config_json(cls) -> "Settings":
        """
        Создаёт объект Settings из config.json.
        LOG_LEVEL, LOG_FORMAT и DATA_DIR переопределяются из переменных окружения.
        """
        config_data = load_config_json()

        # Ключи _comment_* содержат пояснения
        filtered_data = {k: v for k, v in config_data.items() if not k.startswith("_comment_")}

        return cls(
            system=SystemSettings(
                PROJECT_NAME=filtered_data.get("PROJECT_NAME", "rideshare"),
                VERSION=filtered_data.get("VERSION", "1.0.0"),
                DEBUG=filtered_data.get("DEBUG", False),
                ENVIRONMENT=os.getenv("ENVIRONMENT", filtered_data.get("ENVIRONMENT", "development")),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=os.getenv("LOG_LEVEL", filtered_data.get("LOG_LEVEL", "INFO")),
                LOG_FORMAT=os.getenv("LOG_FORMAT", filtered_data.get("LOG_FORMAT", "colored")),
                LOG_TO_FILE=filtered_data.get("LOG_TO_FILE", False),
                LOG_FILE_PATH=filtered_data.get("LOG_FILE_PATH", "logs/rideshare.log"),
                LOG_MAX_BYTES=filtered_data.get("LOG_MAX_BYTES", 10485760),
            ),
            fares=FareSettings(
                TRIP_FEE=filtered_data.get("TRIP_FEE", 1.65),
                DRIVER_SHARE=filtered_data.get("DRIVER_SHARE", 0.8),
                ROUND_DIGITS=filtered_data.get("ROUND_DIGITS", 2),
            ),
            data=DataSettings(
                DATA_DIR=os.getenv("DATA_DIR", filtered_data.get("DATA_DIR", "data")),
                USERS_FILE=filtered_data.get("USERS_FILE", "users.csv"),
                DRIVERS_FILE=filtered_data.get("DRIVERS_FILE", "drivers.csv"),
                TRIPS_FILE=filtered_data.get("TRIPS_FILE", "trips.csv"),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Возвращает синглтон настроек приложения.
    Перед чтением config.json подгружает .env из корня проекта.
    """
    from dotenv import load_dotenv

    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


# Экспорт синглтона для удобного импорта
settings = get_settings()
