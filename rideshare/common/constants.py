# rideshare/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DriverStatus(str, Enum):
    """Статусы водителя."""
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"

    def __str__(self) -> str:
        return self.value


# Формат VIN: 17 латинских букв или цифр
VIN_LENGTH = 17
VIN_PATTERN = r"^[A-Za-z0-9]{17}$"

# Рейтинг поездки
MIN_RATING = 1
MAX_RATING = 5
