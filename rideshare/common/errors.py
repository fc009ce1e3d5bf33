# rideshare/common/errors.py
"""
Исключения приложения.

Ошибки валидации сущностей поднимает pydantic (ValidationError — подкласс
ValueError). Здесь описаны ошибки загрузки исходных данных.

Пример:
    from rideshare.common.errors import DataLoadError, ErrorCode

    raise DataLoadError("Нет файла trips.csv", code=ErrorCode.FILE_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Коды ошибок загрузки данных."""

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    INVALID_ROW = "INVALID_ROW"
    UNKNOWN_DRIVER = "UNKNOWN_DRIVER"
    UNKNOWN_PASSENGER = "UNKNOWN_PASSENGER"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "Файл с данными не найден.",
    ErrorCode.INVALID_ROW: "Файл с данными содержит некорректную строку.",
    ErrorCode.UNKNOWN_DRIVER: "Поездка ссылается на неизвестного водителя.",
    ErrorCode.UNKNOWN_PASSENGER: "Поездка ссылается на неизвестного пассажира.",
    ErrorCode.INTERNAL_ERROR: "Непредвиденная ошибка.",
}


class RideShareError(Exception):
    """Базовое исключение приложения."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class DataLoadError(RideShareError):
    """Ошибка чтения CSV-файлов с пользователями, водителями или поездками."""

    pass
