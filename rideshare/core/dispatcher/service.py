# rideshare/core/dispatcher/service.py
"""
Диспетчер поездок.
Читает пользователей, водителей и поездки из CSV, связывает поездки
с водителями и пассажирами, строит сводку по водителям.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

from pydantic import ValidationError

from rideshare.common.constants import DriverStatus
from rideshare.common.errors import DataLoadError, ErrorCode
from rideshare.common.logger import log_debug, log_info
from rideshare.core.trips.models import Trip
from rideshare.core.users.models import Driver, User


@dataclass
class DriverReport:
    """Строка сводки по водителю."""
    driver_id: int
    name: str
    status: DriverStatus
    completed_trips: int
    average_rating: float
    total_revenue: float
    net_expenditures: float


def _read_rows(path: Path) -> Iterator[tuple[int, dict[str, Optional[str]]]]:
    """
    Построчно читает CSV с заголовком.

    Пустые ячейки превращаются в None.

    Yields:
        Номер строки в файле и словарь значений
    """
    if not path.exists():
        raise DataLoadError(f"Файл не найден: {path}", code=ErrorCode.FILE_NOT_FOUND)

    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            cleaned = {
                key.strip(): (value.strip() or None) if value is not None else None
                for key, value in row.items()
                if key is not None
            }
            yield reader.line_num, cleaned


def _parse_id(path: Path, line: int, value: Optional[str]) -> Optional[int]:
    """Переводит ID из CSV в int; пустая ячейка остаётся None."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise DataLoadError(
            f"{path.name}, строка {line}: некорректный ID {value!r}",
            code=ErrorCode.INVALID_ROW,
        ) from e


def _build(model: type, path: Path, line: int, **fields: Any) -> Any:
    """Создаёт модель из строки CSV, ошибки валидации превращает в DataLoadError."""
    try:
        return model(**fields)
    except ValidationError as e:
        raise DataLoadError(
            f"{path.name}, строка {line}: {e.error_count()} ошибок валидации {model.__name__}",
            code=ErrorCode.INVALID_ROW,
        ) from e


class TripDispatcher:
    """
    Хранилище загруженных сущностей.

    Реализует:
    - Загрузку пользователей, водителей и поездок из CSV
    - Привязку поездок к водителю и пассажиру
    - Поиск пользователей и водителей по ID
    - Сводку по водителям
    """

    def __init__(
        self,
        users: list[User] | None = None,
        drivers: list[Driver] | None = None,
        trips: list[Trip] | None = None,
    ) -> None:
        """
        Args:
            users: Пассажиры
            drivers: Водители
            trips: Поездки; каждая сразу привязывается к своему водителю и пассажиру
        """
        self.users: list[User] = list(users or [])
        self.drivers: list[Driver] = list(drivers or [])
        self.trips: list[Trip] = []

        for trip in trips or []:
            self.add_trip(trip)

    # =========================================================================
    # ЗАГРУЗКА
    # =========================================================================

    @classmethod
    def from_csv(cls, directory: str | Path | None = None) -> "TripDispatcher":
        """
        Загружает данные из директории с users.csv, drivers.csv и trips.csv.

        Args:
            directory: Директория с файлами; по умолчанию DATA_DIR из настроек

        Returns:
            Диспетчер со связанными поездками

        Raises:
            DataLoadError: нет файла, некорректная строка или ссылка на неизвестный ID
        """
        from rideshare.config import settings

        data = settings.data
        base = Path(directory) if directory is not None else data.data_path
        log_debug(f"Загрузка данных из {base}")

        dispatcher = cls(
            users=cls._load_users(base / data.USERS_FILE),
            drivers=cls._load_drivers(base / data.DRIVERS_FILE),
        )

        trips_path = base / data.TRIPS_FILE
        for line, row in _read_rows(trips_path):
            dispatcher.add_trip(dispatcher._trip_from_row(trips_path, line, row))

        log_info(
            f"Загружено: пользователей {len(dispatcher.users)}, "
            f"водителей {len(dispatcher.drivers)}, поездок {len(dispatcher.trips)}",
        )
        return dispatcher

    @staticmethod
    def _load_users(path: Path) -> list[User]:
        """Читает users.csv (id, name, phone_num)."""
        return [
            _build(
                User,
                path,
                line,
                id=_parse_id(path, line, row.get("id")),
                name=row.get("name"),
                phone=row.get("phone_num"),
            )
            for line, row in _read_rows(path)
        ]

    @staticmethod
    def _load_drivers(path: Path) -> list[Driver]:
        """Читает drivers.csv (id, name, vin, status)."""
        drivers = []
        for line, row in _read_rows(path):
            fields: dict[str, Any] = {
                "id": _parse_id(path, line, row.get("id")),
                "name": row.get("name"),
                "vin": row.get("vin"),
            }
            if row.get("status") is not None:
                fields["status"] = row["status"]
            drivers.append(_build(Driver, path, line, **fields))
        return drivers

    def _trip_from_row(self, path: Path, line: int, row: dict[str, Optional[str]]) -> Trip:
        """Создаёт поездку из строки trips.csv, подставляя водителя и пассажира."""
        driver = self._lookup(self.find_driver, row.get("driver_id"))
        if driver is None:
            raise DataLoadError(
                f"{path.name}, строка {line}: неизвестный водитель {row.get('driver_id')}",
                code=ErrorCode.UNKNOWN_DRIVER,
            )

        passenger = None
        if row.get("passenger_id") is not None:
            passenger = self._lookup(self.find_passenger, row["passenger_id"])
            if passenger is None:
                raise DataLoadError(
                    f"{path.name}, строка {line}: неизвестный пассажир {row['passenger_id']}",
                    code=ErrorCode.UNKNOWN_PASSENGER,
                )

        return _build(
            Trip,
            path,
            line,
            id=_parse_id(path, line, row.get("id")),
            driver=driver,
            passenger=passenger,
            start_time=row.get("start_time"),
            end_time=row.get("end_time"),
            cost=row.get("cost"),
            rating=row.get("rating"),
        )

    @staticmethod
    def _lookup(finder, raw_id: Optional[str]) -> Optional[User]:
        """Ищет сущность по ID из CSV; нечисловой или непозитивный ID считается ненайденным."""
        try:
            return finder(int(raw_id))
        except (TypeError, ValueError):
            return None

    # =========================================================================
    # ПОИСК И СВЯЗИ
    # =========================================================================

    def add_trip(self, trip: Trip) -> None:
        """
        Регистрирует поездку и привязывает её к водителю и пассажиру.

        Raises:
            TypeError: если передана не поездка
        """
        if not isinstance(trip, Trip):
            raise TypeError(f"Ожидалась поездка (Trip), получено: {type(trip).__name__}")

        if trip.driver is not None:
            trip.driver.add_driven_trip(trip)
        if trip.passenger is not None:
            trip.passenger.add_trip(trip)
        self.trips.append(trip)

    @staticmethod
    def _validate_id(id: int) -> None:
        if id <= 0:
            raise ValueError(f"ID должен быть положительным: {id}")

    def find_user(self, id: int) -> Optional[User]:
        """
        Ищет пассажира по ID.

        Raises:
            ValueError: если ID не положительный
        """
        self._validate_id(id)
        return next((user for user in self.users if user.id == id), None)

    def find_driver(self, id: int) -> Optional[Driver]:
        """
        Ищет водителя по ID.

        Raises:
            ValueError: если ID не положительный
        """
        self._validate_id(id)
        return next((driver for driver in self.drivers if driver.id == id), None)

    def find_passenger(self, id: int) -> Optional[User]:
        """
        Ищет пассажира поездки.
        Водитель с тем же ID считается тем же человеком, поэтому он в приоритете.
        """
        driver = self.find_driver(id)
        if driver is not None:
            return driver
        return self.find_user(id)

    # =========================================================================
    # СВОДКА
    # =========================================================================

    def driver_report(self) -> list[DriverReport]:
        """Сводка по всем водителям, упорядоченная по ID."""
        return [
            DriverReport(
                driver_id=driver.id,
                name=driver.name,
                status=driver.status,
                completed_trips=len(driver.completed_driven_trips),
                average_rating=driver.average_rating(),
                total_revenue=driver.total_revenue(),
                net_expenditures=driver.net_expenditures(),
            )
            for driver in sorted(self.drivers, key=lambda d: d.id)
        ]
