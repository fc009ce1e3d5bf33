# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from rideshare.core.trips.models import Trip
from rideshare.core.users.models import Driver, User


START = datetime(2016, 8, 8, 10, 0, 0)
END = datetime(2016, 8, 10, 10, 0, 0)


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


# =============================================================================
# ФИКСТУРЫ МОДЕЛЕЙ
# =============================================================================

@pytest.fixture
def sample_driver_data() -> dict[str, Any]:
    """Пример данных водителя."""
    return {
        "id": 54,
        "name": "Rogers Bartell IV",
        "vin": "1C9EVBRM0YBC564DZ",
        "phone": "111-111-1111",
        "status": "AVAILABLE",
    }


@pytest.fixture
def driver(sample_driver_data: dict[str, Any]) -> Driver:
    """Водитель без поездок."""
    return Driver(**sample_driver_data)


@pytest.fixture
def other_driver() -> Driver:
    """Второй водитель, который возит первого."""
    return Driver(id=5, name="Roger", vin="1C9EVBRM0YBC51234")


@pytest.fixture
def passenger() -> User:
    """Пассажир."""
    return User(id=1, name="Ada", phone="412-432-7640")


@pytest.fixture
def make_trip() -> Callable[..., Trip]:
    """Фабрика завершённых поездок; end_time=None даёт незавершённую."""

    def _make_trip(
        driver: Optional[Driver] = None,
        passenger: Optional[User] = None,
        *,
        id: int = 8,
        cost: Optional[float] = None,
        rating: Optional[int] = 5,
        start_time: datetime = START,
        end_time: Optional[datetime] = END,
    ) -> Trip:
        return Trip(
            id=id,
            driver=driver,
            passenger=passenger,
            cost=cost,
            rating=rating,
            start_time=start_time,
            end_time=end_time,
        )

    return _make_trip


# =============================================================================
# CSV
# =============================================================================

SAMPLE_USERS_CSV = """id,name,phone_num
1,Ada Lovelace,412-432-7640
2,Grace Hopper,412-555-0102
"""

SAMPLE_DRIVERS_CSV = """id,name,vin,status
54,Rogers Bartell IV,1C9EVBRM0YBC564DZ,AVAILABLE
5,Roger,1C9EVBRM0YBC51234,UNAVAILABLE
"""

SAMPLE_TRIPS_CSV = """id,driver_id,passenger_id,start_time,end_time,cost,rating
8,54,1,2016-08-08T10:00:00,2016-08-08T10:25:00,15,5
9,54,2,2016-08-09T12:00:00,2016-08-09T12:40:00,10,1
10,54,1,2016-08-10T08:15:00,,,
18,5,54,2016-08-11T09:00:00,2016-08-11T09:20:00,5,5
"""


@pytest.fixture
def write_data_dir(tmp_path: Path) -> Callable[..., Path]:
    """Создаёт директорию с CSV; любой файл можно подменить или опустить (None)."""

    def _write(
        users: Optional[str] = SAMPLE_USERS_CSV,
        drivers: Optional[str] = SAMPLE_DRIVERS_CSV,
        trips: Optional[str] = SAMPLE_TRIPS_CSV,
    ) -> Path:
        for name, content in (("users.csv", users), ("drivers.csv", drivers), ("trips.csv", trips)):
            if content is not None:
                (tmp_path / name).write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def data_dir(write_data_dir: Callable[..., Path]) -> Path:
    """Директория с корректными CSV."""
    return write_data_dir()
