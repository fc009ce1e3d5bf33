# rideshare/core/users/models.py
"""
Модели пассажиров и водителей.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from rideshare.common.constants import DriverStatus, VIN_PATTERN

if TYPE_CHECKING:
    from rideshare.core.trips.models import Trip


def _ensure_trip(trip: Any) -> "Trip":
    """Проверяет, что передана поездка, иначе TypeError."""
    from rideshare.core.trips.models import Trip

    if not isinstance(trip, Trip):
        raise TypeError(f"Ожидалась поездка (Trip), получено: {type(trip).__name__}")
    return trip


class User(BaseModel):
    """Модель пассажира."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., gt=0, strict=True, description="ID пользователя")
    name: str = Field(..., description="Имя")
    phone: Optional[str] = Field(None, description="Номер телефона")

    # Поездки, заказанные пользователем как пассажиром
    trips: list["Trip"] = Field(default_factory=list, repr=False, description="Заказанные поездки")

    def add_trip(self, trip: "Trip") -> None:
        """Добавляет поездку, в которой пользователь был пассажиром."""
        self.trips.append(_ensure_trip(trip))

    @property
    def completed_trips(self) -> list["Trip"]:
        """Завершённые поездки пользователя."""
        return [trip for trip in self.trips if trip.is_completed]

    def net_expenditures(self) -> float:
        """
        Сумма, потраченная на завершённые поездки.

        Returns:
            Сумма стоимостей; 0, если поездок нет
        """
        return sum((trip.cost for trip in self.completed_trips if trip.cost is not None), 0.0)

    def total_time_spent(self) -> float:
        """Суммарная длительность завершённых поездок в секундах."""
        return sum((trip.duration for trip in self.completed_trips), 0.0)


class Driver(User):
    """
    Модель водителя.

    Водитель тоже может ездить пассажиром: такие поездки лежат в унаследованном
    списке trips и учитываются в расходах.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    vehicle_id: str = Field(..., alias="vin", pattern=VIN_PATTERN, description="VIN автомобиля")
    status: DriverStatus = Field(DriverStatus.AVAILABLE, description="Статус водителя")

    driven_trips: list["Trip"] = Field(default_factory=list, repr=False, description="Выполненные рейсы")

    @property
    def is_available(self) -> bool:
        """Свободен ли водитель."""
        return self.status == DriverStatus.AVAILABLE

    @property
    def completed_driven_trips(self) -> list["Trip"]:
        """Рейсы водителя без незавершённых."""
        return [trip for trip in self.driven_trips if trip.is_completed]

    def add_driven_trip(self, trip: "Trip") -> None:
        """
        Добавляет рейс, выполненный водителем.

        Raises:
            TypeError: если передана не поездка
        """
        self.driven_trips.append(_ensure_trip(trip))

    def average_rating(self) -> float:
        """
        Средний рейтинг по завершённым рейсам.

        Returns:
            Среднее значение от 1.0 до 5.0; 0.0, если оценённых рейсов нет
        """
        ratings = [trip.rating for trip in self.completed_driven_trips if trip.rating is not None]
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)

    def total_revenue(self) -> float:
        """
        Выручка водителя по завершённым рейсам.

        С каждого рейса удерживается фиксированный сбор, от остатка водителю
        достаётся доля DRIVER_SHARE. Итог округляется до ROUND_DIGITS знаков.

        Returns:
            Выручка; 0, если завершённых рейсов нет
        """
        from rideshare.config import settings

        fee = settings.fares.TRIP_FEE
        share = settings.fares.DRIVER_SHARE

        total = sum(
            ((trip.cost - fee) * share for trip in self.completed_driven_trips if trip.cost is not None),
            0.0,
        )
        return round(total, settings.fares.ROUND_DIGITS)

    def net_expenditures(self) -> float:
        """
        Расходы водителя на поездки пассажиром за вычетом его выручки.

        Returns:
            Отрицательное число, если водитель заработал больше, чем потратил
        """
        return super().net_expenditures() - self.total_revenue()
