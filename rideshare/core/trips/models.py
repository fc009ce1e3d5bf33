# rideshare/core/trips/models.py
"""
Модель поездки.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rideshare.common.constants import MAX_RATING, MIN_RATING
from rideshare.core.users.models import Driver, User


class Trip(BaseModel):
    """
    Модель поездки.

    Поездка без end_time считается незавершённой и не участвует
    в расчётах рейтинга, выручки и расходов.
    """

    # Ссылки на водителя и пассажира не копируются при валидации
    model_config = ConfigDict(revalidate_instances="never")

    id: int = Field(..., gt=0, strict=True, description="ID поездки")

    # Обратные ссылки не сериализуются: водитель и пассажир сами хранят поездку
    driver: Optional[Driver] = Field(None, repr=False, exclude=True, description="Водитель")
    passenger: Optional[User] = Field(None, repr=False, exclude=True, description="Пассажир")

    cost: Optional[float] = Field(None, ge=0.0, description="Стоимость")
    rating: Optional[int] = Field(None, ge=MIN_RATING, le=MAX_RATING, description="Оценка пассажира")

    start_time: datetime = Field(..., description="Время начала")
    end_time: Optional[datetime] = Field(None, description="Время завершения")

    @model_validator(mode="after")
    def end_after_start(self) -> "Trip":
        if self.end_time is None:
            return self
        if (self.start_time.tzinfo is None) != (self.end_time.tzinfo is None):
            raise ValueError("start_time и end_time должны быть оба с часовым поясом или оба без него")
        if self.end_time < self.start_time:
            raise ValueError("end_time не может быть раньше start_time")
        return self

    def __eq__(self, other: object) -> bool:
        """Поездки равны по своим полям и по ID водителя и пассажира."""
        if not isinstance(other, Trip):
            return NotImplemented
        return (
            self.model_dump() == other.model_dump()
            and self.driver_id == other.driver_id
            and self.passenger_id == other.passenger_id
        )

    @property
    def driver_id(self) -> Optional[int]:
        """ID водителя или None."""
        return self.driver.id if self.driver is not None else None

    @property
    def passenger_id(self) -> Optional[int]:
        """ID пассажира или None."""
        return self.passenger.id if self.passenger is not None else None

    @property
    def is_in_progress(self) -> bool:
        """Идёт ли поездка."""
        return self.end_time is None

    @property
    def is_completed(self) -> bool:
        """Завершена ли поездка."""
        return self.end_time is not None

    @property
    def duration(self) -> float:
        """Длительность в секундах; 0 для незавершённой поездки."""
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()


# Модели пользователей ссылаются на Trip по имени
User.model_rebuild()
Driver.model_rebuild()
Trip.model_rebuild()
