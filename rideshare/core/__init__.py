# rideshare/core/__init__.py
"""
Доменный слой.
Пользователи, водители, поездки и загрузка исходных данных.
"""

# Порядок важен: модели пользователей ссылаются на Trip по имени
from rideshare.core.users import User, Driver
from rideshare.core.trips import Trip
from rideshare.core.dispatcher import TripDispatcher, DriverReport

__all__ = [
    "User",
    "Driver",
    "Trip",
    "TripDispatcher",
    "DriverReport",
]
