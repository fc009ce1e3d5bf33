# rideshare/core/dispatcher/__init__.py
"""
Загрузка пользователей, водителей и поездок из CSV и сводка по водителям.
"""

from rideshare.core.dispatcher.service import TripDispatcher, DriverReport

__all__ = [
    "TripDispatcher",
    "DriverReport",
]
