# rideshare/core/users/__init__.py
"""
Домен пользователей.
Модели пассажиров и водителей.
"""

from rideshare.core.users.models import User, Driver

__all__ = [
    "User",
    "Driver",
]
