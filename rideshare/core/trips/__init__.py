# rideshare/core/trips/__init__.py
"""
Домен поездок.
"""

from rideshare.core.trips.models import Trip

__all__ = [
    "Trip",
]
