# rideshare/__init__.py
"""
RideShare: доменная модель сервиса совместных поездок.
Водители, пассажиры, поездки и расчёты по ним.
"""

__version__ = "1.0.0"
