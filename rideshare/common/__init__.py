"""
Общие утилиты, константы, исключения и логгер.
"""

from rideshare.common.logger import get_logger, log_info, log_error, log_warning, log_debug, setup_logging
from rideshare.common.constants import TypeMsg, DriverStatus
from rideshare.common.errors import RideShareError, DataLoadError, ErrorCode

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "setup_logging",
    "TypeMsg",
    "DriverStatus",
    "RideShareError",
    "DataLoadError",
    "ErrorCode",
]
