#!/usr/bin/env python3
# main.py
"""
Точка входа RideShare.
Загружает пользователей, водителей и поездки из CSV и печатает сводку по водителям.
"""

from __future__ import annotations

import sys
from pathlib import Path

from rideshare.common.errors import RideShareError
from rideshare.common.logger import log_error, log_info, setup_logging
from rideshare.config import settings
from rideshare.core.dispatcher import DriverReport, TripDispatcher


def format_report(rows: list[DriverReport]) -> str:
    """Форматирует сводку по водителям в текстовую таблицу."""
    header = f"{'ID':>5}  {'Имя':<24} {'Статус':<12} {'Рейсы':>5} {'Рейтинг':>7} {'Выручка':>9} {'Расходы':>9}"
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            f"{row.driver_id:>5}  {row.name:<24} {row.status.value:<12} {row.completed_trips:>5} "
            f"{row.average_rating:>7.2f} {row.total_revenue:>9.2f} {row.net_expenditures:>9.2f}"
        )
    return "\n".join(lines)


def main(data_dir: str | None = None) -> int:
    """
    Главная функция запуска.

    Args:
        data_dir: Директория с CSV; если None, берётся DATA_DIR из настроек

    Returns:
        Код возврата процесса
    """
    setup_logging()
    log_info(f"RideShare v{settings.system.VERSION}: построение сводки по водителям")

    try:
        dispatcher = TripDispatcher.from_csv(Path(data_dir) if data_dir else None)
    except RideShareError as e:
        log_error(f"Ошибка загрузки данных [{e.code.value}]: {e.message}")
        print(e.user_message, file=sys.stderr)
        return 1

    print(format_report(dispatcher.driver_report()))
    return 0


def print_usage() -> None:
    """Выводит справку по использованию."""
    print("""
RideShare: сводка по водителям

Использование:
    python main.py [data_dir]

Аргументы:
    data_dir    директория с users.csv, drivers.csv и trips.csv
                  (по умолчанию DATA_DIR из config/config.json)

Примеры:
    python main.py
    python main.py ./data
    """)


if __name__ == "__main__":
    data_dir = None

    if len(sys.argv) > 1:
        arg = sys.argv[1]
        if arg in ("--help", "-h"):
            print_usage()
            sys.exit(0)
        elif arg.startswith("-"):
            print(f"Ошибка: неизвестный параметр '{arg}'")
            print_usage()
            sys.exit(1)
        data_dir = arg

    sys.exit(main(data_dir))
