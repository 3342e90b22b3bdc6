# backend/app/services/periods.py
"""
Ventanas de tiempo para informes y filtros por fecha.

Las fechas que llegan del almacén pueden venir sin zona horaria (SQLite);
se interpretan como UTC para poder compararlas con `now`.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional
import enum


class ReportPeriod(str, enum.Enum):
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_aware(value: Any) -> Optional[datetime]:
    """Normaliza date/datetime/ISO string a datetime con zona horaria."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def period_start(period: ReportPeriod, now: datetime) -> datetime:
    """
    Inicio del periodo de informe relativo a `now`.

    - week: ahora menos 7 x 24 h
    - month: día 1 del mes en curso a las 00:00
    - quarter: día 1 del trimestre natural en curso a las 00:00
    - year: 1 de enero a las 00:00
    """
    period = ReportPeriod(period)
    now = as_aware(now)
    if period == ReportPeriod.WEEK:
        return now - timedelta(days=7)
    if period == ReportPeriod.MONTH:
        return start_of_day(now.replace(day=1))
    if period == ReportPeriod.QUARTER:
        first_month = (now.month - 1) // 3 * 3 + 1
        return start_of_day(now.replace(month=first_month, day=1))
    return start_of_day(now.replace(month=1, day=1))


def in_window(value: Any, start: datetime, end: datetime) -> bool:
    moment = as_aware(value)
    if moment is None:
        return False
    return start <= moment <= end


def within_period(rows: Iterable[Dict[str, Any]], field: str, period: ReportPeriod, now: datetime) -> List[Dict[str, Any]]:
    """Filas cuyo campo de fecha cae entre el inicio del periodo y `now`, ambos incluidos."""
    now = as_aware(now)
    start = period_start(period, now)
    return [row for row in rows if in_window(row.get(field), start, now)]
