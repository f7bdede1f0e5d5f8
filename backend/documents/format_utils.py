"""Date formatting for term text. Terms are dated in the condominium's local time (pt-BR)."""
from __future__ import annotations

import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

TERM_TIMEZONE = os.environ.get("TERM_TIMEZONE", "America/Sao_Paulo")


def local_today(tz_name: str | None = None, now: datetime | None = None) -> date:
    tz = ZoneInfo(tz_name or TERM_TIMEZONE)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(tz).date()


def format_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")
