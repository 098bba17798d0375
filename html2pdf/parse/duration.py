# Руководство к файлу (html2pdf/parse/duration.py)
# Назначение:
# - Разбор человекочитаемых длительностей для --wait ("150ms", "10s", "1m 30s", "1.5s").
# - Обратное форматирование длительности для логов.
# Важно:
# - Единица обязательна; отрицательные значения и значения выше max_wait отклоняются.
# - Заглавная "M" отклоняется: в humantime это месяцы, молча читать её как минуты нельзя.

from __future__ import annotations

import re
from datetime import timedelta
from typing import Dict, List, Optional

from html2pdf.core.errors import ParseError


# множитель к микросекундам
UNITS: Dict[str, float] = {
    "ns": 0.001,
    "nsec": 0.001,
    "us": 1,
    "µs": 1,
    "usec": 1,
    "ms": 1_000,
    "msec": 1_000,
    "s": 1_000_000,
    "sec": 1_000_000,
    "secs": 1_000_000,
    "second": 1_000_000,
    "seconds": 1_000_000,
    "m": 60_000_000,
    "min": 60_000_000,
    "mins": 60_000_000,
    "minute": 60_000_000,
    "minutes": 60_000_000,
    "h": 3_600_000_000,
    "hr": 3_600_000_000,
    "hrs": 3_600_000_000,
    "hour": 3_600_000_000,
    "hours": 3_600_000_000,
}

_TERM_RE = re.compile(r"\s*(?P<value>\d+(?:\.\d+)?|\.\d+)\s*(?P<unit>[a-zµ]+)\s*", re.IGNORECASE)


def parse_duration(raw: str, max_wait: Optional[timedelta] = None) -> timedelta:
    """Парсит строку длительности в timedelta.

    Термы вида <число><единица> складываются: "1m 30s" == 90 секунд.
    """

    text = (raw or "").strip()
    if not text:
        raise ParseError("Invalid duration: empty value")
    if text.startswith("-"):
        raise ParseError(f"Invalid duration {raw!r}: negative durations are not allowed")

    micros = 0.0
    pos = 0
    while pos < len(text):
        m = _TERM_RE.match(text, pos)
        if m is None or m.end() == pos:
            raise ParseError(f"Invalid duration {raw!r}: expected <number><unit> at {text[pos:]!r}")
        if m.group("unit") == "M":
            raise ParseError(
                f"Invalid duration {raw!r}: unit 'M' is ambiguous (months are not supported), use 'm' for minutes"
            )
        unit = m.group("unit").lower()
        factor = UNITS.get(unit)
        if factor is None:
            raise ParseError(
                f"Invalid duration {raw!r}: unknown unit {m.group('unit')!r}, "
                f"expected one of ms, s, m, h"
            )
        micros += float(m.group("value")) * factor
        pos = m.end()

    try:
        value = timedelta(microseconds=round(micros))
    except OverflowError as exc:
        raise ParseError(f"Invalid duration {raw!r}: value is too large") from exc

    if max_wait is not None and value > max_wait:
        raise ParseError(f"Invalid duration {raw!r}: exceeds the maximum of {format_duration(max_wait)}")
    return value


def format_duration(value: timedelta) -> str:
    """Компактная запись длительности: 1h 2m 3s 150ms."""

    total_ms = value // timedelta(milliseconds=1)
    if total_ms == 0:
        return "0s"
    parts: List[str] = []
    for suffix, size in (("h", 3_600_000), ("m", 60_000), ("s", 1_000), ("ms", 1)):
        amount, total_ms = divmod(total_ms, size)
        if amount:
            parts.append(f"{amount}{suffix}")
    return " ".join(parts)


__all__ = ["parse_duration", "format_duration", "UNITS"]
