# Руководство к файлу (html2pdf/parse/options.py)
# Назначение:
# - Чистые парсеры опций печати: поля (--margin), формат бумаги (--paper),
#   диапазоны страниц (--range), масштаб (--scale).
# Важно:
# - Никаких побочных эффектов; любая ошибка — ParseError с указанием проблемного значения.
# - Диапазоны страниц проверяются только лексически, смысл (границы, порядок) оценивает браузер.

from __future__ import annotations

import math
import re
from typing import List

from html2pdf.core.errors import ParseError
from html2pdf.core.types import Margin, PaperSize


_DECIMAL_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_PAGE_ITEM_RE = re.compile(r"^\d+(?:-\d+)?$")

# Chromium принимает масштаб печати только в этом диапазоне
MIN_SCALE = 0.1
MAX_SCALE = 2.0


def _parse_inches(token: str) -> float:
    if not _DECIMAL_RE.match(token):
        raise ParseError(f"Invalid margin value {token!r}: expected a non-negative number of inches")
    return float(token)


def parse_margin(raw: str) -> Margin:
    """Парсит поля страницы.

    - '0.4' — одно значение для всех сторон;
    - '0.4 0.6' — первое для top/bottom, второе для left/right;
    - '0.1 0.2 0.3 0.4' — top, right, bottom, left.
    """

    tokens = (raw or "").split()
    if len(tokens) not in (1, 2, 4):
        raise ParseError(f"Invalid margin definition, expected 1, 2, or 4 values, got {len(tokens)} in {raw!r}")
    values = [_parse_inches(t) for t in tokens]
    if len(values) == 1:
        return Margin.all(values[0])
    if len(values) == 2:
        return Margin.vertical_horizontal(values[0], values[1])
    top, right, bottom, left = values
    return Margin(top=top, right=right, bottom=bottom, left=left)


def paper_size_names() -> List[str]:
    return [p.label for p in PaperSize]


def parse_paper_size(raw: str) -> PaperSize:
    key = (raw or "").strip().upper()
    try:
        return PaperSize[key]
    except KeyError:
        raise ParseError(
            f"Invalid paper size {raw!r}, expected a value in {', '.join(paper_size_names())}"
        ) from None


def validate_page_range(raw: str) -> str:
    """Проверяет строку диапазонов вида '1-5, 8, 11-13' и возвращает её без пробелов."""

    compact = re.sub(r"\s+", "", raw or "")
    if not compact:
        raise ParseError("Invalid page range: empty value")
    bad = sorted({ch for ch in compact if not (ch.isascii() and ch.isdigit()) and ch not in ",-"})
    if bad:
        raise ParseError(f"Invalid page range {raw!r}: unexpected character(s) {''.join(bad)!r}")
    for item in compact.split(","):
        if not _PAGE_ITEM_RE.match(item):
            raise ParseError(f"Invalid page range {raw!r}: malformed item {item!r}")
    return compact


def parse_scale(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ParseError(f"Invalid scale {raw!r}: expected a number") from None
    if not math.isfinite(value) or value <= 0:
        raise ParseError(f"Invalid scale {raw!r}: expected a positive number")
    if not MIN_SCALE <= value <= MAX_SCALE:
        raise ParseError(f"Invalid scale {raw!r}: expected a value between {MIN_SCALE} and {MAX_SCALE}")
    return value


__all__ = [
    "parse_margin",
    "parse_paper_size",
    "paper_size_names",
    "validate_page_range",
    "parse_scale",
    "MIN_SCALE",
    "MAX_SCALE",
]
