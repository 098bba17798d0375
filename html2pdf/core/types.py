# Руководство к файлу (html2pdf/core/types.py)
# Назначение:
# - Общие типы/DTO: поля страницы (Margin), формат бумаги (PaperSize), запрос печати (PrintRequest).
# Важно:
# - Все размеры в дюймах, как их принимает Chromium.
# - PrintRequest неизменяем: создаётся один раз на запуск и не модифицируется.

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Margin:
    """Поля страницы в дюймах (порядок как в CSS: top, right, bottom, left)."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def all(cls, value: float) -> "Margin":
        return cls(value, value, value, value)

    @classmethod
    def vertical_horizontal(cls, vertical: float, horizontal: float) -> "Margin":
        return cls(vertical, horizontal, vertical, horizontal)


class PaperSize(Enum):
    """Поддерживаемые форматы бумаги: значение — (ширина, высота) в дюймах."""

    A0 = (33.1, 46.8)
    A1 = (23.4, 33.1)
    A2 = (16.5, 23.4)
    A3 = (11.7, 16.5)
    A4 = (8.27, 11.7)
    A5 = (5.83, 8.27)
    A6 = (4.13, 5.83)
    LETTER = (8.5, 11.0)
    LEGAL = (8.5, 14.0)
    TABLOID = (11.0, 17.0)

    @property
    def width(self) -> float:
        return self.value[0]

    @property
    def height(self) -> float:
        return self.value[1]

    @property
    def label(self) -> str:
        # A4, Letter, Tabloid — как пишут в справке
        return self.name if self.name.startswith("A") else self.name.capitalize()


@dataclass(frozen=True)
class PrintRequest:
    """Запрос печати: нормализованные опции и итоговые пути.

    - input_path — абсолютный путь к HTML.
    - output_path — куда писать PDF.
    - margin/paper/page_range/wait — None, если пользователь не задал (браузерные значения по умолчанию).
    """

    input_path: Path
    output_path: Path
    background: bool = False
    landscape: bool = False
    disable_sandbox: bool = False
    header: Optional[str] = None
    footer: Optional[str] = None
    margin: Optional[Margin] = None
    paper: Optional[PaperSize] = None
    page_range: Optional[str] = None
    scale: float = 1.0
    wait: Optional[timedelta] = None

    @property
    def display_header_footer(self) -> bool:
        return self.header is not None or self.footer is not None

    @property
    def input_url(self) -> str:
        return self.input_path.as_uri()

    def paper_dimensions(self) -> Optional[Tuple[float, float]]:
        if self.paper is None:
            return None
        return self.paper.width, self.paper.height
