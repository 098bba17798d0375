# Руководство к файлу (html2pdf/core/request.py)
# Назначение: сборка неизменяемого PrintRequest из уже разобранных значений.
# Важно: здесь нет разбора строк — только композиция (парсеры см. html2pdf/parse).

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Optional

from html2pdf.core.types import Margin, PaperSize, PrintRequest


def build_print_request(
    input_path: Path,
    output_path: Path,
    *,
    background: bool = False,
    landscape: bool = False,
    disable_sandbox: bool = False,
    header: Optional[str] = None,
    footer: Optional[str] = None,
    margin: Optional[Margin] = None,
    paper: Optional[PaperSize] = None,
    page_range: Optional[str] = None,
    scale: Optional[float] = None,
    wait: Optional[timedelta] = None,
) -> PrintRequest:
    return PrintRequest(
        input_path=input_path,
        output_path=output_path,
        background=background,
        landscape=landscape,
        disable_sandbox=disable_sandbox,
        header=header,
        footer=footer,
        margin=margin,
        paper=paper,
        page_range=page_range,
        scale=1.0 if scale is None else scale,
        wait=wait,
    )


__all__ = ["build_print_request"]
