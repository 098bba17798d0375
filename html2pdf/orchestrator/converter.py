# Руководство к файлу (html2pdf/orchestrator/converter.py)
# Назначение: оркестратор одной конвертации: рендер через браузер -> атомарная запись PDF.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: повторов нет — ошибка на любом шаге прерывает конвертацию.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from html2pdf.core.config import Settings, get_settings
from html2pdf.core.types import PrintRequest
from html2pdf.export.writer import write_atomic
from html2pdf.render.chromium import ChromiumRenderer
from html2pdf.utils.paths import ensure_output_dir


class Renderer(Protocol):
    def render(self, request: PrintRequest) -> bytes: ...


class HtmlToPdfConverter:
    """Оркестратор конвертации HTML -> PDF."""

    def __init__(self, settings: Optional[Settings] = None, renderer: Optional[Renderer] = None) -> None:
        self.settings = settings or get_settings()
        self.renderer = renderer or ChromiumRenderer(self.settings)
        self.log = logging.getLogger(__name__)

    def convert(self, request: PrintRequest) -> Path:
        ensure_output_dir(request.output_path)
        data = self.renderer.render(request)
        self.log.info("Output file: %s", request.output_path)
        return write_atomic(request.output_path, data)


__all__ = ["HtmlToPdfConverter", "Renderer"]
