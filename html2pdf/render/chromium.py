# Руководство к файлу (html2pdf/render/chromium.py)
# Назначение:
# - Адаптер к Playwright (sync API, Chromium): запуск браузера, открытие file:// URL,
#   пауза перед печатью, page.pdf() с опциями из PrintRequest.
# Важно:
# - Таймаут команд браузера берётся из Settings.command_timeout_for(wait) и всегда
#   больше ожидания --wait, фиксированный таймаут короче ожидания недопустим.
# - Любая ошибка Playwright (включая таймауты) заворачивается в ConversionError.
# - Браузер закрывается в любом случае.

from __future__ import annotations

import logging
import time
from typing import Any, Dict

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from html2pdf.core.config import Settings
from html2pdf.core.errors import ConversionError
from html2pdf.core.types import PrintRequest
from html2pdf.parse.duration import format_duration


logger = logging.getLogger(__name__)


def _inches(value: float) -> str:
    return f"{value:g}in"


def pdf_options(request: PrintRequest) -> Dict[str, Any]:
    """Аргументы page.pdf() для запроса; незаданные опции оставляем браузеру."""

    opts: Dict[str, Any] = {
        "print_background": request.background,
        "landscape": request.landscape,
        "scale": request.scale,
        "display_header_footer": request.display_header_footer,
    }
    if request.header is not None:
        opts["header_template"] = request.header
    if request.footer is not None:
        opts["footer_template"] = request.footer
    if request.margin is not None:
        m = request.margin
        opts["margin"] = {
            "top": _inches(m.top),
            "right": _inches(m.right),
            "bottom": _inches(m.bottom),
            "left": _inches(m.left),
        }
    dims = request.paper_dimensions()
    if dims is not None:
        opts["width"], opts["height"] = _inches(dims[0]), _inches(dims[1])
    if request.page_range is not None:
        opts["page_ranges"] = request.page_range
    return opts


class ChromiumRenderer:
    """Рендерит HTML-файл в байты PDF через headless Chromium."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def launch_options(self, request: PrintRequest) -> Dict[str, Any]:
        opts: Dict[str, Any] = {
            "headless": True,
            "chromium_sandbox": not request.disable_sandbox,
        }
        if request.disable_sandbox:
            opts["args"] = ["--no-sandbox"]
        if self.settings.chromium_executable:
            opts["executable_path"] = self.settings.chromium_executable
        return opts

    def render(self, request: PrintRequest) -> bytes:
        timeout_ms = self.settings.command_timeout_for(request.wait)
        logger.info("Input file: %s", request.input_url)
        logger.debug("Browser command timeout: %d ms", timeout_ms)
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(timeout=timeout_ms, **self.launch_options(request))
                try:
                    page = browser.new_page()
                    page.set_default_timeout(timeout_ms)
                    page.goto(request.input_url, wait_until="load")

                    if request.wait:
                        logger.info("Waiting %s before export to PDF", format_duration(request.wait))
                        time.sleep(request.wait.total_seconds())

                    opts = pdf_options(request)
                    logger.debug("Using PDF options: %s", opts)
                    return page.pdf(**opts)
                finally:
                    browser.close()
        except PlaywrightError as exc:
            raise ConversionError(f"Headless Chromium failed: {exc}") from exc


__all__ = ["ChromiumRenderer", "pdf_options"]
