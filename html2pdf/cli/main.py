# Руководство к файлу (html2pdf/cli/main.py)
# Назначение: CLI: разбор аргументов, валидация опций, сборка PrintRequest, вызов оркестратора.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно:
# - argparse собирает только строки; разбор значений делают парсеры html2pdf.parse,
#   чтобы сообщения об ошибках были нашими, а не общими от argparse.
# - Коды выхода: 0 — успех, иначе exit_code конкретной ошибки (см. core/errors.py).
# - Настройки и логирование поднимаются внутри try: ошибка HTML2PDF_* — это ConfigError, а не трейсбек.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from html2pdf import __version__
from html2pdf.core.config import Settings, get_settings
from html2pdf.core.errors import Html2PdfError
from html2pdf.core.logging import LogConfig, configure_from
from html2pdf.core.request import build_print_request
from html2pdf.core.types import PrintRequest
from html2pdf.orchestrator.converter import HtmlToPdfConverter
from html2pdf.parse.duration import parse_duration
from html2pdf.parse.options import (
    MAX_SCALE,
    MIN_SCALE,
    paper_size_names,
    parse_margin,
    parse_paper_size,
    parse_scale,
    validate_page_range,
)
from html2pdf.utils.paths import resolve_input_path, resolve_output_path


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="html2pdf",
        description="Генерация PDF из локального HTML-файла через headless Chromium",
    )
    p.add_argument("input", type=Path, help="Входной HTML-файл")
    p.add_argument("-o", "--output", type=Path, default=None, help="Выходной файл (по умолчанию — вход с расширением .pdf)")
    p.add_argument("--landscape", action="store_true", help="Альбомная ориентация")
    p.add_argument("--background", action="store_true", help="Печатать фоновые цвета и изображения")
    p.add_argument("--disable-sandbox", action="store_true", help="Отключить песочницу Chromium (для контейнеров)")
    p.add_argument("--wait", default=None, help="Пауза перед печатью, например: 150ms, 10s, 1m 30s")
    p.add_argument(
        "--header",
        default=None,
        help=(
            "HTML-шаблон верхнего колонтитула. Значения подставляются в элементы с классами "
            "date, title, url, pageNumber, totalPages, например <span class=title></span>"
        ),
    )
    p.add_argument("--footer", default=None, help="HTML-шаблон нижнего колонтитула (формат как у --header)")
    p.add_argument("--paper", default=None, help=f"Формат бумаги: {', '.join(paper_size_names())}")
    p.add_argument("--scale", default=None, help=f"Масштаб печати от {MIN_SCALE} до {MAX_SCALE}, по умолчанию 1.0")
    p.add_argument("--range", dest="page_range", default=None, help="Диапазоны страниц, например '1-5, 8, 11-13'")
    p.add_argument(
        "--margin",
        default=None,
        help=(
            "Поля в дюймах: '0.4' — для всех сторон; '0.4 0.6' — top/bottom и left/right; "
            "'0.1 0.2 0.3 0.4' — top, right, bottom, left"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def request_from_args(ns: argparse.Namespace, settings: Settings) -> PrintRequest:
    """Парсеры опций -> пути -> PrintRequest. Первая же ошибка прерывает сборку."""

    margin = parse_margin(ns.margin) if ns.margin is not None else None
    paper = parse_paper_size(ns.paper) if ns.paper is not None else None
    page_range = validate_page_range(ns.page_range) if ns.page_range is not None else None
    scale = parse_scale(ns.scale) if ns.scale is not None else None
    wait = parse_duration(ns.wait, max_wait=settings.max_wait) if ns.wait is not None else None

    input_path = resolve_input_path(ns.input)
    output_path = resolve_output_path(ns.input, ns.output)

    return build_print_request(
        input_path,
        output_path,
        background=ns.background,
        landscape=ns.landscape,
        disable_sandbox=ns.disable_sandbox,
        header=ns.header,
        footer=ns.footer,
        margin=margin,
        paper=paper,
        page_range=page_range,
        scale=scale,
        wait=wait,
    )


def main(argv: Optional[List[str]] = None) -> int:
    ns = parse_args(argv)

    try:
        settings = get_settings()
        configure_from(LogConfig(level=settings.log_level, to_file=settings.log_file, json=settings.log_json))
        logger.debug("Parsed arguments: %s", vars(ns))
        request = request_from_args(ns, settings)
        HtmlToPdfConverter(settings).convert(request)
    except Html2PdfError as exc:
        logger.debug("Conversion aborted", exc_info=True)
        print(f"html2pdf: error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
