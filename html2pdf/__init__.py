# Руководство к файлу (html2pdf/__init__.py)
# Назначение:
# - Объявляет пакет html2pdf и экспортирует основные сущности: парсеры опций,
#   запрос печати, оркестратор конвертации, ошибки и настройку логирования.

from __future__ import annotations

__version__ = "0.7.1"

from .core.errors import ConfigError, ConversionError, Html2PdfError, IoError, ParseError, PathError
from .core.types import Margin, PaperSize, PrintRequest
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.request import build_print_request
from .parse.duration import format_duration, parse_duration
from .parse.options import parse_margin, parse_paper_size, parse_scale, validate_page_range
from .utils.paths import resolve_input_path, resolve_output_path
from .orchestrator.converter import HtmlToPdfConverter

__all__ = [
    "__version__",
    "Html2PdfError",
    "ParseError",
    "ConfigError",
    "PathError",
    "ConversionError",
    "IoError",
    "Margin",
    "PaperSize",
    "PrintRequest",
    "Settings",
    "get_settings",
    "configure_logging",
    "build_print_request",
    "parse_duration",
    "format_duration",
    "parse_margin",
    "parse_paper_size",
    "parse_scale",
    "validate_page_range",
    "resolve_input_path",
    "resolve_output_path",
    "HtmlToPdfConverter",
]
