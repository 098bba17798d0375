# Руководство к файлу (html2pdf/utils/paths.py)
# Назначение: разрешение входного/выходного пути и подготовка выходной директории.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: права доступа проверяются до запуска браузера, чтобы ошибка была PathError, а не сбоем печати.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from html2pdf.core.errors import PathError


logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm", ".xhtml"}
PDF_SUFFIX = ".pdf"

PathLike = Union[str, Path]


def resolve_input_path(path: PathLike) -> Path:
    """Канонический абсолютный путь к входному HTML (симлинки раскрываются)."""

    src = Path(path).expanduser()
    if not src.exists():
        raise PathError(f"Input file not found: {src}")
    if not src.is_file():
        raise PathError(f"Input path is not a regular file: {src}")
    if not os.access(src, os.R_OK):
        raise PathError(f"Input file is not readable: {src}")
    src = src.resolve()
    if src.suffix.lower() not in HTML_SUFFIXES:
        # содержимое не проверяем, только предупреждаем
        logger.warning("Input file %s does not have an HTML extension", src)
    return src


def resolve_output_path(input_path: PathLike, output: Optional[PathLike] = None) -> Path:
    """Явный выход используется как есть, иначе меняем расширение входа на .pdf."""

    if output is not None:
        return Path(output)
    derived = Path(input_path).with_suffix(PDF_SUFFIX)
    if Path(input_path).suffix.lower() == PDF_SUFFIX:
        logger.warning("Derived output %s is the input file itself, it will be overwritten", derived)
    return derived


def ensure_output_dir(output: Path) -> None:
    parent = output.parent
    if parent.exists() and not parent.is_dir():
        raise PathError(f"Output directory is not a directory: {parent}")
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Cannot create output directory {parent}: {exc}") from exc
    if not os.access(parent, os.W_OK | os.X_OK):
        raise PathError(f"Output directory is not writable: {parent}")


__all__ = ["resolve_input_path", "resolve_output_path", "ensure_output_dir", "HTML_SUFFIXES", "PDF_SUFFIX"]
