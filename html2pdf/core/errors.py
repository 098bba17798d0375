# Руководство к файлу (html2pdf/core/errors.py)
# Назначение:
# - Иерархия ошибок html2pdf: разбор опций, настройки, пути, конвертация, запись результата.
# Важно:
# - У каждого вида ошибки свой код выхода CLI (см. cli/main.py).
# - Ошибки не ретраятся: любая из них завершает текущий запуск.

from __future__ import annotations


class Html2PdfError(Exception):
    """Базовая ошибка html2pdf."""

    exit_code: int = 1


class ParseError(Html2PdfError, ValueError):
    """Некорректная строка опции (margin, paper, wait, range, scale)."""

    exit_code = 2


class ConfigError(Html2PdfError):
    """Некорректные настройки HTML2PDF_* или недоступный файл логов."""

    exit_code = 2


class PathError(Html2PdfError):
    """Входной файл отсутствует/не является файлом или выходная директория недоступна."""

    exit_code = 3


class ConversionError(Html2PdfError):
    """Сбой браузера: запуск, навигация или печать в PDF."""

    exit_code = 4


class IoError(Html2PdfError):
    """Не удалось записать итоговый PDF."""

    exit_code = 5


__all__ = ["Html2PdfError", "ParseError", "ConfigError", "PathError", "ConversionError", "IoError"]
