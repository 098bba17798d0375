# Руководство к файлу (html2pdf/core/logging.py)
# Назначение: настройка логирования html2pdf (уровень, формат, вывод в файл/STDERR, полное отключение).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: STDOUT не используем — CLI может быть частью пайплайна.

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import orjson

from html2pdf.core.errors import ConfigError


OFF = "OFF"


class JsonFormatter(logging.Formatter):
    """JSON-форматтер: одна запись — одна строка."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return orjson.dumps(payload).decode("utf-8")


@dataclass
class LogConfig:
    level: str = "INFO"
    to_file: Optional[str] = None
    json: bool = False


def _resolve_level(level: str) -> Optional[int]:
    name = level.strip().upper()
    if name in (OFF, "NONE", "0", "FALSE"):
        return None
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO", *, to_file: Optional[str] = None, json: bool = False) -> None:
    root = logging.getLogger()
    resolved = _resolve_level(level)
    if resolved is None:
        root.handlers.clear()
        # OFF: глушим всё, включая сторонние библиотеки
        root.addHandler(logging.NullHandler())
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    # обработчик создаём до очистки root: при ошибке прежняя настройка остаётся
    if to_file:
        try:
            h: logging.Handler = logging.FileHandler(to_file, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot open log file {to_file}: {exc}") from exc
    else:
        h = logging.StreamHandler(sys.stderr)
    if json:
        fmt: logging.Formatter = JsonFormatter()
    else:
        fmt = logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    h.setFormatter(fmt)
    root.handlers.clear()
    root.addHandler(h)
    root.setLevel(resolved)

    # снизим шум от внешних библиотек
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("playwright").setLevel(logging.WARNING)


def configure_from(cfg: LogConfig) -> None:
    configure_logging(cfg.level, to_file=cfg.to_file, json=cfg.json)


__all__ = ["LogConfig", "JsonFormatter", "configure_logging", "configure_from", "OFF"]
