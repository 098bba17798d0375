# Руководство к файлу (html2pdf/core/config.py)
# Назначение:
# - Централизованные настройки html2pdf из переменных окружения (префикс HTML2PDF_) и .env.
# - Логирование (уровень/JSON/файл), таймауты команд браузера, предел ожидания перед печатью.
# Важно:
# - Таймаут команд браузера всегда вычисляется выше пользовательского --wait
#   (см. Settings.command_timeout_for), иначе долгие ожидания падали по таймауту.

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from html2pdf.core.errors import ConfigError


ENV_PREFIX = "HTML2PDF_"


class Settings(BaseSettings):
    """Базовые настройки html2pdf."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=".env", extra="ignore")

    # Логирование
    log_level: str = Field(default="INFO", description="DEBUG/INFO/WARNING/ERROR или OFF")
    log_json: bool = Field(default=False, description="JSON-логирование")
    log_file: Optional[str] = Field(default=None, description="Файл для логов (по умолчанию STDERR)")

    # Браузер
    command_timeout_ms: int = Field(default=30_000, ge=1, description="Базовый таймаут команд браузера")
    wait_safety_margin_ms: int = Field(default=30_000, ge=0, description="Запас сверх --wait для таймаута команд")
    max_wait_sec: float = Field(default=3600.0, gt=0, description="Максимально допустимое значение --wait")
    chromium_executable: Optional[str] = Field(default=None, description="Путь к бинарнику Chromium")

    @property
    def max_wait(self) -> timedelta:
        return timedelta(seconds=self.max_wait_sec)

    def command_timeout_for(self, wait: Optional[timedelta]) -> int:
        """Таймаут команд браузера (мс) для запуска с ожиданием `wait`."""

        # округляем вверх до целых миллисекунд
        wait_ms = -(-wait // timedelta(milliseconds=1)) if wait else 0
        return max(self.command_timeout_ms, wait_ms + self.wait_safety_margin_ms)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Настройки из окружения; ошибки валидации -> ConfigError с именами переменных."""

    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}" if err["loc"] else err["msg"]
            for err in exc.errors()
        )
        raise ConfigError(f"Invalid settings: {problems}") from exc


__all__ = ["Settings", "get_settings", "ENV_PREFIX"]
