# Руководство к файлу (tests/conftest.py)
# Назначение:
# - Общие фикстуры для pytest-тестов html2pdf.
# - Изолирует настройки (HTML2PDF_*), логирование и подменяет браузер фейковым рендерером.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

import pytest

from html2pdf.core.config import get_settings
from html2pdf.core.types import PrintRequest


SAMPLE_HTML = """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>Report</title></head>
<body><h1>Report</h1><p>Hello, PDF.</p></body></html>
"""


class FakeRenderer:
    """Вместо Chromium: запоминает запросы и отдаёт детерминированные байты."""

    def __init__(self, settings=None) -> None:
        self.settings = settings
        self.requests: List[PrintRequest] = []

    def render(self, request: PrintRequest) -> bytes:
        self.requests.append(request)
        body = f"{request.input_path.name}|{request.margin}|{request.paper}|{request.scale}|{request.page_range}"
        return b"%PDF-1.4\n%" + body.encode("utf-8") + b"\n%%EOF\n"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Чистое окружение: без HTML2PDF_* переменных и без .env из рабочей директории."""

    for key in list(os.environ):
        if key.startswith("HTML2PDF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_logging():
    """configure_logging меняет root-логгер — возвращаем исходное состояние."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    logging.disable(logging.NOTSET)
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def html_file(tmp_path) -> Path:
    path = tmp_path / "report.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def fake_renderer(monkeypatch) -> List[FakeRenderer]:
    """Подменяет ChromiumRenderer в оркестраторе; возвращает список созданных рендереров."""

    created: List[FakeRenderer] = []

    def factory(settings):
        renderer = FakeRenderer(settings)
        created.append(renderer)
        return renderer

    monkeypatch.setattr("html2pdf.orchestrator.converter.ChromiumRenderer", factory)
    return created


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()
