# Руководство к файлу (tests/integration/test_chromium_renderer_integration.py)
# Назначение:
# - Проверка адаптера ChromiumRenderer против фейкового Playwright: порядок шагов,
#   таймауты (регрессия «ожидание > 30 секунд»), опции печати, закрытие браузера, обёртка ошибок.

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

import html2pdf.render.chromium as chromium
from html2pdf.core.config import Settings
from html2pdf.core.errors import ConversionError
from html2pdf.core.request import build_print_request
from html2pdf.core.types import Margin, PaperSize
from html2pdf.render.chromium import ChromiumRenderer, pdf_options


class FakePlaywright:
    """Минимальная имитация sync_playwright() -> chromium -> browser -> page."""

    def __init__(self, fail_on: str = "") -> None:
        self.calls: List[tuple] = []
        self.fail_on = fail_on
        self.chromium = self

    # контекстный менеджер sync_playwright()
    def __enter__(self) -> "FakePlaywright":
        self.calls.append(("start",))
        return self

    def __exit__(self, *exc: Any) -> None:
        self.calls.append(("stop",))

    def _maybe_fail(self, step: str) -> None:
        if self.fail_on == step:
            raise PlaywrightTimeoutError(f"{step}: Timeout 30000ms exceeded.")

    # chromium
    def launch(self, **kwargs: Any) -> "FakePlaywright":
        self.calls.append(("launch", kwargs))
        self._maybe_fail("launch")
        return self

    # browser
    def new_page(self) -> "FakePlaywright":
        self.calls.append(("new_page",))
        return self

    def close(self) -> None:
        self.calls.append(("close",))

    # page
    def set_default_timeout(self, timeout: float) -> None:
        self.calls.append(("set_default_timeout", timeout))

    def goto(self, url: str, **kwargs: Any) -> None:
        self.calls.append(("goto", url, kwargs))
        self._maybe_fail("goto")

    def pdf(self, **kwargs: Any) -> bytes:
        self.calls.append(("pdf", kwargs))
        self._maybe_fail("pdf")
        return b"%PDF-1.4 fake"

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]

    def call(self, name: str) -> tuple:
        return next(c for c in self.calls if c[0] == name)


@pytest.fixture
def fake_pw(monkeypatch):
    fake = FakePlaywright()
    monkeypatch.setattr(chromium, "sync_playwright", lambda: fake)
    return fake


@pytest.fixture
def sleeps(monkeypatch, fake_pw) -> List[float]:
    recorded: List[float] = []

    def fake_sleep(seconds: float) -> None:
        fake_pw.calls.append(("sleep", seconds))
        recorded.append(seconds)

    monkeypatch.setattr(chromium.time, "sleep", fake_sleep)
    return recorded


def _request(html_file: Path, **kwargs: Any):
    return build_print_request(html_file.resolve(), html_file.with_suffix(".pdf"), **kwargs)


def test_render_navigates_then_prints_and_closes(fake_pw, sleeps, html_file):
    data = ChromiumRenderer(Settings()).render(_request(html_file))

    assert data == b"%PDF-1.4 fake"
    assert fake_pw.names() == ["start", "launch", "new_page", "set_default_timeout", "goto", "pdf", "close", "stop"]
    _, url, kwargs = fake_pw.call("goto")
    assert url == html_file.resolve().as_uri()
    assert kwargs == {"wait_until": "load"}
    assert sleeps == []


def test_wait_happens_between_navigation_and_print(fake_pw, sleeps, html_file):
    ChromiumRenderer(Settings()).render(_request(html_file, wait=timedelta(milliseconds=150)))

    names = fake_pw.names()
    assert names.index("goto") < names.index("sleep") < names.index("pdf")
    assert sleeps == [0.15]


def test_long_wait_does_not_hit_default_timeout(fake_pw, sleeps, html_file):
    ChromiumRenderer(Settings()).render(_request(html_file, wait=timedelta(seconds=35)))

    _, timeout = fake_pw.call("set_default_timeout")
    _, launch_kwargs = fake_pw.call("launch")
    assert timeout > 35_000
    assert launch_kwargs["timeout"] > 35_000
    assert sleeps == [35.0]


def test_sandbox_enabled_by_default(fake_pw, sleeps, html_file):
    ChromiumRenderer(Settings()).render(_request(html_file))

    _, kwargs = fake_pw.call("launch")
    assert kwargs["headless"] is True
    assert kwargs["chromium_sandbox"] is True
    assert "args" not in kwargs


def test_disable_sandbox_and_custom_executable(fake_pw, sleeps, html_file):
    settings = Settings(chromium_executable="/opt/chromium/chrome")
    ChromiumRenderer(settings).render(_request(html_file, disable_sandbox=True))

    _, kwargs = fake_pw.call("launch")
    assert kwargs["chromium_sandbox"] is False
    assert kwargs["args"] == ["--no-sandbox"]
    assert kwargs["executable_path"] == "/opt/chromium/chrome"


def test_print_options_are_passed_through(fake_pw, sleeps, html_file):
    req = _request(
        html_file,
        background=True,
        landscape=True,
        header="<span class=title></span>",
        margin=Margin(0.1, 0.2, 0.3, 0.4),
        paper=PaperSize.A4,
        page_range="1-5,8",
        scale=0.5,
    )
    ChromiumRenderer(Settings()).render(req)

    _, kwargs = fake_pw.call("pdf")
    assert kwargs == {
        "print_background": True,
        "landscape": True,
        "scale": 0.5,
        "display_header_footer": True,
        "header_template": "<span class=title></span>",
        "margin": {"top": "0.1in", "right": "0.2in", "bottom": "0.3in", "left": "0.4in"},
        "width": "8.27in",
        "height": "11.7in",
        "page_ranges": "1-5,8",
    }


def test_pdf_options_defaults_leave_browser_defaults(html_file):
    opts: Dict[str, Any] = pdf_options(_request(html_file))
    assert opts == {
        "print_background": False,
        "landscape": False,
        "scale": 1.0,
        "display_header_footer": False,
    }


@pytest.mark.parametrize("step", ["launch", "goto", "pdf"])
def test_playwright_failures_become_conversion_errors(fake_pw, sleeps, html_file, step):
    fake_pw.fail_on = step

    with pytest.raises(ConversionError, match="Headless Chromium failed") as exc_info:
        ChromiumRenderer(Settings()).render(_request(html_file))

    assert isinstance(exc_info.value.__cause__, PlaywrightError)
    if step != "launch":
        assert "close" in fake_pw.names()
