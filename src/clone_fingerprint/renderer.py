"""Playwright-backed rendering sessions."""
from __future__ import annotations

import contextlib
import logging
import os
import threading
from types import TracebackType
from typing import Any, Iterator, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import RenderConfig
from .core.models import RawElement

logger = logging.getLogger(__name__)

_SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# Returns tag name, ordered attribute pairs and raw textContent for every
# element matched by ``body *`` in document order.
_ELEMENTS_SCRIPT = """
() => Array.from(document.querySelectorAll('body *'), (element) => ({
    tag: element.tagName,
    attrs: Array.from(element.attributes, (attr) => [attr.name, attr.value]),
    text: element.textContent,
}))
"""


class RenderError(RuntimeError):
    """Raised when a page cannot be loaded or read."""


def _max_sessions_from_env() -> Optional[int]:
    raw = (os.environ.get("CLONE_FINGERPRINT_MAX_SESSIONS") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer CLONE_FINGERPRINT_MAX_SESSIONS=%r", raw)
        return None
    return value if value > 0 else None


def _build_semaphore(limit: Optional[int]) -> Optional[threading.Semaphore]:
    return threading.Semaphore(limit) if limit else None


_SESSION_SEMAPHORE = _build_semaphore(_max_sessions_from_env())


@contextlib.contextmanager
def session_slot() -> Iterator[None]:
    """
    Optional process-wide limit on concurrently open browser sessions.

    Unlimited unless set via env:
      CLONE_FINGERPRINT_MAX_SESSIONS (positive integer)
    """
    if _SESSION_SEMAPHORE is None:
        yield
        return
    with _SESSION_SEMAPHORE:
        yield


class PlaywrightDocument:
    """Live document view over the session's current page."""

    def __init__(self, page: Any, url: str) -> None:
        self._page = page
        self.url = url

    def elements(self) -> list[RawElement]:
        try:
            payload = self._page.evaluate(_ELEMENTS_SCRIPT)
        except PlaywrightError as exc:
            raise RenderError(f"Failed to read DOM of {self.url}: {exc}") from exc
        return [
            RawElement(
                tag_name=item.get("tag") or "",
                attributes=tuple((str(name), str(value)) for name, value in item.get("attrs") or ()),
                text_content=item.get("text"),
            )
            for item in payload or ()
        ]


class PlaywrightRenderer:
    """One browser, context and page, owned by a single sequential batch."""

    def __init__(self, config: RenderConfig) -> None:
        if config.browser not in _SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser '{config.browser}'")
        self.config = config
        self._playwright = None
        self._browser = None
        self._context = None
        self._page = None

    def __enter__(self) -> "PlaywrightRenderer":
        try:
            self._playwright = sync_playwright().start()
            browser_type = getattr(self._playwright, self.config.browser)
            self._browser = browser_type.launch(headless=self.config.headless)
            context_options: dict[str, Any] = {}
            if self.config.user_agent:
                context_options["user_agent"] = self.config.user_agent
            self._context = self._browser.new_context(**context_options)
            self._page = self._context.new_page()
        except PlaywrightError as exc:
            self.close()
            raise RenderError(f"Failed to start {self.config.browser}: {exc}") from exc
        logger.debug("Started %s session (headless=%s)", self.config.browser, self.config.headless)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def load(self, url: str) -> PlaywrightDocument:
        if self._page is None:
            raise RenderError("Renderer session is not open")
        logger.info("Loading %s", url)
        try:
            self._page.goto(
                url,
                wait_until=self.config.wait_until,
                timeout=self.config.navigation_timeout_ms,
            )
            if self.config.settle_delay_ms:
                self._page.wait_for_timeout(self.config.settle_delay_ms)
        except PlaywrightError as exc:
            raise RenderError(f"Failed to load {url}: {exc}") from exc
        return PlaywrightDocument(self._page, url)

    def close(self) -> None:
        for resource in (self._context, self._browser):
            if resource is None:
                continue
            try:
                resource.close()
            except PlaywrightError as exc:
                logger.warning("Error while closing browser resource: %s", exc)
        if self._playwright is not None:
            self._playwright.stop()
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None


__all__ = ["PlaywrightRenderer", "PlaywrightDocument", "RenderError", "session_slot"]
