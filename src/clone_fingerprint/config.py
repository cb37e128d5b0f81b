"""Configuration dataclasses for the template fingerprint comparer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_SERVER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537"
)
DEFAULT_URLS_FILE = "ListURLs.txt"


@dataclass(slots=True)
class RenderConfig:
    settle_delay_seconds: float = 5.0
    navigation_timeout: float = 30.0
    wait_until: str = "load"  # load|domcontentloaded|networkidle|commit
    browser: str = "chromium"  # chromium|firefox|webkit
    headless: bool = True
    user_agent: Optional[str] = None

    @property
    def settle_delay_ms(self) -> float:
        return max(self.settle_delay_seconds, 0.0) * 1000

    @property
    def navigation_timeout_ms(self) -> float:
        return max(self.navigation_timeout, 0.0) * 1000


@dataclass(slots=True)
class ReportConfig:
    precision: int = 2
    include_timings: bool = True
