"""Application configuration for terainfo server"""

import os
import shutil
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from terainfo_core import (
    Extractor,
    LaunchOptions,
    LocateBudget,
    NavigationOptions,
    TargetSite,
)

load_dotenv()

BROWSER_CANDIDATES = ("chromium-browser", "chromium", "google-chrome")

BASE_CHROME_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-renderer-backgrounding",
    "--disable-features=TranslateUI",
    "--disable-extensions",
]
NO_SANDBOX_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def find_browser_executable() -> Optional[str]:
    """First Chromium-like browser found on PATH, or None."""
    for name in BROWSER_CANDIDATES:
        path = shutil.which(name)
        if path:
            return path
    return None


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(part.strip().lower() for part in value.split(",") if part.strip())


@dataclass
class Config:
    """Application configuration"""
    api_port: int = int(os.getenv("TERAINFO_API_PORT", os.getenv("PORT", "3000")))
    headless: bool = os.getenv("TERAINFO_HEADLESS", "true").lower() == "true"
    # Empty: Playwright's bundled Chromium; "auto": search PATH
    browser_path: str = os.getenv("TERAINFO_BROWSER_PATH", "")
    no_sandbox: bool = os.getenv("TERAINFO_NO_SANDBOX", "true").lower() == "true"
    nav_timeout_ms: int = int(os.getenv("TERAINFO_NAV_TIMEOUT_MS", "30000"))
    wait_until: str = os.getenv("TERAINFO_WAIT_UNTIL", "networkidle")
    settle_ms: int = int(os.getenv("TERAINFO_SETTLE_MS", "3000"))
    max_attempts: int = int(os.getenv("TERAINFO_MAX_ATTEMPTS", "10"))
    retry_delay_ms: int = int(os.getenv("TERAINFO_RETRY_DELAY_MS", "2000"))
    allowed_domains: str = os.getenv("TERAINFO_ALLOWED_DOMAINS", "terabox.com,1024terabox.com")
    site_token: str = os.getenv("TERAINFO_SITE_TOKEN", "terabox")
    log_level: str = os.getenv("TERAINFO_LOG_LEVEL", "INFO")

    def resolve_browser_path(self) -> Optional[str]:
        if self.browser_path.lower() == "auto":
            return find_browser_executable()
        return self.browser_path or None

    def launch_options(self) -> LaunchOptions:
        args: List[str] = list(BASE_CHROME_ARGS)
        if self.no_sandbox:
            args = NO_SANDBOX_ARGS + args
        return LaunchOptions(
            headless=self.headless,
            executable_path=self.resolve_browser_path(),
            args=tuple(args),
        )

    def navigation_options(self) -> NavigationOptions:
        return NavigationOptions(wait_until=self.wait_until, timeout_ms=self.nav_timeout_ms)

    def locate_budget(self) -> LocateBudget:
        return LocateBudget(
            max_attempts=self.max_attempts,
            per_attempt_delay_ms=self.retry_delay_ms,
            settle_delay_ms=self.settle_ms,
        )

    def target_site(self) -> TargetSite:
        return TargetSite(name_token=self.site_token, domains=_split_csv(self.allowed_domains))

    def build_extractor(self) -> Extractor:
        return Extractor.create(
            launch_options=self.launch_options(),
            navigation=self.navigation_options(),
            budget=self.locate_budget(),
            site=self.target_site(),
        )


# Global config instance
config = Config()
