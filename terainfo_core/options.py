"""
Option values injected into the extraction engine.

Nothing here reads the environment; the server config layer builds these
values and hands them to the provisioner, locator and extractor.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


MOBILE_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_7_1 like Mac OS X) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.1.2 "
    "Mobile/15E148 Safari/604.1"
)

MOBILE_HEADERS = {
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
}

WAIT_UNTIL_CHOICES = ("load", "domcontentloaded", "networkidle", "commit")


@dataclass(frozen=True)
class LaunchOptions:
    """Browser launch settings"""
    headless: bool = True
    executable_path: Optional[str] = None
    args: Tuple[str, ...] = ()

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headless": self.headless, "args": list(self.args)}
        if self.executable_path:
            kwargs["executable_path"] = self.executable_path
        return kwargs


@dataclass(frozen=True)
class MobileIdentity:
    """User agent, viewport and headers that make the site serve mobile markup"""
    user_agent: str = MOBILE_USER_AGENT
    width: int = 375
    height: int = 812
    device_scale_factor: float = 3
    is_mobile: bool = True
    has_touch: bool = True
    extra_headers: Dict[str, str] = field(default_factory=lambda: dict(MOBILE_HEADERS))

    def context_args(self) -> Dict[str, Any]:
        return {
            "user_agent": self.user_agent,
            "viewport": {"width": self.width, "height": self.height},
            "device_scale_factor": self.device_scale_factor,
            "is_mobile": self.is_mobile,
            "has_touch": self.has_touch,
            "extra_http_headers": dict(self.extra_headers),
        }


@dataclass(frozen=True)
class NavigationOptions:
    wait_until: str = "networkidle"
    timeout_ms: int = 30000

    def __post_init__(self):
        if self.wait_until not in WAIT_UNTIL_CHOICES:
            raise ValueError(f"wait_until must be one of {WAIT_UNTIL_CHOICES}, got {self.wait_until!r}")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")


@dataclass(frozen=True)
class LocateBudget:
    """How long the locator keeps retrying before giving up"""
    max_attempts: int = 10
    per_attempt_delay_ms: int = 2000
    settle_delay_ms: int = 3000

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.per_attempt_delay_ms < 0 or self.settle_delay_ms < 0:
            raise ValueError("delays must not be negative")


@dataclass(frozen=True)
class TargetSite:
    """The site the engine is tuned for"""
    name_token: str = "terabox"
    domains: Tuple[str, ...] = ("terabox.com", "1024terabox.com")

    def matches_host(self, host: Optional[str]) -> bool:
        if not host:
            return False
        host = host.lower().rstrip(".")
        for domain in self.domains:
            domain = domain.lower()
            if host == domain or host.endswith("." + domain):
                return True
        return False

    def looks_like_site(self, markup: Optional[str]) -> bool:
        return bool(markup) and self.name_token.lower() in markup.lower()
