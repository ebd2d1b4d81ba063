"""Tests for the session provisioner."""

import pytest

from terainfo_core.errors import SessionError
from terainfo_core.options import LaunchOptions, MobileIdentity, NavigationOptions
from terainfo_core.session import BrowserSession, SessionProvisioner

from tests.mocks.fake_browser import FakePlaywrightFactory


def make_provisioner(factory, launch_options=None):
    return SessionProvisioner(
        launch_options=launch_options,
        navigation=NavigationOptions(timeout_ms=12345),
        playwright_factory=factory,
    )


class TestAcquire:

    @pytest.mark.asyncio
    async def test_mobile_identity_applied(self):
        factory = FakePlaywrightFactory()
        session = await make_provisioner(factory).acquire()

        ctx = factory.chromium.browser.context_kwargs
        assert ctx["viewport"] == {"width": 375, "height": 812}
        assert ctx["is_mobile"] is True
        assert ctx["has_touch"] is True
        assert ctx["device_scale_factor"] == 3
        assert "iPhone" in ctx["user_agent"]
        assert ctx["extra_http_headers"]["Accept-Language"] == "en-US,en;q=0.9"

        assert session.page.default_timeout == 12345
        assert session.page.default_navigation_timeout == 12345

    @pytest.mark.asyncio
    async def test_launch_options_passed_through(self):
        factory = FakePlaywrightFactory()
        options = LaunchOptions(headless=False, executable_path="/opt/chromium/chrome", args=("--no-sandbox",))
        await make_provisioner(factory, options).acquire()
        assert factory.chromium.launch_kwargs == {
            "headless": False,
            "args": ["--no-sandbox"],
            "executable_path": "/opt/chromium/chrome",
        }

    @pytest.mark.asyncio
    async def test_no_executable_path_by_default(self):
        factory = FakePlaywrightFactory()
        await make_provisioner(factory).acquire()
        assert "executable_path" not in factory.chromium.launch_kwargs

    @pytest.mark.asyncio
    async def test_launch_failure_wrapped(self):
        cause = RuntimeError("Executable doesn't exist at /nope")
        factory = FakePlaywrightFactory(launch_error=cause)
        with pytest.raises(SessionError) as exc:
            await make_provisioner(factory).acquire()
        assert "Browser launch failed" in str(exc.value)
        assert exc.value.__cause__ is cause
        assert factory.log == ["playwright"]
        assert factory.started == 1

    @pytest.mark.asyncio
    async def test_page_failure_closes_browser(self):
        factory = FakePlaywrightFactory(page_error=RuntimeError("Target closed"))
        with pytest.raises(SessionError) as exc:
            await make_provisioner(factory).acquire()
        assert "Page creation failed" in str(exc.value)
        assert factory.log == ["context", "browser", "playwright"]


class TestRelease:

    @pytest.mark.asyncio
    async def test_closes_page_then_browser(self):
        factory = FakePlaywrightFactory()
        session = await make_provisioner(factory).acquire()
        await session.release()
        assert factory.log == ["page", "context", "browser", "playwright"]

    @pytest.mark.asyncio
    async def test_errors_swallowed_and_idempotent(self):
        factory = FakePlaywrightFactory(browser_close_error=RuntimeError("already closed"))
        session = await make_provisioner(factory).acquire()
        await session.release()
        await session.release()
        assert factory.log == ["page", "context", "browser", "playwright"]
        assert session.released is True

    @pytest.mark.asyncio
    async def test_empty_session_release(self):
        session = BrowserSession()
        await session.release()
        assert session.released is True


def test_identity_context_args_are_copies():
    identity = MobileIdentity()
    args = identity.context_args()
    args["extra_http_headers"]["X-Test"] = "1"
    assert "X-Test" not in identity.extra_headers
