#!/usr/bin/env python3
import asyncio
import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import NavigationTimeout
from .options import NavigationOptions

logger = logging.getLogger(__name__)


async def navigate(page, url: str, options: NavigationOptions):
    """
    Open url and wait for the readiness condition.

    Raises NavigationTimeout when the page does not get there within
    options.timeout_ms, or when the browser reports a navigation error.
    No retry happens here.
    """
    logger.info(f"Navigating to {url} (wait_until={options.wait_until}, timeout={options.timeout_ms}ms)")
    try:
        response = await page.goto(
            url,
            wait_until=options.wait_until,
            timeout=options.timeout_ms,
        )
    except (PlaywrightTimeoutError, asyncio.TimeoutError) as e:
        raise NavigationTimeout(
            f"Navigation timeout after {options.timeout_ms}ms: {e}"
        ) from e
    except PlaywrightError as e:
        raise NavigationTimeout(f"Navigation failed: {e}") from e

    if response is not None and not response.ok:
        logger.warning(f"Navigation to {url} returned status {response.status}")
    return response
