"""
Extraction Orchestrator

validate -> acquire session -> navigate -> locate -> parse -> release

The session is released exactly once on every path out of the
navigate/locate/parse block. Session acquisition and navigation are not
retried; only the locator retries, within its own budget.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Iterable, List, Optional

from .errors import ExtractionError
from .locator import ContentLocator
from .models import BatchItem, ExtractedRecord, ExtractionState
from .navigation import navigate
from .options import (
    LaunchOptions,
    LocateBudget,
    MobileIdentity,
    NavigationOptions,
    TargetSite,
)
from .parser import parse_fragment
from .session import SessionProvisioner
from .validation import validate_request

logger = logging.getLogger(__name__)

MAX_BATCH_URLS = 5


class Extractor:
    """Runs one extraction per call; holds no per-extraction state."""

    def __init__(
        self,
        provisioner,
        locator: Optional[ContentLocator] = None,
        navigation: Optional[NavigationOptions] = None,
        site: Optional[TargetSite] = None,
        parse: Callable[[str], ExtractedRecord] = parse_fragment,
    ):
        self.provisioner = provisioner
        self.site = site or TargetSite()
        self.locator = locator or ContentLocator(site=self.site)
        self.navigation = navigation or NavigationOptions()
        self.parse = parse

    @classmethod
    def create(
        cls,
        launch_options: Optional[LaunchOptions] = None,
        identity: Optional[MobileIdentity] = None,
        navigation: Optional[NavigationOptions] = None,
        budget: Optional[LocateBudget] = None,
        site: Optional[TargetSite] = None,
    ) -> "Extractor":
        navigation = navigation or NavigationOptions()
        site = site or TargetSite()
        return cls(
            provisioner=SessionProvisioner(launch_options, identity, navigation),
            locator=ContentLocator(budget=budget, site=site),
            navigation=navigation,
            site=site,
        )

    @asynccontextmanager
    async def _session_scope(self):
        session = await self.provisioner.acquire()
        try:
            yield session
        finally:
            try:
                await session.release()
            except Exception as e:
                logger.error(f"Error releasing browser session: {e}")

    async def extract(self, url: Any) -> ExtractedRecord:
        """
        Extract duration and file size from a target-site URL.

        Raises:
            ExtractionError: one of InvalidInput, SessionError,
                NavigationTimeout, InvalidPage, NotFoundError, or the base
                class for anything unexpected. `state` is the last state
                entered before the failure.
        """
        state = ExtractionState.VALIDATING
        try:
            request = validate_request(url, self.site)
            logger.info(f"Extracting info from: {request.url}")

            async with self._session_scope() as session:
                state = ExtractionState.SESSION_ACQUIRED
                await navigate(session.page, request.url, self.navigation)
                state = ExtractionState.NAVIGATED

                state = ExtractionState.LOCATING
                fragment = await self.locator.locate(session.page)
                record = self.parse(fragment.text)
                state = ExtractionState.PARSED

            logger.info(
                f"Successfully extracted file information ({fragment.source_strategy.value}): "
                f"duration={record.duration} size={record.file_size}"
            )
            return record
        except ExtractionError as e:
            if e.state is None:
                e.state = state.value
            logger.error(f"Extraction failed in state {e.state}: {e}")
            raise
        except Exception as e:
            logger.error(f"Unexpected error extracting {url!r}: {e}", exc_info=True)
            raise ExtractionError(f"Unexpected extraction error: {e}", state=state.value) from e

    async def extract_batch(self, urls: Iterable[Any]) -> List[BatchItem]:
        """Extract each URL in turn; one failure does not stop the rest."""
        results: List[BatchItem] = []
        urls = list(urls)
        for index, url in enumerate(urls, 1):
            logger.info(f"Batch item {index}/{len(urls)}: {url}")
            try:
                record = await self.extract(url)
                results.append(BatchItem(url=url, success=True, record=record))
            except ExtractionError as e:
                results.append(BatchItem(url=url, success=False, error=e))
        return results
