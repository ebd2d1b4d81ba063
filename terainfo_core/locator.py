"""
Content Locator - find the "duration | size" fragment on a rendered page

Strategies, in order:
1. Selector cascade: a fixed list of selectors from most specific to least
   specific, each element checked with the same text predicate. Retried
   within a bounded budget while client-side rendering catches up.
2. Page check: the markup must mention the site before any fallback runs.
3. Regex fallback over the whole rendered body text.

Usage:
    locator = ContentLocator(budget=LocateBudget(max_attempts=5))
    fragment = await locator.locate(page)
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidPage, NotFoundError
from .models import CandidateFragment, SourceStrategy
from .options import LocateBudget, TargetSite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorRule:
    selector: str
    strategy: SourceStrategy


SELECTOR_RULES: Tuple[SelectorRule, ...] = (
    SelectorRule('div[data-v-5380f836].size', SourceStrategy.STRUCTURAL),
    SelectorRule('div.size', SourceStrategy.ATTRIBUTE_PATTERN),
    SelectorRule('.size', SourceStrategy.ATTRIBUTE_PATTERN),
    SelectorRule('[class*="size"]', SourceStrategy.ATTRIBUTE_PATTERN),
    SelectorRule('div[data-v-5380f836]', SourceStrategy.ATTRIBUTE_PATTERN),
)

SIZE_UNITS = ("KB", "MB", "GB")

FALLBACK_PATTERN = re.compile(
    r"(\d{2}:\d{2}:\d{2}|\d{1,2}:\d{2})\s*\|\s*(\d+(?:\.\d+)?\s*(?:KB|MB|GB))",
    re.IGNORECASE,
)

ELEMENT_TEXT_JS = "el => el.textContent"
BODY_TEXT_JS = "() => document.body ? document.body.innerText : ''"


def is_candidate_text(text: Optional[str]) -> bool:
    """Cheap check that text is shaped like "duration | size"."""
    if not text:
        return False
    return any(unit in text for unit in SIZE_UNITS) and ":" in text


class ContentLocator:
    def __init__(
        self,
        budget: Optional[LocateBudget] = None,
        site: Optional[TargetSite] = None,
        rules: Tuple[SelectorRule, ...] = SELECTOR_RULES,
    ):
        self.budget = budget or LocateBudget()
        self.site = site or TargetSite()
        self.rules = rules

    async def locate(self, page) -> CandidateFragment:
        """
        Run the cascade against a page that has already been navigated.

        Raises:
            InvalidPage: selectors found nothing and the markup does not
                mention the target site
            NotFoundError: selectors and the regex fallback both failed
        """
        if self.budget.settle_delay_ms:
            logger.debug(f"Waiting {self.budget.settle_delay_ms}ms for dynamic content")
            await page.wait_for_timeout(self.budget.settle_delay_ms)

        fragment = await self._scan_with_retries(page)
        if fragment is not None:
            return fragment

        logger.info("Selector cascade exhausted, attempting regex fallback")
        return await self._regex_fallback(page)

    async def _scan_with_retries(self, page) -> Optional[CandidateFragment]:
        max_attempts = self.budget.max_attempts
        attempt = 0
        while attempt < max_attempts:
            try:
                fragment = await self.scan_once(page)
                if fragment is not None:
                    return fragment
                logger.info(f"Retry {attempt + 1}/{max_attempts}: size info not found, waiting...")
            except Exception as e:
                logger.info(f"Retry {attempt + 1}/{max_attempts}: error finding size info: {e}")
            attempt += 1
            if attempt < max_attempts and self.budget.per_attempt_delay_ms:
                await page.wait_for_timeout(self.budget.per_attempt_delay_ms)
        return None

    async def scan_once(self, page) -> Optional[CandidateFragment]:
        """One pass over every selector rule; first qualifying element wins."""
        for rule in self.rules:
            elements = await page.query_selector_all(rule.selector)
            for element in elements:
                text = await page.evaluate(ELEMENT_TEXT_JS, element)
                text = (text or "").strip()
                if is_candidate_text(text):
                    logger.info(f'Found size info with selector "{rule.selector}": {text}')
                    return CandidateFragment(
                        text=text,
                        source_strategy=rule.strategy,
                        selector=rule.selector,
                    )
        return None

    async def _regex_fallback(self, page) -> CandidateFragment:
        try:
            markup = await page.content()
        except Exception as e:
            raise NotFoundError(f"Could not read page content: {e}") from e

        if not self.site.looks_like_site(markup):
            raise InvalidPage(
                f"Page does not appear to be a valid {self.site.name_token} page "
                "or failed to load properly"
            )

        try:
            body_text = await page.evaluate(BODY_TEXT_JS)
        except Exception as e:
            raise NotFoundError(f"Could not read page text: {e}") from e

        match = FALLBACK_PATTERN.search(body_text or "")
        if match:
            logger.info(f"Found size info using regex pattern: {match.group(0)}")
            return CandidateFragment(
                text=match.group(0),
                source_strategy=SourceStrategy.REGEX_FALLBACK,
            )

        raise NotFoundError(
            "Could not find file size and duration information. The content may "
            "not have loaded properly or the page structure has changed."
        )
