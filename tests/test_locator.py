"""Tests for the content locator cascade."""

import pytest

from terainfo_core.errors import InvalidPage, NotFoundError
from terainfo_core.locator import ContentLocator, SELECTOR_RULES, is_candidate_text
from terainfo_core.models import SourceStrategy
from terainfo_core.options import LocateBudget

from tests.mocks.fake_browser import FakePage, UNRELATED_MARKUP

STRUCTURAL = 'div[data-v-5380f836].size'
GENERIC = 'div.size'


def make_locator(max_attempts=3):
    return ContentLocator(LocateBudget(max_attempts=max_attempts, per_attempt_delay_ms=5, settle_delay_ms=7))


class TestCandidatePredicate:

    def test_requires_unit_and_colon(self):
        assert is_candidate_text("00:08:50 | 55.3MB")
        assert not is_candidate_text("55.3MB")
        assert not is_candidate_text("00:08:50")
        assert not is_candidate_text("")
        assert not is_candidate_text(None)

    def test_rules_go_from_specific_to_generic(self):
        assert SELECTOR_RULES[0].selector == STRUCTURAL
        assert SELECTOR_RULES[0].strategy is SourceStrategy.STRUCTURAL
        assert [r.selector for r in SELECTOR_RULES][1:] == [
            'div.size', '.size', '[class*="size"]', 'div[data-v-5380f836]',
        ]


class TestSelectorCascade:

    @pytest.mark.asyncio
    async def test_first_attempt_match(self):
        page = FakePage().render(STRUCTURAL, "  00:08:50 | 55.3MB \n")
        fragment = await make_locator().locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"
        assert fragment.source_strategy is SourceStrategy.STRUCTURAL
        assert fragment.selector == STRUCTURAL
        # settle delay only
        assert page.wait_calls == [7]

    @pytest.mark.asyncio
    async def test_higher_priority_selector_wins_within_attempt(self):
        page = (FakePage()
                .render(GENERIC, "1:00 | 5MB")
                .render(STRUCTURAL, "00:08:50 | 55.3MB"))
        fragment = await make_locator().locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"
        assert fragment.selector == STRUCTURAL

    @pytest.mark.asyncio
    async def test_earlier_attempt_wins_over_later_rendered_priority(self):
        # The generic selector is there from the start; the specific one
        # only renders after the second retry delay.
        page = (FakePage()
                .render(GENERIC, "1:00 | 5MB")
                .render(STRUCTURAL, "00:08:50 | 55.3MB", after_waits=3))
        fragment = await make_locator().locate(page)
        assert fragment.text == "1:00 | 5MB"
        assert fragment.selector == GENERIC
        assert fragment.source_strategy is SourceStrategy.ATTRIBUTE_PATTERN

    @pytest.mark.asyncio
    async def test_content_rendered_late_is_found_on_retry(self):
        page = FakePage().render(STRUCTURAL, "00:08:50 | 55.3MB", after_waits=2)
        fragment = await make_locator().locate(page)
        assert fragment.selector == STRUCTURAL
        assert page.wait_calls == [7, 5]

    @pytest.mark.asyncio
    async def test_skips_elements_without_duration_shape(self):
        page = (FakePage()
                .render(STRUCTURAL, "55.3MB")
                .render(STRUCTURAL, "")
                .render(STRUCTURAL, "00:08:50 | 55.3MB"))
        fragment = await make_locator().locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"

    @pytest.mark.asyncio
    async def test_transient_query_errors_count_as_failed_attempts(self):
        page = FakePage().render(STRUCTURAL, "00:08:50 | 55.3MB").fail_queries(2)
        fragment = await make_locator(max_attempts=3).locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"
        assert page.wait_calls == [7, 5, 5]

    @pytest.mark.asyncio
    async def test_detached_element_is_transient(self):
        page = FakePage().render(STRUCTURAL, "00:08:50 | 55.3MB", detached=True)
        fragment = await make_locator().locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"
        assert page.wait_calls == [7, 5]


class TestExhaustion:

    @pytest.mark.asyncio
    async def test_unrelated_page_is_invalid_page(self):
        page = FakePage(markup=UNRELATED_MARKUP, body_text="00:08:50 | 55.3MB")
        with pytest.raises(InvalidPage):
            await make_locator(max_attempts=3).locate(page)
        assert len(page.queries) == 3 * len(SELECTOR_RULES)
        # settle + a delay between attempts, none after the last
        assert page.wait_calls == [7, 5, 5]

    @pytest.mark.asyncio
    async def test_regex_fallback_on_body_text(self):
        page = FakePage(body_text="My video\n00:08:50 | 55.3MB\nDownload")
        fragment = await make_locator(max_attempts=2).locate(page)
        assert fragment.text == "00:08:50 | 55.3MB"
        assert fragment.source_strategy is SourceStrategy.REGEX_FALLBACK
        assert fragment.selector is None

    @pytest.mark.asyncio
    async def test_not_found_when_fallback_misses(self):
        page = FakePage(body_text="Nothing to see here")
        with pytest.raises(NotFoundError):
            await make_locator(max_attempts=2).locate(page)

    @pytest.mark.asyncio
    async def test_site_token_is_case_insensitive(self):
        page = FakePage(markup="<html>TERABOX</html>", body_text="3:45 | 120KB")
        fragment = await make_locator(max_attempts=1).locate(page)
        assert fragment.text == "3:45 | 120KB"
