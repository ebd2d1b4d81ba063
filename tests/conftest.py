import pytest

from terainfo_core import ContentLocator, Extractor, LocateBudget
from terainfo_server.app import app as flask_app
from terainfo_server.routes.extract import EXTRACTOR_KEY

from tests.mocks.fake_browser import FakePage, FakeProvisioner


@pytest.fixture
def provisioner():
    """Provisioner whose pages already show a size fragment"""
    return FakeProvisioner(
        lambda: FakePage().render('div[data-v-5380f836].size', "00:08:50 | 55.3MB")
    )


@pytest.fixture
def client(provisioner):
    """Flask test client wired to an extractor over fake browser sessions"""
    original = flask_app.config[EXTRACTOR_KEY]
    flask_app.config[EXTRACTOR_KEY] = Extractor(
        provisioner=provisioner,
        locator=ContentLocator(budget=LocateBudget(max_attempts=1, per_attempt_delay_ms=0, settle_delay_ms=0)),
    )
    try:
        yield flask_app.test_client()
    finally:
        flask_app.config[EXTRACTOR_KEY] = original
