import pytest

from botwire.client import BotApi
from tests.factories import FakeTransport


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api(fake_transport: FakeTransport) -> BotApi:
    return BotApi(fake_transport)
