import os
import sys
from typing import Any, List, Optional
from unittest.mock import MagicMock, patch

import pytest

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from bootstrap import AppContainer
from main import create_app
from src.adapters.easybusy import EasyBusyClient, UpstreamCall
from src.config import GatewayConfig
from src.tools.dispatcher import ToolDispatcher


class FakeEasyBusyClient:
    """Records upstream calls instead of sending them."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[UpstreamCall] = []

    async def acall(self, upstream: UpstreamCall) -> Any:
        self.calls.append(upstream)
        if self.error is not None:
            raise self.error
        return self.response


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    res = MagicMock()
    res.status_code = status_code
    res.text = text
    return res


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(api_key="test-key", base_url="https://easybusy.test")


@pytest.fixture
def fake_client() -> FakeEasyBusyClient:
    return FakeEasyBusyClient(response={"ok": True})


@pytest.fixture
def client(config, fake_client) -> TestClient:
    container = AppContainer(
        config=config, client=fake_client, dispatcher=ToolDispatcher(fake_client)
    )
    return TestClient(create_app(container))


@pytest.fixture
def upstream():
    """Patches requests.request in the client; answers 200 with an empty JSON object."""
    with patch("src.adapters.easybusy.requests.request") as request:
        request.return_value = make_response(200, "{}")
        yield request


@pytest.fixture
def easybusy(config, upstream) -> EasyBusyClient:
    return EasyBusyClient(config)
