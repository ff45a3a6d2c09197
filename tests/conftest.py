import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from message_board_api.app.core.config import Settings
from message_board_api.app.main import create_app


@pytest.fixture
def make_app():
    """Build a fresh application (and empty message store) per call."""

    def _make(**overrides):
        return create_app(Settings(**overrides))

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
