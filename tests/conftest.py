import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import create_app


class FakeTimelineRepository:
    """Returns canned buckets and remembers the queries it was given."""

    def __init__(self, buckets=None, assets=None):
        self.buckets = buckets if buckets is not None else [("2024-01-01", 5), ("2024-02-01", 0)]
        self.assets = assets if assets is not None else ["asset-1", "asset-2"]
        self.queries = []

    async def get_time_buckets(self, query):
        self.queries.append(query)
        return self.buckets

    async def get_time_bucket(self, query):
        self.queries.append(query)
        return self.assets


@pytest.fixture
def repository():
    return FakeTimelineRepository()


@pytest.fixture
def app(repository):
    return create_app(repository)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def unconfigured_client():
    async with AsyncClient(transport=ASGITransport(app=create_app()), base_url="http://test") as ac:
        yield ac
