"""Pytest fixtures for arXiv client tests."""

import pytest

from arxiv_client.client import ArxivClient
from arxiv_client.core.types import Query

from .fixtures.stub_transport import StubTransport, make_client


@pytest.fixture
def stub_transport() -> StubTransport:
    """Stub serving an effectively unlimited result set."""
    return StubTransport()


@pytest.fixture
def client(stub_transport) -> ArxivClient:
    """Client with page size 10, no throttling, fast retries."""
    return make_client(stub_transport)


@pytest.fixture
def query() -> Query:
    return Query(search_query="cat:cs.AI")
