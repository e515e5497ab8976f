"""Integration test fixtures — Elasticsearch backend with mock data.

Expects a single-node cluster with security disabled at localhost:9200::

    docker run -p 9200:9200 -e discovery.type=single-node \
        -e xpack.security.enabled=false docker.elastic.co/elasticsearch/elasticsearch:8.13.4

The test index is recreated once per session.
"""

from __future__ import annotations

import asyncio
import time

import httpx
import pytest

ES_HOST = "http://localhost:9200"
TEST_INDEX = "scout-test-articles"


def _wait_for_service(url: str, timeout: float = 30.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=10)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


async def _recreate_index(host: str, index: str) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        await client.delete(f"/{index}", params={"ignore_unavailable": "true"})

        mapping = {
            "mappings": {
                "properties": {
                    "id": {"type": "keyword"},
                    "title": {"type": "text"},
                    "tags": {"type": "keyword"},
                }
            }
        }
        resp = await client.put(f"/{index}", json=mapping)
        resp.raise_for_status()


async def _refresh(host: str, index: str) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        resp = await client.post(f"/{index}/_refresh")
        resp.raise_for_status()


@pytest.fixture(scope="session")
def elasticsearch_ready() -> str:
    """Ensure Elasticsearch is running and the test index exists."""
    if not _wait_for_service(ES_HOST):
        pytest.skip(f"Elasticsearch not available at {ES_HOST}")
    asyncio.run(_recreate_index(ES_HOST, TEST_INDEX))
    return ES_HOST


@pytest.fixture
def refresh(elasticsearch_ready: str):
    """Make recent writes searchable."""

    async def _do() -> None:
        await _refresh(elasticsearch_ready, TEST_INDEX)

    return _do
