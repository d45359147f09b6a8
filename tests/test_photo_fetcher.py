"""Tests for badge photo downloads over a local aiohttp server."""

import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from infrastructure.platform.photo_fetcher import PhotoFetcher


@pytest.fixture
async def photo_server():
    state = {"requests": 0, "in_flight": 0, "peak": 0}

    async def photo(request):
        state["requests"] += 1
        state["in_flight"] += 1
        state["peak"] = max(state["peak"], state["in_flight"])
        await asyncio.sleep(0.05)
        state["in_flight"] -= 1
        if request.match_info["name"] == "missing.jpg":
            raise web.HTTPNotFound()
        return web.Response(body=request.match_info["name"].encode())

    app = web.Application()
    app.router.add_get("/photos/{name}", photo)
    async with TestServer(app) as server:
        server.state = state
        yield server


async def test_fetch_many_downloads_concurrently(photo_server):
    urls = [str(photo_server.make_url(f"/photos/{i}.jpg")) for i in range(4)]

    photos = await PhotoFetcher(max_concurrent=4).fetch_many(urls)

    assert photos == {url: f"{i}.jpg".encode() for i, url in enumerate(urls)}
    assert photo_server.state["peak"] > 1


async def test_fetch_many_skips_failures_and_duplicates(photo_server):
    good = str(photo_server.make_url("/photos/a.jpg"))
    missing = str(photo_server.make_url("/photos/missing.jpg"))

    photos = await PhotoFetcher().fetch_many([good, None, good, missing, ""])

    assert photos == {good: b"a.jpg"}
    assert photo_server.state["requests"] == 2


async def test_fetch_many_without_urls_makes_no_requests(photo_server):
    assert await PhotoFetcher().fetch_many([None, ""]) == {}
    assert photo_server.state["requests"] == 0
