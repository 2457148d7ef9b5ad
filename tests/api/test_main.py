"""Entry point wiring: real capabilities behind the default route table."""

import socket

from httpx import ASGITransport, AsyncClient

from stringsvc.main import build_app


async def test_build_app_serves_real_hostname():
    async with AsyncClient(
        transport=ASGITransport(app=build_app()), base_url="http://test",
    ) as c:
        response = await c.post("/hostname", json={})
    assert response.json() == {"v": socket.gethostname()}


async def test_build_app_uppercase_scenario():
    async with AsyncClient(
        transport=ASGITransport(app=build_app()), base_url="http://test",
    ) as c:
        ok = await c.post("/uppercase", json={"s": "hi"})
        empty = await c.post("/uppercase", json={"s": ""})
    assert ok.json() == {"v": "HI"}
    assert empty.json() == {"v": "", "err": "empty string"}
