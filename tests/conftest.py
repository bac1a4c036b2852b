"""Pytest fixtures for the storefront tests."""

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.main import create_app

PRINTS_URL = "https://sheets.test/prints.csv"
LIMITED_URL = "https://sheets.test/limited.csv"
ORDER_HOOK = "https://hooks.test/orders"
CONTACT_HOOK = "https://hooks.test/contact"
INQUIRY_HOOK = "https://hooks.test/inquiry"

PRINTS_CSV = (
    "id,title,price,description,full_description,image_filename,category\r\n"
    '1,Sunset Serenity,280,"Warm tones, silhouetted grass",,1.jpg,Landscape\r\n'
    '3,"Tiger, Portrait",420,Bengal tiger,A long description,3.jpg,Big Cats\r\n'
    "\r\n"
)

LIMITED_CSV = (
    "id,title,price,description,category,size\n"
    "le-001,Black Deer,450,Limited edition black deer print,Wildlife,A3\n"
    "le-002,Tiger Portrait,520,Majestic tiger,Wildlife,A2\n"
)


class FakeWeb:
    """Routes outbound requests to canned handlers and records them"""

    def __init__(self):
        self.handlers = {}
        self.requests: list[httpx.Request] = []

    def on(self, url, handler):
        self.handlers[url] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        handler = self.handlers.get(url)
        if handler is None:
            return httpx.Response(404, text="not found")
        return handler(request)

    def requests_to(self, url):
        return [r for r in self.requests if str(r.url) == url]


@pytest.fixture
def web():
    fake = FakeWeb()
    fake.on(PRINTS_URL, lambda r: httpx.Response(200, text=PRINTS_CSV))
    fake.on(LIMITED_URL, lambda r: httpx.Response(200, text=LIMITED_CSV))
    fake.on(ORDER_HOOK, lambda r: httpx.Response(200, json={"result": "success"}))
    fake.on(CONTACT_HOOK, lambda r: httpx.Response(200, json={"result": "success"}))
    fake.on(INQUIRY_HOOK, lambda r: httpx.Response(200, json={"result": "success"}))
    return fake


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        prints_sheet_url=PRINTS_URL,
        limited_edition_sheet_url=LIMITED_URL,
        order_webhook_url=ORDER_HOOK,
        contact_webhook_url=CONTACT_HOOK,
        inquiry_webhook_url=INQUIRY_HOOK,
        load_catalogs_on_startup=False,
    )


@pytest.fixture
def make_client(web):
    """Build a TestClient for the given settings, with sheets loaded"""
    clients = []

    def _make(settings, refresh=True):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(web))
        client = TestClient(create_app(settings, http_client=http_client))
        client.__enter__()
        clients.append(client)
        if refresh:
            client.post("/api/catalogs/prints/refresh")
            client.post("/api/catalogs/limited-edition/refresh")
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)
