"""Shared fixtures for storefront tests.

``FakeLessonShop`` answers the lesson shop API in memory through
``httpx.MockTransport`` and records every request it sees.
"""

import asyncio
import json
from uuid import uuid4

import httpx
import pytest
from storefront.client import LessonShopClient

BASE_URL = "http://lessonshop.test"


class FakeLessonShop:
    def __init__(self):
        self.lessons = {}
        self.orders = []
        self.requests = []
        # "METHOD /path-prefix" -> status code, or an httpx.TransportError instance
        self.failures = {}
        # "METHOD /path-prefix" -> seconds to wait, or an asyncio.Event to wait on
        self.waits = {}

    def add_lesson(self, subject, location, price, spaces, **extra):
        lesson_id = str(uuid4())
        self.lessons[lesson_id] = {
            "id": lesson_id,
            "subject": subject,
            "location": location,
            "price": price,
            "spaces": spaces,
            "image": extra.get("image"),
            "icon": extra.get("icon"),
        }
        return lesson_id

    def fail(self, route, outcome=500):
        self.failures[route] = outcome

    def delay(self, route, seconds):
        self.waits[route] = seconds

    def hold(self, route):
        """Keep matching requests waiting until the returned event is set."""
        gate = asyncio.Event()
        self.waits[route] = gate
        return gate

    def calls(self, method, prefix=""):
        return [(m, path, body) for m, path, body in self.requests if m == method and path.startswith(prefix)]

    @staticmethod
    def _match(table, method, path):
        for route, outcome in table.items():
            route_method, _, route_path = route.partition(" ")
            if route_method == method and path.startswith(route_path):
                return outcome
        return None

    async def handle_async(self, request: httpx.Request) -> httpx.Response:
        wait = self._match(self.waits, request.method, request.url.path)
        if isinstance(wait, asyncio.Event):
            await wait.wait()
        elif wait is not None:
            await asyncio.sleep(wait)
        return self.handle(request)

    def handle(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        body = json.loads(request.content) if request.content else None
        self.requests.append((method, path, body))

        outcome = self._match(self.failures, method, path)
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is not None:
            return httpx.Response(outcome, json={"detail": "boom"})

        if method == "GET" and path == "/lessons":
            return httpx.Response(200, json=list(self.lessons.values()))

        if method == "GET" and path == "/search":
            text = request.url.params.get("q", "")
            if not text:
                return httpx.Response(400, json={"detail": "Search query (q) is required"})
            text = text.lower()
            matches = [
                lesson
                for lesson in self.lessons.values()
                if text in lesson["subject"].lower() or text in lesson["location"].lower()
            ]
            return httpx.Response(200, json=matches)

        if method == "PUT" and path.startswith("/lessons/"):
            lesson_id = path.rsplit("/", 1)[-1]
            if lesson_id not in self.lessons:
                return httpx.Response(404, json={"detail": "Lesson not found"})
            self.lessons[lesson_id].update(body)
            return httpx.Response(200, json={"status": "ok"})

        if method == "POST" and path == "/orders":
            order_id = str(uuid4())
            self.orders.append({"id": order_id, **body})
            return httpx.Response(201, json={"order_id": order_id, "message": "Order created successfully"})

        return httpx.Response(404, json={"detail": "Not Found"})


@pytest.fixture()
def empty_shop():
    return FakeLessonShop()


@pytest.fixture()
def shop(empty_shop):
    shop = empty_shop
    shop.add_lesson("Mathematics", "Hendon", 100, 5)
    shop.add_lesson("English Language", "Colindale", 90, 5)
    shop.add_lesson("Chemistry", "Brent Cross", 115, 1)
    return shop


@pytest.fixture()
def client(shop):
    client = LessonShopClient(BASE_URL, transport=httpx.MockTransport(shop.handle_async))
    yield client
    asyncio.run(client.aclose())


@pytest.fixture()
def client_factory(shop):
    """Build extra clients on the same fake shop, e.g. a second customer."""
    clients = []

    def factory():
        client = LessonShopClient(BASE_URL, transport=httpx.MockTransport(shop.handle_async))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())
