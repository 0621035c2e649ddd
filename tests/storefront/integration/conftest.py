"""Fixtures for running the storefront against the real web app in-process.

Requests go through ``httpx.ASGITransport`` so the app's domain-context
middleware, routers and Protean handlers all take part.
"""

import asyncio

import httpx
import pytest
from storefront.client import LessonShopClient


@pytest.fixture(scope="session")
def web_app():
    import app

    return app


def _reset(domain):
    with domain.domain_context():
        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        for _, broker in current_domain.brokers.items():
            broker._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def clean_stores(web_app):
    yield

    _reset(web_app.catalogue)
    _reset(web_app.ordering)


@pytest.fixture()
def seed(web_app):
    """Add lessons to the catalogue and return their ids by subject."""

    def seed(*lessons):
        from catalogue.lesson.lesson import Lesson
        from catalogue.lesson.seed import seed_lessons
        from protean.utils.globals import current_domain

        with web_app.catalogue.domain_context():
            seed_lessons(lessons=lessons)
            return {lesson.subject: str(lesson.id) for lesson in current_domain.repository_for(Lesson).list_all()}

    return seed


@pytest.fixture()
def api_client_factory(web_app):
    clients = []

    def factory():
        client = LessonShopClient("http://testserver", transport=httpx.ASGITransport(app=web_app.app))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture()
def stored_lesson(web_app):
    def lookup(lesson_id):
        from catalogue.lesson.lesson import Lesson
        from protean.utils.globals import current_domain

        with web_app.catalogue.domain_context():
            return current_domain.repository_for(Lesson).get(lesson_id)

    return lookup


@pytest.fixture()
def stored_orders(web_app):
    def orders():
        from ordering.order.order import Order
        from protean.utils.globals import current_domain

        with web_app.ordering.domain_context():
            return current_domain.repository_for(Order)._dao.query.all().items

    return orders
