"""Fixtures for tests against the assembled web app.

The app routes each request into the catalogue or ordering domain context
by URL prefix, so these tests do not push a context of their own.
"""

import pytest
from fastapi.testclient import TestClient


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
def client(web_app):
    return TestClient(web_app.app)
