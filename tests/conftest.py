"""Shared test fixtures for pytest"""

import pytest
from fastapi.testclient import TestClient

from news_headlines_api.app.core.config import Settings
from news_headlines_api.app.main import create_app
from news_headlines_api.app.services.headline_service import HeadlineService


@pytest.fixture
def service():
    """Empty headline store"""
    return HeadlineService()


@pytest.fixture
def app(service):
    """Application serving the empty store"""
    return create_app(settings=Settings(seed_sample_data=False), headline_service=service)


@pytest.fixture
def client(app):
    """HTTP client for API testing"""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
