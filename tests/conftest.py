"""Pytest configuration and fixtures."""

import pytest
import requests
from fastapi.testclient import TestClient
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from crud_dashboard.app.main import create_app
from crud_dashboard.app.services import PostStore, UserStore
from crud_dashboard.app.services.fixtures import seed_posts, seed_users
from dashboard_client import DashboardAPI

TEST_BASE_URL = "http://testserver/api"


class ASGIAdapter(BaseAdapter):
    """Transport adapter that hands ``requests`` traffic to a ``TestClient``.

    Lets ``DashboardAPI`` run its real ``requests`` code path against
    the application without opening a socket.
    """

    def __init__(self, client: TestClient) -> None:
        super().__init__()
        self.client = client

    def send(self, request, **kwargs):
        upstream = self.client.request(
            request.method,
            request.url,
            content=request.body,
            headers=dict(request.headers),
        )
        response = requests.Response()
        response.status_code = upstream.status_code
        response.reason = upstream.reason_phrase
        response.headers = CaseInsensitiveDict(upstream.headers)
        response._content = upstream.content
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def client() -> TestClient:
    """A running application with the seed users and posts."""
    with TestClient(create_app(seed_fixtures=True)) as test_client:
        yield test_client


@pytest.fixture
def empty_client() -> TestClient:
    with TestClient(create_app(seed_fixtures=False)) as test_client:
        yield test_client


@pytest.fixture
def api(client: TestClient) -> DashboardAPI:
    """A ``DashboardAPI`` wired to the test application."""
    session = requests.Session()
    session.mount("http://testserver", ASGIAdapter(client))
    return DashboardAPI(base_url=TEST_BASE_URL, session=session)


@pytest.fixture
def user_store() -> UserStore:
    return UserStore(seed_users())


@pytest.fixture
def post_store(user_store: UserStore) -> PostStore:
    return PostStore(user_store, seed_posts())
