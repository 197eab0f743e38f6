"""Fixtures for HTTP surface tests against the seeded demo data."""

import pytest
from fastapi.testclient import TestClient

from storefront.api.app import create_app
from storefront.seed import DEMO_PASSWORD, seed_demo_data


@pytest.fixture(scope="session")
def app():
    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def seeded():
    return seed_demo_data()


@pytest.fixture()
def token_for(client):
    """Obtain a bearer token through the password grant."""

    def obtain(username, password=DEMO_PASSWORD):
        response = client.post(
            "/oauth2/token",
            data={"grant_type": "password", "username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()["access_token"]

    return obtain


@pytest.fixture()
def auth(seeded, token_for):
    """Authorization headers for the demo users, keyed by role."""
    return {
        "client": {"Authorization": f"Bearer {token_for('maria@gmail.com')}"},
        "admin": {"Authorization": f"Bearer {token_for('alex@gmail.com')}"},
        "admin_only": {"Authorization": f"Bearer {token_for('ana@gmail.com')}"},
    }
