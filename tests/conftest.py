"""Shared fixtures: a fresh app with an in-memory database per test."""

import pytest

from blogdesk import create_app
from blogdesk.config import TestConfig
from blogdesk.extensions import db
from blogdesk.models import User


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app, client):
    """Register and log in a user; returns {"id", "username", "token", "headers"}."""

    def _make_user(username, role="User", password="secret-pass"):
        email = f"{username}@example.com"
        resp = client.post("/register", json={
            "username": username,
            "email": email,
            "password": password,
            "role": role,
        })
        assert resp.status_code == 201, resp.get_json()

        resp = client.post("/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        token = resp.get_json()["token"]

        with app.app_context():
            user_id = User.query.filter_by(username=username).first().id

        return {
            "id": user_id,
            "username": username,
            "email": email,
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _make_user


@pytest.fixture
def admin(make_user):
    return make_user("admin", role="Admin")


@pytest.fixture
def editor(make_user):
    return make_user("editor", role="Editor")


@pytest.fixture
def reader(make_user):
    return make_user("reader")


@pytest.fixture
def blog(client, admin):
    resp = client.post("/blogs", json={"title": "T", "content": "C"}, headers=admin["headers"])
    assert resp.status_code == 201
    return resp.get_json()["blog"]
