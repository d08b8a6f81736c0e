"""Every route that reads a JSON body rejects bodies that are not objects."""

import pytest

NOT_OBJECTS = [["a", "b"], "hello", 42]


def _assert_rejected(resp):
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Request body must be a JSON object"}


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_register(client, body):
    _assert_rejected(client.post("/register", json=body))


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_login(client, body):
    _assert_rejected(client.post("/login", json=body))


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_create_blog(client, admin, body):
    _assert_rejected(client.post("/blogs", json=body, headers=admin["headers"]))


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_assign_blog(client, admin, blog, body):
    _assert_rejected(client.put(f"/blogs/{blog['id']}/assign", json=body, headers=admin["headers"]))


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_edit_blog(client, admin, editor, blog, body):
    client.put(f"/blogs/{blog['id']}/assign", json={"editorId": editor["id"]}, headers=admin["headers"])
    _assert_rejected(client.put(f"/blogs/{blog['id']}", json=body, headers=editor["headers"]))


@pytest.mark.parametrize("body", NOT_OBJECTS)
def test_add_comment(client, reader, blog, body):
    _assert_rejected(client.post(f"/blogs/{blog['id']}/comments", json=body, headers=reader["headers"]))


def test_null_body_is_treated_as_empty(client):
    resp = client.post("/register", json=None)
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Missing required fields")
