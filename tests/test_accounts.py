"""Registration and login."""

import bcrypt

from blogdesk.models import User
from blogdesk.services.accounts import hash_password, verify_password


def _register(client, **overrides):
    body = {"username": "ana", "email": "ana@example.com", "password": "pw-123"}
    body.update(overrides)
    return client.post("/register", json=body)


class TestPasswordHashing:

    def test_hash_is_salted(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_verify(self):
        hashed = hash_password("correct horse", rounds=4)
        assert verify_password("correct horse", hashed) is True
        assert verify_password("wrong horse", hashed) is False

    def test_verify_with_corrupt_hash_is_false(self):
        assert verify_password("x", "not-a-bcrypt-hash") is False


class TestRegister:

    def test_register_defaults_to_user_role(self, app, client):
        resp = _register(client)
        assert resp.status_code == 201
        assert resp.get_json() == {"message": "User registered successfully!"}

        with app.app_context():
            user = User.query.filter_by(username="ana").first()
            assert user.role == "User"
            assert user.is_verified is False
            assert user.password != "pw-123"
            assert bcrypt.checkpw(b"pw-123", user.password.encode())

    def test_register_with_explicit_role(self, app, client):
        assert _register(client, role="Editor").status_code == 201
        with app.app_context():
            assert User.query.filter_by(username="ana").first().role == "Editor"

    def test_duplicate_email(self, client):
        assert _register(client).status_code == 201
        resp = _register(client, username="other")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Email already registered"

    def test_duplicate_username(self, client):
        assert _register(client).status_code == 201
        resp = _register(client, email="other@example.com")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Username already registered"

    def test_missing_fields(self, client):
        resp = client.post("/register", json={"username": "ana"})
        assert resp.status_code == 400
        assert "email" in resp.get_json()["error"]
        assert "password" in resp.get_json()["error"]

    def test_no_json_body(self, client):
        resp = client.post("/register", data="nope", content_type="text/plain")
        assert resp.status_code == 400

    def test_unknown_role(self, client):
        resp = _register(client, role="Superuser")
        assert resp.status_code == 400

    def test_response_never_echoes_password(self, client):
        resp = _register(client)
        assert "pw-123" not in resp.get_data(as_text=True)


class TestLogin:

    def test_login_returns_token(self, client):
        _register(client)
        resp = client.post("/login", json={"email": "ana@example.com", "password": "pw-123"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["message"] == "Login successful"
        assert body["token"]

    def test_unknown_email(self, client):
        resp = client.post("/login", json={"email": "ghost@example.com", "password": "x"})
        assert resp.status_code == 404

    def test_wrong_password(self, client):
        _register(client)
        resp = client.post("/login", json={"email": "ana@example.com", "password": "wrong"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Invalid credentials"
        assert "token" not in resp.get_json()

    def test_missing_credentials(self, client):
        resp = client.post("/login", json={"email": "ana@example.com"})
        assert resp.status_code == 400
