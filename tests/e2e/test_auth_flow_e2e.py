"""End-to-end tests for registration, login and sessions."""

from datetime import timedelta
from uuid import uuid4

from inkwell.config import Settings
from inkwell.util.jwt import create_token
from tests.e2e.forms import login, signup


class TestRegister:
    def test_register_sets_cookie_and_redirects(self, client):
        # Act
        response = signup(client, "alice")

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == "/dashboard"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("token=")
        assert "HttpOnly" in cookie
        assert "samesite=lax" in cookie.lower()
        assert "Path=/" in cookie
        assert "Max-Age=3600" in cookie

    def test_registered_user_sees_dashboard(self, client):
        signup(client, "alice")

        response = client.get("/dashboard")

        assert response.status_code == 200
        assert "Hello, Alice" in response.text

    def test_duplicate_registration_is_rejected(self, client):
        # Arrange
        signup(client, "alice")

        # Act
        response = signup(client, "alice")

        # Assert
        assert response.status_code == 400
        assert "set-cookie" not in response.headers

    def test_invalid_email_is_rejected(self, client):
        response = client.post(
            "/register",
            data={
                "username": "alice",
                "email": "nope",
                "password": "secret123",
                "name": "Alice",
            },
        )

        assert response.status_code == 400
        assert "valid email" in response.text

    def test_missing_field_is_rejected(self, client):
        response = client.post(
            "/register",
            data={"username": "alice", "email": "alice@example.com", "name": "Alice"},
        )

        assert response.status_code == 400


class TestLogin:
    def test_login_sets_cookie(self, client):
        # Arrange
        signup(client, "alice")

        # Act
        response = login(client, "alice")

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == "/dashboard"
        assert client.get("/dashboard").status_code == 200

    def test_wrong_password_is_rejected(self, client):
        signup(client, "alice")

        response = login(client, "alice", password="wrong-password")

        assert response.status_code == 400
        assert "Invalid email or password" in response.text
        assert "set-cookie" not in response.headers

    def test_unknown_email_gets_same_message(self, client):
        response = login(client, "nobody")

        assert response.status_code == 400
        assert "Invalid email or password" in response.text

    def test_logout_clears_cookie(self, client):
        # Arrange
        signup(client, "alice")

        # Act
        response = client.get("/logout")

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == "/login"
        assert client.get("/dashboard").headers["location"] == "/login"


class TestProtectedRoutes:
    def test_no_cookie_redirects_to_login(self, client):
        for path in ("/dashboard", "/profile"):
            response = client.get(path)

            assert response.status_code == 302
            assert response.headers["location"] == "/login"

    def test_mutations_without_cookie_redirect_to_login(self, client):
        response = client.post("/posts/create", data={"title": "T", "content": "C"})

        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    def test_tampered_token_redirects_to_login(self, client):
        # Arrange
        signup(client, "alice")
        token = client.cookies.get("token")
        client.cookies.clear()
        client.cookies.set("token", token[:-2] + ("AA" if token[-2:] != "AA" else "BB"))

        # Act
        response = client.get("/dashboard")

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    def test_expired_token_redirects_to_login(self, client):
        # Arrange
        expired = create_token(
            str(uuid4()), "alice@example.com", Settings().auth, ttl=timedelta(seconds=-5)
        )
        client.cookies.set("token", expired)

        # Act
        response = client.get("/dashboard")

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == "/login"


class TestPublicPages:
    def test_home_greets_logged_in_user(self, client):
        signup(client, "alice")

        response = client.get("/")

        assert response.status_code == 200
        assert "Welcome back, Alice" in response.text

    def test_home_ignores_stale_cookie(self, client):
        client.cookies.set("token", "garbage")

        response = client.get("/")

        assert response.status_code == 200
        assert "Create an account" in response.text

    def test_login_and_register_pages_render(self, client):
        assert client.get("/login").status_code == 200
        assert client.get("/register").status_code == 200
