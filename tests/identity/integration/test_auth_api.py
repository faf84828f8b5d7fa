"""Integration tests for authentication and account endpoints via TestClient."""

from protean import current_domain

from shopsmart.identity.account.account import Account


def _register(client, **overrides):
    body = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "s3cret-pass",
        "address": "12 Market Street",
        "phone": "555-0100",
    }
    body.update(overrides)
    return client.post("/api/auth/register", json=body)


class TestRegisterAndLogin:
    def test_register_returns_profile_and_token(self, client):
        response = _register(client)
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "jane@example.com"
        assert data["role"] == "user"
        assert data["token"]
        assert "password_hash" not in data

    def test_duplicate_email(self, client):
        _register(client)
        response = _register(client, email="JANE@example.com")
        assert response.status_code == 400
        assert response.json()["kind"] == "ValidationError"

    def test_missing_field(self, client):
        response = client.post("/api/auth/register", json={"email": "x@example.com"})
        assert response.status_code == 400

    def test_login(self, client):
        _register(client)
        response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "s3cret-pass"})
        assert response.status_code == 200
        assert response.json()["token"]

    def test_login_bad_password(self, client):
        _register(client)
        response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["kind"] == "Unauthenticated"

    def test_register_overlong_password(self, client):
        response = _register(client, password="p" * 80)
        assert response.status_code == 400
        assert response.json()["kind"] == "ValidationError"

    def test_register_overlong_multibyte_password(self, client):
        response = _register(client, password="\u00e9" * 40)
        assert response.status_code == 400
        assert "password" in response.json()["details"]

    def test_login_overlong_password(self, client):
        _register(client)
        response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "x" * 80})
        assert response.status_code == 401
        assert response.json()["kind"] == "Unauthenticated"


class TestProfile:
    def test_requires_token(self, client):
        response = client.get("/api/auth/profile")
        assert response.status_code == 401
        assert response.json()["error"] == "Not authorized, no token"

    def test_rejects_garbage_token(self, client):
        response = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_rejects_token_of_deleted_account(self, client, make_account, auth_headers):
        account = make_account()
        headers = auth_headers(account)
        current_domain.repository_for(Account)._dao.delete(account)
        assert client.get("/api/auth/profile", headers=headers).status_code == 401

    def test_read_and_update(self, client, make_account, auth_headers):
        account = make_account()
        headers = auth_headers(account)

        assert client.get("/api/auth/profile", headers=headers).json()["id"] == str(account.id)

        response = client.put("/api/auth/profile", json={"phone": "555-0199", "name": ""}, headers=headers)
        assert response.status_code == 200
        assert response.json()["phone"] == "555-0199"
        assert response.json()["name"] == account.name

    def test_verify_password(self, client, make_account, auth_headers):
        headers = auth_headers(make_account())
        ok = client.post("/api/auth/verify-password", json={"password": "s3cret-pass"}, headers=headers)
        bad = client.post("/api/auth/verify-password", json={"password": "wrong"}, headers=headers)
        assert ok.status_code == 200
        assert bad.status_code == 401


class TestUserAdministration:
    def test_list_requires_admin(self, client, make_account, auth_headers):
        response = client.get("/api/users", headers=auth_headers(make_account()))
        assert response.status_code == 403
        assert response.json()["kind"] == "Forbidden"

    def test_admin_lists_users_with_details(self, client, make_admin, make_account, auth_headers):
        admin = make_admin()
        make_account()
        response = client.get("/api/users", headers=auth_headers(admin))
        assert response.status_code == 200
        users = response.json()
        assert len(users) == 2
        assert {"cart", "wishlist", "feedback"} <= set(users[0])

    def test_change_role(self, client, make_admin, make_account, auth_headers):
        admin, user = make_admin(), make_account()
        response = client.put(f"/api/users/{user.id}/role", json={"role": "admin"}, headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_cannot_change_own_role(self, client, make_admin, auth_headers):
        admin = make_admin()
        response = client.put(f"/api/users/{admin.id}/role", json={"role": "user"}, headers=auth_headers(admin))
        assert response.status_code == 403
        assert response.json()["kind"] == "SelfModificationForbidden"

    def test_invalid_role(self, client, make_admin, make_account, auth_headers):
        admin, user = make_admin(), make_account()
        response = client.put(f"/api/users/{user.id}/role", json={"role": "owner"}, headers=auth_headers(admin))
        assert response.status_code == 400

    def test_delete_user(self, client, make_admin, make_account, auth_headers):
        admin, user = make_admin(), make_account()
        response = client.delete(f"/api/users/{user.id}", headers=auth_headers(admin))
        assert response.status_code == 200
        assert client.get(f"/api/users/{user.id}", headers=auth_headers(admin)).status_code == 404

    def test_cannot_delete_self(self, client, make_admin, auth_headers):
        admin = make_admin()
        response = client.delete(f"/api/users/{admin.id}", headers=auth_headers(admin))
        assert response.status_code == 403
