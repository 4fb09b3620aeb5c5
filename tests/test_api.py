"""Tests for API endpoints"""
import pytest


PRODUCT = {
    "name": "Silk Scarf",
    "description": "Hand-dyed silk",
    "price": 19.99,
    "image_url": "/img/scarf.png",
    "category": "Accessories",
    "quantity": 10,
}

ORDER = {
    "total_amount": 44.98,
    "items": [
        {"product_id": 1, "quantity": 2, "price": 19.99},
        {"product_id": 2, "quantity": 1, "price": 5.0},
    ],
}


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "kira-shop"}


# ==================== AUTH ====================

class TestAuth:

    def test_register_returns_token_and_user(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "bob", "email": "bob@example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["username"] == "bob"
        assert data["user"]["role"] == "customer"
        assert "password_hash" not in data["user"]

    def test_register_duplicate_username(self, client, customer_headers):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "other@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    def test_register_duplicate_email(self, client, customer_headers):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice2", "email": "alice@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already in use"

    def test_register_validates_input(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "ab", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 422

    def test_login_wrong_password(self, client):
        response = client.post("/api/auth/login", json={"username": "admin", "password": "wrongpass"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password"

    def test_me(self, client, admin_headers):
        response = client.get("/api/auth/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "admin"

    def test_me_requires_token(self, client):
        assert client.get("/api/auth/me").status_code == 401
        assert client.get("/api/auth/me", headers={"Authorization": "Bearer nope"}).status_code == 401

    def test_logout_revokes_token(self, client, customer_headers):
        assert client.post("/api/auth/logout", headers=customer_headers).status_code == 200

        assert client.get("/api/auth/me", headers=customer_headers).status_code == 401

    def test_login_upgrades_weak_hash(self, client, memory_db, customer_headers):
        from argon2 import PasswordHasher
        from core.auth import hash_password, needs_rehash

        alice = next(u for u in memory_db.users.values() if u.username == "alice")
        weak = hash_password("secret123", hasher=PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))
        memory_db.users[alice.id] = alice.model_copy(update={"password_hash": weak})

        response = client.post("/api/auth/login", json={"username": "alice", "password": "secret123"})

        assert response.status_code == 200
        upgraded = memory_db.users[alice.id].password_hash
        assert upgraded != weak
        assert not needs_rehash(upgraded)


# ==================== PROFILE ====================

class TestProfile:

    def test_update_profile(self, client, customer_headers):
        response = client.put(
            "/api/user/profile", headers=customer_headers, json={"first_name": "Alice"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["first_name"] == "Alice"
        assert client.get("/api/user/profile", headers=customer_headers).json()["user"]["first_name"] == "Alice"

    def test_update_profile_email_taken(self, client, customer_headers):
        response = client.put(
            "/api/user/profile", headers=customer_headers, json={"email": "admin@kira.com"}
        )

        assert response.status_code == 400

    def test_update_profile_null_email_rejected(self, client, customer_headers):
        response = client.put("/api/user/profile", headers=customer_headers, json={"email": None})

        assert response.status_code == 422
        profile = client.get("/api/user/profile", headers=customer_headers).json()["user"]
        assert profile["email"] == "alice@example.com"

    def test_change_password(self, client, customer_headers):
        response = client.put(
            "/api/user/password",
            headers=customer_headers,
            json={"current_password": "secret123", "new_password": "newsecret"},
        )
        assert response.status_code == 200

        login = client.post("/api/auth/login", json={"username": "alice", "password": "newsecret"})
        assert login.status_code == 200

    def test_change_password_requires_current(self, client, customer_headers):
        response = client.put(
            "/api/user/password",
            headers=customer_headers,
            json={"current_password": "wrongpass", "new_password": "newsecret"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Current password is incorrect"


# ==================== PRODUCTS ====================

class TestProducts:

    def test_admin_creates_product(self, client, admin_headers):
        response = client.post("/api/products", headers=admin_headers, json=PRODUCT)

        assert response.status_code == 201
        product = response.json()["product"]
        assert product["price"] == 19.99

        listing = client.get("/api/products").json()["products"]
        assert [p["name"] for p in listing] == ["Silk Scarf"]

    def test_customer_cannot_create_product(self, client, customer_headers):
        response = client.post("/api/products", headers=customer_headers, json=PRODUCT)

        assert response.status_code == 403

    def test_anonymous_cannot_create_product(self, client):
        assert client.post("/api/products", json=PRODUCT).status_code == 401

    def test_get_missing_product(self, client):
        response = client.get("/api/products/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_update_and_delete(self, client, admin_headers):
        product_id = client.post("/api/products", headers=admin_headers, json=PRODUCT).json()["product"]["id"]

        updated = client.put(f"/api/products/{product_id}", headers=admin_headers, json={"price": 15})
        assert updated.status_code == 200
        assert updated.json()["product"]["price"] == 15.0
        assert updated.json()["product"]["name"] == "Silk Scarf"

        assert client.delete(f"/api/products/{product_id}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/products/{product_id}", headers=admin_headers).status_code == 404

    def test_update_ignores_null_fields(self, client, admin_headers):
        product_id = client.post("/api/products", headers=admin_headers, json=PRODUCT).json()["product"]["id"]

        response = client.put(
            f"/api/products/{product_id}", headers=admin_headers, json={"name": None, "price": 12}
        )

        assert response.status_code == 200
        assert response.json()["product"]["name"] == "Silk Scarf"
        assert response.json()["product"]["price"] == 12.0


# ==================== ORDERS ====================

class TestOrders:

    def test_create_order(self, client, customer_headers):
        response = client.post("/api/orders", headers=customer_headers, json=ORDER)

        assert response.status_code == 201
        order = response.json()["order"]
        assert order["status"] == "pending"
        assert order["total_amount"] == 44.98
        assert len(order["items"]) == 2

    def test_create_order_requires_auth(self, client):
        assert client.post("/api/orders", json=ORDER).status_code == 401

    def test_total_mismatch_rejected(self, client, customer_headers):
        response = client.post(
            "/api/orders", headers=customer_headers, json={**ORDER, "total_amount": 10.0}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Order total does not match items"

    def test_empty_order_rejected(self, client, customer_headers):
        response = client.post(
            "/api/orders", headers=customer_headers, json={"total_amount": 0, "items": []}
        )

        assert response.status_code == 400

    def test_idempotency_key_replays_order(self, client, customer_headers, memory_db):
        headers = {**customer_headers, "Idempotency-Key": "attempt-1"}

        first = client.post("/api/orders", headers=headers, json=ORDER)
        second = client.post("/api/orders", headers=headers, json=ORDER)

        assert first.status_code == 201
        assert second.status_code == 200
        assert first.json()["order"]["id"] == second.json()["order"]["id"]
        assert len(memory_db.orders) == 1

    def test_my_orders(self, client, customer_headers):
        client.post("/api/orders", headers=customer_headers, json=ORDER)

        orders = client.get("/api/my-orders", headers=customer_headers).json()["orders"]

        assert len(orders) == 1
        assert orders[0]["items"][0]["product_id"] == 1

    def test_all_orders_is_admin_only(self, client, customer_headers, admin_headers):
        client.post("/api/orders", headers=customer_headers, json=ORDER)

        assert client.get("/api/orders", headers=customer_headers).status_code == 403
        assert len(client.get("/api/orders", headers=admin_headers).json()["orders"]) == 1

    def test_get_order_owner_or_admin(self, client, customer_headers, admin_headers):
        order_id = client.post("/api/orders", headers=customer_headers, json=ORDER).json()["order"]["id"]
        other = client.post(
            "/api/auth/register",
            json={"username": "mallory", "email": "m@example.com", "password": "secret123"},
        ).json()["token"]

        assert client.get(f"/api/orders/{order_id}", headers=customer_headers).status_code == 200
        assert client.get(f"/api/orders/{order_id}", headers=admin_headers).status_code == 200
        assert client.get(
            f"/api/orders/{order_id}", headers={"Authorization": f"Bearer {other}"}
        ).status_code == 403
        assert client.get("/api/orders/999", headers=admin_headers).status_code == 404

    @pytest.mark.parametrize("status,expected", [
        ("processing", 200),
        ("completed", 200),
        ("shipped", 400),
    ])
    def test_update_status(self, client, customer_headers, admin_headers, status, expected):
        order_id = client.post("/api/orders", headers=customer_headers, json=ORDER).json()["order"]["id"]

        response = client.patch(
            f"/api/orders/{order_id}/status", headers=admin_headers, json={"status": status}
        )

        assert response.status_code == expected
        if expected == 200:
            assert response.json()["order"]["status"] == status

    def test_update_status_missing_order(self, client, admin_headers):
        response = client.patch("/api/orders/999/status", headers=admin_headers, json={"status": "completed"})

        assert response.status_code == 404


# ==================== ADMIN ====================

class TestAdmin:

    def test_dashboard(self, client, admin_headers, customer_headers):
        client.post("/api/products", headers=admin_headers, json=PRODUCT)
        client.post("/api/orders", headers=customer_headers, json=ORDER)

        response = client.get("/api/admin/dashboard", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total_users"] == 2
        assert data["total_orders"] == 1
        assert data["total_products"] == 1
        assert data["total_revenue"] == 44.98
        assert data["new_users"] == 2
        assert len(data["recent_orders"]) == 1
        assert data["top_selling_products"][0]["id"] == 1
        assert len(data["revenue_by_month"]) == 6

    def test_dashboard_requires_admin(self, client, customer_headers):
        assert client.get("/api/admin/dashboard", headers=customer_headers).status_code == 403

    def test_list_users_by_role(self, client, admin_headers, customer_headers):
        customers = client.get("/api/admin/users?role=customer", headers=admin_headers).json()["users"]
        everyone = client.get("/api/admin/users", headers=admin_headers).json()["users"]

        assert [u["username"] for u in customers] == ["alice"]
        assert len(everyone) == 2


# ==================== CONTACT ====================

def test_contact(client):
    response = client.post(
        "/api/contact",
        json={"name": "Carol", "email": "carol@example.com", "message": "Do you ship abroad?"},
    )

    assert response.status_code == 201
    assert response.json()["contact"]["name"] == "Carol"
