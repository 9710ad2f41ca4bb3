from tests.helpers import book, signup


def test_signup_returns_user_without_password(client):
    response = client.post(
        "/api/signup",
        json={
            "name": "Alice",
            "email": "alice@example.com",
            "password": "secret123",
            "role": "customer",
            "address": "12 Lake Road",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "password" not in body["user"]
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["eco_points"] == 0


def test_signup_provider_without_address(client):
    response = client.post(
        "/api/signup",
        json={"name": "Shop", "email": "shop@example.com", "password": "pw", "role": "provider"},
    )
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["role"] == "provider"
    assert user["address"] is None
    assert "password" not in user


def test_signup_duplicate_email_is_400(client):
    signup(client, "alice@example.com")
    response = client.post(
        "/api/signup",
        json={"name": "Other", "email": "alice@example.com", "password": "pw"},
    )
    assert response.status_code == 400
    assert response.json()["detail"]


def test_signup_unknown_role_is_400(client):
    response = client.post(
        "/api/signup",
        json={"name": "Eve", "email": "eve@example.com", "password": "pw", "role": "admin"},
    )
    assert response.status_code == 400


def test_login_success_strips_password(client):
    signup(client, "alice@example.com", password="secret123")
    response = client.post("/api/login", json={"email": "alice@example.com", "password": "secret123"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["email"] == "alice@example.com"
    assert "password" not in body["user"]


def test_login_wrong_password_is_401(client):
    signup(client, "alice@example.com", password="secret123")
    response = client.post("/api/login", json={"email": "alice@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_email_is_401(client):
    response = client.post("/api/login", json={"email": "ghost@example.com", "password": "x"})
    assert response.status_code == 401


def test_profile_found_and_not_found(client):
    signup(client, "alice@example.com")
    response = client.get("/api/profile/alice@example.com")
    assert response.status_code == 200
    profile = response.json()
    assert profile["name"] == "Alice"
    assert "password" not in profile

    missing = client.get("/api/profile/ghost@example.com")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "User not found"


def test_impact_reflects_eco_points(client, service_ids):
    user = signup(client, "alice@example.com")
    impact = client.get("/api/profile/alice@example.com/impact").json()
    assert impact == {
        "email": "alice@example.com",
        "eco_points": 0,
        "water_saved_liters": 0,
        "rewards_available": 0,
    }

    book(client, user, service_ids["Laundry"])
    impact = client.get("/api/profile/alice@example.com/impact").json()
    assert impact["eco_points"] == 10
    assert impact["water_saved_liters"] == 3
    assert impact["rewards_available"] == 0


def test_impact_unknown_user_is_404(client):
    assert client.get("/api/profile/ghost@example.com/impact").status_code == 404


def test_openapi_lists_field_examples(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]
    assert schemas["UserCreate"]["properties"]["email"]["examples"] == ["alice@example.com"]
    assert schemas["BookingCreate"]["properties"]["pickup_time"]["examples"] == ["10:00"]
    assert "example" not in schemas["BookingCreate"]["properties"]["pickup_time"]
