"""Request helpers shared by the API tests."""


def signup(client, email, name="Alice", role="customer", password="secret123", address="12 Lake Road"):
    response = client.post(
        "/api/signup",
        json={"name": name, "email": email, "password": password, "role": role, "address": address},
    )
    assert response.status_code == 200, response.text
    return response.json()["user"]


def book(client, user, service_id, pickup_date="2026-10-21", pickup_time="10:00"):
    response = client.post(
        "/api/bookings",
        json={
            "user_id": user["id"],
            "service_id": service_id,
            "email": user["email"],
            "pickup_date": pickup_date,
            "pickup_time": pickup_time,
            "address": user["address"],
        },
    )
    assert response.status_code == 200, response.text
    return response.json()["booking"]


def eco_points(client, email):
    return client.get(f"/api/profile/{email}").json()["eco_points"]
