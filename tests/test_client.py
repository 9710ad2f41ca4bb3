import pytest
import requests

from quickwash_client import QuickWashAPI


class AppSession:
    """Adapts FastAPI's TestClient to the slice of ``requests.Session`` the client uses."""

    def __init__(self, test_client):
        self.test_client = test_client

    def request(self, method, url, json=None, timeout=None):
        result = self.test_client.request(method, url, json=json)
        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.headers.update(result.headers)
        response.url = url
        response.reason = result.reason_phrase
        return response


class OfflineSession:
    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client):
    return QuickWashAPI(base_url="http://testserver/api", session=AppSession(client))


def test_client_booking_flow(api):
    services, error = api.get_services()
    assert error is None
    laundry = next(s for s in services if s["name"] == "Laundry")

    data, error = api.signup(name="Alice", email="alice@example.com", password="pw", address="12 Lake Road")
    assert error is None
    user = data["user"]

    data, error = api.create_booking(
        user_id=user["id"],
        service_id=laundry["id"],
        email=user["email"],
        pickup_date="2026-10-21",
        pickup_time="10:00",
        address=user["address"],
    )
    assert error is None
    booking_id = data["booking"]["id"]

    api.update_booking(booking_id, {"status": "accepted"})
    data, error = api.update_booking(booking_id, {"status": "completed", "rating": 5})
    assert error is None
    assert data["booking"]["rating"] == 5

    bookings, error = api.get_user_bookings("alice@example.com")
    assert error is None
    assert bookings[0]["service"]["price"] == 199

    profile, _ = api.get_profile("alice@example.com")
    assert profile["eco_points"] == 30
    impact, _ = api.get_impact("alice@example.com")
    assert impact["water_saved_liters"] == 8

    all_bookings, _ = api.get_all_bookings()
    assert len(all_bookings) == 1
    stats, _ = api.get_stats()
    assert stats["completed"] == 1


def test_client_reports_http_errors(api):
    api.signup(name="Alice", email="alice@example.com", password="pw")
    data, error = api.login("alice@example.com", "wrong")
    assert data is None
    assert error == {"status_code": 401, "message": "Invalid credentials"}

    data, error = api.update_booking(99, {"status": "accepted"})
    assert data is None
    assert error["status_code"] == 404


def test_client_reports_transport_errors():
    api = QuickWashAPI(base_url="http://localhost:1/api", session=OfflineSession())
    bookings, error = api.get_all_bookings()
    assert bookings == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
