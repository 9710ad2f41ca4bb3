from tests.helpers import book, signup


def test_empty_dashboard(client):
    response = client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "total_bookings": 0,
        "pending": 0,
        "accepted": 0,
        "rejected": 0,
        "completed": 0,
        "total_earnings": 0,
        "total_customers": 0,
        "average_rating": None,
    }


def test_dashboard_counts_and_earnings(client, service_ids):
    alice = signup(client, "alice@example.com")
    bob = signup(client, "bob@example.com", name="Bob")
    laundry = book(client, alice, service_ids["Laundry"])
    dry_clean = book(client, bob, service_ids["Dry Clean"])
    shoes = book(client, alice, service_ids["Shoe Clean"])
    book(client, bob, service_ids["Ironing"])

    for booking, rating in ((laundry, 5), (dry_clean, 4)):
        client.patch(f"/api/bookings/{booking['id']}", json={"status": "accepted"})
        client.patch(f"/api/bookings/{booking['id']}", json={"status": "completed", "rating": rating})
    client.patch(f"/api/bookings/{shoes['id']}", json={"status": "rejected"})

    stats = client.get("/api/stats").json()
    assert stats["total_bookings"] == 4
    assert stats["pending"] == 1
    assert stats["accepted"] == 0
    assert stats["rejected"] == 1
    assert stats["completed"] == 2
    assert stats["total_earnings"] == 199 + 299
    assert stats["total_customers"] == 2
    assert stats["average_rating"] == 4.5
