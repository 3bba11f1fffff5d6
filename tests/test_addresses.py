from __future__ import annotations

from sqlalchemy import text

ADDRESS = {
    "address_details": "221B Baker Street",
    "city": "London",
    "state": "Greater London",
    "pin_code": "NW16XE",
}


def test_create_and_list_addresses(client, make_customer):
    customer_id = make_customer()

    response = client.post(f"/api/customers/{customer_id}/addresses", json=ADDRESS)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Address added successfully"
    address_id = body["addressId"]

    rows = client.get(f"/api/customers/{customer_id}/addresses").json()
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == address_id
    assert row["customer_id"] == customer_id
    for key, value in ADDRESS.items():
        assert row[key] == value
    assert row["created_at"] is not None
    assert row["updated_at"] is not None


def test_list_only_returns_that_customers_addresses(client, make_customer, make_address):
    first = make_customer()
    second = make_customer()
    mine = make_address(first)
    make_address(second)

    rows = client.get(f"/api/customers/{first}/addresses").json()
    assert [a["id"] for a in rows] == [mine]


def test_list_for_unknown_customer_is_empty(client):
    response = client.get("/api/customers/999/addresses")
    assert response.status_code == 200
    assert response.json() == []


def test_create_requires_all_fields(client, make_customer):
    customer_id = make_customer()

    response = client.post(
        f"/api/customers/{customer_id}/addresses",
        json={"address_details": "Somewhere", "city": "London"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Address details, city, state, and pin code are required"}
    assert client.get(f"/api/customers/{customer_id}/addresses").json() == []


def test_create_accepts_numeric_pin_code(client, make_customer):
    customer_id = make_customer()

    response = client.post(
        f"/api/customers/{customer_id}/addresses",
        json={**ADDRESS, "pin_code": 560001},
    )
    assert response.status_code == 200
    assert client.get(f"/api/customers/{customer_id}/addresses").json()[0]["pin_code"] == "560001"


def test_create_for_unknown_customer_returns_404(client):
    response = client.post("/api/customers/999/addresses", json=ADDRESS)
    assert response.status_code == 404
    assert response.json() == {"error": "Customer not found"}


def test_update_address(client, make_customer, make_address):
    customer_id = make_customer()
    address_id = make_address(customer_id)

    changes = {"address_details": "1 New Road", "city": "Leeds", "state": "West Yorkshire", "pin_code": "LS11AA"}
    response = client.put(f"/api/addresses/{address_id}", json=changes)
    assert response.status_code == 200
    assert response.json() == {"message": "Address updated successfully"}

    row = client.get(f"/api/customers/{customer_id}/addresses").json()[0]
    for key, value in changes.items():
        assert row[key] == value
    assert row["customer_id"] == customer_id


def test_update_requires_all_fields(client, make_customer, make_address):
    address_id = make_address(make_customer())

    response = client.put(f"/api/addresses/{address_id}", json={"city": "Leeds"})
    assert response.status_code == 400


def test_update_missing_address_returns_404(client, make_customer, make_address):
    customer_id = make_customer()
    make_address(customer_id)

    response = client.put("/api/addresses/999", json=ADDRESS)
    assert response.status_code == 404
    assert response.json() == {"error": "Address not found"}

    rows = client.get(f"/api/customers/{customer_id}/addresses").json()
    assert rows[0]["address_details"] == "12 Baker Street"


def test_delete_address(client, make_customer, make_address):
    customer_id = make_customer()
    gone = make_address(customer_id)
    kept = make_address(customer_id)

    response = client.delete(f"/api/addresses/{gone}")
    assert response.status_code == 200
    assert response.json() == {"message": "Address deleted successfully"}

    rows = client.get(f"/api/customers/{customer_id}/addresses").json()
    assert [a["id"] for a in rows] == [kept]


def test_delete_missing_address_returns_404(client, make_customer, make_address):
    customer_id = make_customer()
    make_address(customer_id)

    response = client.delete("/api/addresses/999")
    assert response.status_code == 404
    assert len(client.get(f"/api/customers/{customer_id}/addresses").json()) == 1


def test_update_refreshes_updated_at(client, engine, make_customer, make_address):
    customer_id = make_customer()
    address_id = make_address(customer_id)

    with engine.begin() as conn:
        conn.execute(
            text("UPDATE addresses SET updated_at = '2000-01-01 00:00:00' WHERE id = :id"),
            {"id": address_id},
        )

    # Same values as before; the timestamp still moves
    response = client.put(
        f"/api/addresses/{address_id}",
        json={"address_details": "12 Baker Street", "city": "Springfield", "state": "IL", "pin_code": "62701"},
    )
    assert response.status_code == 200

    row = client.get(f"/api/customers/{customer_id}/addresses").json()[0]
    assert not row["updated_at"].startswith("2000-01-01")
    assert row["created_at"] is not None


def test_create_without_body_is_a_400(client, make_customer):
    customer_id = make_customer()

    response = client.post(f"/api/customers/{customer_id}/addresses")
    assert response.status_code == 400
    assert response.json() == {"error": "Address details, city, state, and pin code are required"}
