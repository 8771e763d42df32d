"""HTTP API end to end against an in-memory database."""
from medfinder.core.exceptions import StoreWriteError
from medfinder.core.rate_limiter import rate_limiter
from medfinder.services import inventory_service

KENGERI = {"lat": 12.9189, "lon": 77.4856}


def register(client, name="Sunrise Medicals"):
    response = client.post(
        "/pharmacies/register",
        json={
            "owner": {"name": name, "phone": "080-1111-2222", "address": "5th Cross, Kengeri"},
            "location": KENGERI,
        },
    )
    assert response.status_code == 200
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_register_is_idempotent(client):
    first = register(client)
    again = register(client, "sunrise MEDICALS")

    assert first["id"] == 1001
    assert again == first
    assert client.get("/pharmacies").json()[-1] == first
    assert client.get(f"/pharmacies/{first['id']}").json()["name"] == "Sunrise Medicals"


def test_unknown_pharmacy_is_404(client):
    assert client.get("/pharmacies/4242").status_code == 404


def test_owner_flow_to_search(client):
    pharmacy = register(client)
    pid = pharmacy["id"]

    response = client.put(
        f"/inventory/pharmacies/{pid}",
        json=[{"medicineName": "Paracetamol", "price": 25}, {"medicineName": "Dolo 650", "price": 30, "stock": "Low Stock"}],
    )
    assert response.status_code == 200
    assert response.json() == [
        {"pharmacyId": pid, "price": 25.0, "stock": "In Stock"},
        {"pharmacyId": pid, "price": 30.0, "stock": "Low Stock"},
    ]
    client.put("/inventory/pharmacies/22", json=[{"medicineName": "PARACETAMOL", "price": 20}])

    results = client.get("/search", params={**KENGERI, "medicine": "paracetamol"}).json()
    assert [r["id"] for r in results] == [pid, 22]
    assert results[0]["priceUnit"] == "per strip"
    assert [r["isBestOption"] for r in results] == [False, True]

    # Low Stock is never surfaced
    assert client.get("/search", params={**KENGERI, "medicine": "Dolo 650"}).json() == []


def test_search_sorted_by_price(client):
    client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": 40}])
    client.put("/inventory/pharmacies/22", json=[{"medicineName": "Crocin", "price": 20}])

    results = client.get("/search", params={**KENGERI, "medicine": "crocin", "sort": "price"}).json()
    assert [r["id"] for r in results] == [22, 21]


def test_search_requires_coordinates(client):
    assert client.get("/search", params={"medicine": "crocin"}).status_code == 422
    assert client.get("/search", params={**KENGERI, "medicine": "crocin", "sort": "rating"}).status_code == 422


def test_search_rejects_non_finite_coordinates(client):
    for lat, lon in (("inf", "77.5"), ("12.9", "-inf"), ("nan", "77.5")):
        response = client.get("/search", params={"lat": lat, "lon": lon, "medicine": "crocin"})
        assert response.status_code == 422


def test_search_opposite_side_of_the_earth(client):
    client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": 40}])
    apollo = client.get("/pharmacies/21").json()

    response = client.get(
        "/search",
        params={"lat": -apollo["lat"], "lon": apollo["lon"] - 180, "medicine": "crocin"},
    )
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [21]


def test_stock_update_and_removal(client):
    client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": 40}])

    response = client.patch("/inventory/pharmacies/21/medicines/CROCIN", json={"stock": "Out of Stock"})
    assert response.json() == {"updated": True}
    assert client.get("/inventory/medicines/crocin").json() == [
        {"pharmacyId": 21, "price": 40.0, "stock": "Out of Stock"}
    ]
    assert client.patch("/inventory/pharmacies/22/medicines/crocin", json={"stock": "In Stock"}).json() == {"updated": False}

    assert client.delete("/inventory/pharmacies/21/medicines/Crocin").json() == {"removed": True}
    assert client.delete("/inventory/pharmacies/21/medicines/Crocin").json() == {"removed": False}
    assert client.get("/inventory").json() == {}


def test_pharmacy_inventory_view(client):
    client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": 40}])

    assert client.get("/inventory/pharmacies/21").json() == [
        {"medicineName": "crocin", "price": 40.0, "stock": "In Stock"}
    ]


def test_price_slip_upload(client):
    text = '[{"medicineName": "Paracetamol 500mg", "price": 30.5}, {"medicineName": "Dolo 650", "price": 32}]'

    response = client.post("/inventory/pharmacies/21/price-slip", json={"extractedText": text})
    assert response.status_code == 200
    assert set(client.get("/inventory").json()) == {"paracetamol 500mg", "dolo 650"}


def test_bad_price_slip_is_400(client):
    response = client.post("/inventory/pharmacies/21/price-slip", json={"extractedText": "no medicines here"})
    assert response.status_code == 400
    assert client.get("/inventory").json() == {}


def test_negative_price_is_rejected(client):
    response = client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": -1}])
    assert response.status_code == 422


def test_store_write_failure_is_500(client, monkeypatch):
    def broken_upsert(db, pharmacy_id, items):
        raise StoreWriteError("Failed to persist inventory upsert", view=[])

    monkeypatch.setattr(inventory_service, "upsert_inventory", broken_upsert)
    response = client.put("/inventory/pharmacies/21", json=[{"medicineName": "Crocin", "price": 40}])
    assert response.status_code == 500
    assert "persist" not in response.json()["detail"]


def test_rate_limit_headers(client):
    response = client.get("/pharmacies")
    assert response.headers["X-RateLimit-Limit"] == str(rate_limiter.requests)
    assert "X-RateLimit-Remaining" in response.headers
