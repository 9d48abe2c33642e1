import pytest


def _create_line(client, **overrides) -> dict:
    payload = {
        "orderNumber": "5001",
        "articleNumber": "ART-1",
        "description": "Regel",
        "length": "4.5",
        "quantity": 3,
    }
    payload.update(overrides)
    response = client.post("/api/order-lines", json=payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def picked_line(client) -> dict:
    return _create_line(client, pickStatus="Plockat")


@pytest.fixture
def unpicked_line(client) -> dict:
    return _create_line(client)


def test_new_order_line_defaults_to_not_picked(client, unpicked_line):
    assert unpicked_line["pickStatus"] == "Ej plockat"
    assert unpicked_line["isInventoried"] is False


def test_unpicked_line_cannot_be_inventoried(client, user, unpicked_line, observe):
    observer = observe()

    response = client.post(
        f"/api/order-lines/{unpicked_line['id']}/inventory", json={"userId": user["id"]}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "message": "Endast plockade orderrader kan inventeras",
        "pickStatus": "Ej plockat",
    }
    assert observer.messages() == []
    [stored] = client.get("/api/order-lines").json()
    assert stored == unpicked_line


def test_picked_line_is_inventoried(client, user, picked_line, observe):
    observer = observe()

    response = client.post(
        f"/api/order-lines/{picked_line['id']}/inventory",
        json={"userId": user["id"], "inventoriedQuantity": 3},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["isInventoried"] is True
    assert body["inventoriedBy"] == user["id"]
    assert body["inventoriedQuantity"] == 3
    assert body["inventoriedAt"] is not None
    [message] = observer.messages()
    assert message["type"] == "order_line_inventoried"
    assert message["data"]["id"] == picked_line["id"]


def test_inventory_unknown_line_is_not_found(client, user):
    response = client.post(
        "/api/order-lines/missing/inventory", json={"userId": user["id"]}
    )

    assert response.status_code == 404


def test_inventory_by_unknown_user_is_not_found(client, picked_line, observe):
    observer = observe()

    response = client.post(
        f"/api/order-lines/{picked_line['id']}/inventory", json={"userId": "missing"}
    )

    assert response.status_code == 404
    assert observer.messages() == []


def test_csv_import_replaces_order_lines(client, unpicked_line, observe):
    observer = observe()
    content = (
        "Ordernr,art.nr,Besk,Längd,Pos,Antal,Plockstatt\n"
        "6001,ART-5,Regel,4.5,1,2,Plockat\n"
        "6001,ART-6,Bräda,3.6,2,4,Ej plockat\n"
    ).encode("utf-8")

    response = client.post(
        "/api/order-lines/import", files={"file": ("orders.csv", content, "text/csv")}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert [line["articleNumber"] for line in body["orderLines"]] == ["ART-5", "ART-6"]
    stored = client.get("/api/order-lines").json()
    assert unpicked_line["id"] not in {line["id"] for line in stored}
    assert observer.types() == ["order_lines_imported"]


def test_import_without_file_is_rejected(client):
    response = client.post("/api/order-lines/import")

    assert response.status_code == 400
