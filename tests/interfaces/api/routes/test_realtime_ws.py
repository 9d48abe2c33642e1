import time


def _wait_for_sessions(broadcaster, count: int, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while len(broadcaster) < count:
        assert time.monotonic() < deadline, "websocket sessions were not registered"
        time.sleep(0.01)


def test_every_connected_client_receives_committed_changes(client, broadcaster):
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        _wait_for_sessions(broadcaster, 2)

        response = client.post(
            "/api/articles",
            json={
                "articleNumber": "ART-3",
                "description": "Regel",
                "length": "4.5",
                "location": "A1",
            },
        )
        assert response.status_code == 201

        for websocket in (first, second):
            message = websocket.receive_json()
            assert message["type"] == "article_created"
            assert message["data"]["id"] == response.json()["id"]


def test_rejected_mutation_sends_nothing(client, broadcaster):
    with client.websocket_connect("/ws") as websocket:
        _wait_for_sessions(broadcaster, 1)

        assert client.post("/api/admin/clear-data", json={"password": "fel"}).status_code == 401
        client.post("/api/admin/clear-data", json={"password": "admin123"})

        assert websocket.receive_json() == {"type": "data_cleared"}


def test_disconnected_client_is_unregistered(client, broadcaster):
    with client.websocket_connect("/ws"):
        _wait_for_sessions(broadcaster, 1)

    deadline = time.monotonic() + 2.0
    while len(broadcaster):
        assert time.monotonic() < deadline
        time.sleep(0.01)
