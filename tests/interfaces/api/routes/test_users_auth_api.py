def _login(client, name: str, password: str):
    return client.post("/api/login", json={"name": name, "password": password})


def test_create_user_without_password_gets_default(client, observe):
    observer = observe()

    response = client.post("/api/users", json={"name": "Erik Eriksson"})

    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "Användare"
    assert "password" not in body
    assert observer.types() == ["user_created"]
    assert "password" not in observer.messages()[0]["data"]
    assert _login(client, "Erik Eriksson", "Euro2025!").status_code == 200


def test_duplicate_user_name_is_a_conflict(client, user, observe):
    observer = observe()

    response = client.post("/api/users", json={"name": user["name"]})

    assert response.status_code == 409
    assert observer.messages() == []


def test_unknown_role_is_rejected(client):
    response = client.post("/api/users", json={"name": "Ny", "role": "owner"})

    assert response.status_code == 400


def test_update_user(client, user, observe):
    observer = observe()

    response = client.patch(
        f"/api/users/{user['id']}", json={"role": "Administratör", "isActive": False}
    )

    assert response.status_code == 200
    assert response.json()["role"] == "Administratör"
    assert response.json()["isActive"] is False
    assert observer.types() == ["user_updated"]


def test_update_unknown_user_is_not_found(client):
    response = client.patch("/api/users/missing", json={"name": "X"})

    assert response.status_code == 404


def test_delete_user(client, user, observe):
    observer = observe()

    response = client.delete(f"/api/users/{user['id']}")

    assert response.status_code == 200
    assert observer.messages() == [{"type": "user_deleted", "data": {"id": user["id"]}}]
    assert client.get("/api/users").json() == []


def test_user_with_counts_cannot_be_deleted(client, user, article, observe):
    client.post(
        f"/api/articles/{article['id']}/inventory",
        json={"inventoryCount": 2, "userId": user["id"]},
    )
    observer = observe()

    response = client.delete(f"/api/users/{user['id']}")

    assert response.status_code == 409
    assert observer.messages() == []
    assert len(client.get("/api/users").json()) == 1


def test_login_returns_token_and_records_activity(client, user, observe):
    observer = observe()

    response = _login(client, "Anna Andersson", "hemligt1")

    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["id"] == user["id"]
    assert body["user"]["lastActive"] is not None
    assert observer.types() == ["user_updated"]

    me = client.get(
        "/api/users/me", headers={"Authorization": f"Bearer {body['accessToken']}"}
    )
    assert me.status_code == 200
    assert me.json()["name"] == "Anna Andersson"


def test_login_with_wrong_password_is_rejected(client, user, observe):
    observer = observe()

    response = _login(client, "Anna Andersson", "fel-lösenord")

    assert response.status_code == 401
    assert response.json()["detail"] == {
        "success": False,
        "message": "Felaktigt användarnamn eller lösenord",
    }
    assert observer.messages() == []


def test_me_requires_a_token(client):
    assert client.get("/api/users/me").status_code == 401


def test_record_activity_reactivates_user(client, user):
    client.patch(f"/api/users/{user['id']}", json={"isActive": False})

    response = client.post(f"/api/users/{user['id']}/activity")

    assert response.status_code == 200
    [stored] = client.get("/api/users").json()
    assert stored["isActive"] is True
    assert stored["lastActive"] is not None
