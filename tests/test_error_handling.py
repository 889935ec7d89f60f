from petmarket.pets.service import PetService


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "Pet Market API is running"
    assert client.get("/health").json()["status"] == "ok"


def test_request_id_header(client):
    response = client.get("/get-pets")
    assert response.headers.get("X-Request-ID")
    assert response.headers["X-Request-ID"] != client.get("/get-pets").headers["X-Request-ID"]


def test_unexpected_error_is_generic_500(client, mocker):
    mocker.patch.object(PetService, "list_all", side_effect=RuntimeError("connection refused to db:5432"))

    response = client.get("/get-pets")
    assert response.status_code == 500
    assert response.json()["message"] == "Server error"
    assert "5432" not in response.text


def test_unknown_route_has_message(client):
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert "message" in response.json()


def test_malformed_json_is_bad_request(client):
    response = client.post(
        "/signup", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
