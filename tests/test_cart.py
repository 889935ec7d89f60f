from petmarket.entities.user import User

from conftest import signup_and_login


def _user(db_session, user_id):
    db_session.expire_all()
    return db_session.query(User).filter(User.id == user_id).one()


def test_cart_and_orders_walkthrough(client, db_session):
    assert client.post("/signup", json={"email": "a@b.com", "password": "pw"}).status_code == 200
    login = client.post("/login", json={"username": "a@b.com", "password": "pw"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    for _ in range(2):
        response = client.post("/add-to-cart/pet1", headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Product added to cart successfully"
    assert client.get("/get-cart", headers=headers).json()["cart"] == ["pet1", "pet1"]

    response = client.post("/move-to-orders", headers=headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Items moved to orders successfully"

    user = _user(db_session, login.json()["userId"])
    assert user.cart == []
    assert len(user.orders) == 1
    assert user.orders[0]["orderNumber"] == 1
    assert user.orders[0]["items"] == ["pet1", "pet1"]
    assert user.orders[0]["createdAt"]


def test_move_to_orders_numbers_orders_sequentially(client, db_session, auth):
    user_id, headers = auth
    client.post("/add-to-cart/a", headers=headers)
    client.post("/move-to-orders", headers=headers)
    client.post("/add-to-cart/b", headers=headers)
    client.post("/add-to-cart/c", headers=headers)
    client.post("/move-to-orders", headers=headers)

    orders = client.get("/get-orders", headers=headers).json()["orders"]
    assert [(o["orderNumber"], o["items"]) for o in orders] == [(1, ["a"]), (2, ["b", "c"])]
    assert _user(db_session, user_id).cart == []


def test_move_empty_cart_creates_empty_order(client, auth):
    _, headers = auth
    client.post("/move-to-orders", headers=headers)

    orders = client.get("/get-orders", headers=headers).json()["orders"]
    assert len(orders) == 1
    assert orders[0]["items"] == []


def test_move_to_orders_rolls_back_when_commit_fails(client, db_session, auth, mocker):
    user_id, headers = auth
    client.post("/add-to-cart/pet1", headers=headers)

    mocker.patch.object(db_session, "commit", side_effect=RuntimeError("disk full"))
    response = client.post("/move-to-orders", headers=headers)
    assert response.status_code == 500
    assert response.json()["message"] == "Server error"
    assert "disk full" not in response.text

    mocker.stopall()
    user = _user(db_session, user_id)
    assert user.cart == ["pet1"]
    assert user.orders == []


def test_empty_cart(client, db_session, auth):
    user_id, headers = auth
    client.post("/add-to-cart/pet1", headers=headers)
    client.post("/add-to-cart/pet2", headers=headers)

    response = client.delete("/empty-cart", headers=headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Cart emptied successfully"
    assert _user(db_session, user_id).cart == []


def test_add_to_cart_rejects_blank_product_id(client, auth_headers):
    response = client.post("/add-to-cart/%20%20", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid product ID"


def test_cart_requires_token(client):
    assert client.post("/add-to-cart/pet1").status_code == 401
    assert client.get("/get-cart").status_code == 401
    assert client.delete("/empty-cart").status_code == 401
    assert client.post("/move-to-orders").status_code == 401
    assert client.get("/get-orders").status_code == 401


def test_get_cart_resolves_listings(client, auth, create_pet):
    _, headers = auth
    pet_id = create_pet("Rex")
    client.post(f"/add-to-cart/{pet_id}", headers=headers)
    client.post("/add-to-cart/unknown", headers=headers)

    body = client.get("/get-cart", headers=headers).json()
    assert body["cart"] == [pet_id, "unknown"]
    assert body["items"][0]["pet"]["pname"] == "Rex"
    assert body["items"][1] == {"id": "unknown", "pet": None}


def test_deleted_listing_stays_in_cart(client, auth, create_pet):
    _, headers = auth
    pet_id = create_pet("Rex")
    client.post(f"/add-to-cart/{pet_id}", headers=headers)
    assert client.post("/remove-pet", json={"petId": pet_id}).status_code == 200

    response = client.get("/get-cart", headers=headers)
    assert response.status_code == 200
    assert response.json()["cart"] == [pet_id]
    assert response.json()["items"] == [{"id": pet_id, "pet": None}]


def test_carts_are_per_user(client, auth):
    _, headers = auth
    _, other_headers = signup_and_login(client, "other@b.com", "pw")
    client.post("/add-to-cart/mine", headers=headers)

    assert client.get("/get-cart", headers=other_headers).json()["cart"] == []


def test_add_to_cart_keeps_long_ids_verbatim(client, db_session, auth):
    user_id, headers = auth
    long_id = "x" * 200

    response = client.post(f"/add-to-cart/{long_id}", headers=headers)
    assert response.status_code == 200
    assert _user(db_session, user_id).cart == [long_id]
