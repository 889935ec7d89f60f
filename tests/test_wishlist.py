from petmarket.entities.user import User


def _liked(db_session, user_id):
    db_session.expire_all()
    return db_session.query(User).filter(User.id == user_id).one().liked_pets


def test_like_is_idempotent(client, db_session, auth, create_pet):
    user_id, headers = auth
    pet_id = create_pet("Rex")

    for _ in range(2):
        response = client.post("/like-pet", json={"petId": pet_id, "userId": user_id}, headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "liked success."

    assert _liked(db_session, user_id) == [pet_id]


def test_liked_pets_returns_listings(client, auth, create_pet):
    user_id, headers = auth
    rex = create_pet("Rex")
    tom = create_pet("Tom")
    client.post("/like-pet", json={"petId": tom}, headers=headers)
    client.post("/like-pet", json={"petId": rex}, headers=headers)

    body = client.post("/liked-pets", json={"userId": user_id}, headers=headers).json()
    assert body["message"] == "success"
    assert [p["_id"] for p in body["pets"]] == [tom, rex]


def test_liked_pets_skips_deleted_listings(client, db_session, auth, create_pet):
    user_id, headers = auth
    rex = create_pet("Rex")
    tom = create_pet("Tom")
    client.post("/like-pet", json={"petId": rex}, headers=headers)
    client.post("/like-pet", json={"petId": tom}, headers=headers)
    client.post("/remove-pet", json={"petId": rex})

    response = client.post("/liked-pets", headers=headers)
    assert response.status_code == 200
    assert [p["_id"] for p in response.json()["pets"]] == [tom]
    # the stored reference itself is untouched
    assert _liked(db_session, user_id) == [rex, tom]


def test_remove_from_wishlist(client, db_session, auth, create_pet):
    user_id, headers = auth
    rex = create_pet("Rex")
    tom = create_pet("Tom")
    client.post("/like-pet", json={"petId": rex}, headers=headers)
    client.post("/like-pet", json={"petId": tom}, headers=headers)

    response = client.post("/remove-from-wishlist", json={"petId": rex}, headers=headers)
    assert response.status_code == 200
    assert _liked(db_session, user_id) == [tom]


def test_remove_from_wishlist_removes_every_occurrence(client, db_session, auth):
    user_id, headers = auth
    user = db_session.query(User).filter(User.id == user_id).one()
    user.liked_pets = ["p1", "p2", "p1"]
    db_session.commit()

    client.post("/remove-from-wishlist", json={"petId": "p1"}, headers=headers)
    assert _liked(db_session, user_id) == ["p2"]


def test_wishlist_requires_token(client):
    assert client.post("/like-pet", json={"petId": "p1", "userId": "u1"}).status_code == 401
    assert client.post("/liked-pets", json={"userId": "u1"}).status_code == 401


def test_wishlist_rejects_foreign_user_id(client, auth_headers):
    response = client.post("/like-pet", json={"petId": "p1", "userId": "someone-else"}, headers=auth_headers)
    assert response.status_code == 403
