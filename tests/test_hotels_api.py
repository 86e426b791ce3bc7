from models import TicketStatus

from factories import (
    auth_header,
    create_eligible_user,
    create_enrollment,
    create_hotel,
    create_room,
    create_ticket,
    create_ticket_type,
    create_user,
    generate_valid_token,
    sign_token,
)


def test_health_needs_no_token(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_hotels_401_without_token(client):
    assert client.get("/hotels").status_code == 401


def test_hotels_401_without_session(client, db):
    user = create_user(db)
    response = client.get("/hotels", headers=auth_header(sign_token(user.id)))
    assert response.status_code == 401


def test_hotels_401_with_token_signed_by_other_secret(client, db):
    user = create_user(db)
    response = client.get("/hotels", headers=auth_header(sign_token(user.id, secret="other")))
    assert response.status_code == 401


def test_hotels_404_without_enrollment(client, db):
    create_hotel(db)
    token = generate_valid_token(db)
    assert client.get("/hotels", headers=auth_header(token)).status_code == 404


def test_hotels_403_when_ticket_not_paid(client, db):
    user = create_user(db)
    token = generate_valid_token(db, user)
    enrollment = create_enrollment(db, user)
    create_ticket(db, enrollment, create_ticket_type(db), TicketStatus.RESERVED)
    create_hotel(db)

    assert client.get("/hotels", headers=auth_header(token)).status_code == 403


def test_hotels_404_when_none_exist(client, db):
    _, token = create_eligible_user(db)
    assert client.get("/hotels", headers=auth_header(token)).status_code == 404


def test_hotels_200_lists_hotels(client, db):
    _, token = create_eligible_user(db)
    first = create_hotel(db)
    second = create_hotel(db)

    response = client.get("/hotels", headers=auth_header(token))

    assert response.status_code == 200
    body = response.json()
    assert [h["id"] for h in body] == [first.id, second.id]
    assert body[0]["name"] == first.name
    assert body[0]["image"] == first.image


def test_hotel_404_when_unknown(client, db):
    _, token = create_eligible_user(db)
    assert client.get("/hotels/999", headers=auth_header(token)).status_code == 404


def test_hotel_200_with_rooms(client, db):
    _, token = create_eligible_user(db)
    hotel = create_hotel(db)
    room = create_room(db, hotel, capacity=2)
    create_room(db, create_hotel(db))

    response = client.get(f"/hotels/{hotel.id}", headers=auth_header(token))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == hotel.id
    assert [r["id"] for r in body["Rooms"]] == [room.id]
    assert body["Rooms"][0]["capacity"] == 2
    assert body["Rooms"][0]["hotelId"] == hotel.id
