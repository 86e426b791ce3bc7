# ============================================================
# Booking API Router
# ------------------------------------------------------------
# Expose les endpoints REST pour créer / consulter une
# réservation de chambre et changer de chambre, ainsi que la
# liste des hôtels. Toutes les routes exigent un token Bearer.
# Publication d'événements (RabbitMQ) après chaque écriture.
# ============================================================
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlmodel import Session

import service
from auth import get_current_user_id
from database import get_session
from models import Booking, BookingInput, Hotel, Room
from publisher import publish_event

router = APIRouter()


# Dates en UTC au format "2024-01-01T12:00:00.000Z" ; un datetime naïf (SQLite) est supposé UTC
def to_iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def booking_out(b: Booking) -> dict:
    return {
        "id": b.id,
        "userId": b.user_id,
        "roomId": b.room_id,
        "createdAt": to_iso(b.created_at),
        "updatedAt": to_iso(b.updated_at),
    }


def room_out(r: Room) -> dict:
    return {
        "id": r.id,
        "name": r.name,
        "capacity": r.capacity,
        "hotelId": r.hotel_id,
        "createdAt": to_iso(r.created_at),
        "updatedAt": to_iso(r.updated_at),
    }


def hotel_out(h: Hotel) -> dict:
    return {
        "id": h.id,
        "name": h.name,
        "image": h.image,
        "createdAt": to_iso(h.created_at),
        "updatedAt": to_iso(h.updated_at),
    }


# ------------------------------------------------------------
# POST /booking — Réserver une chambre
# ------------------------------------------------------------
# - 404 chambre ou inscription inexistante
# - 403 billet non payé / distanciel / sans hôtel, chambre pleine
# ------------------------------------------------------------
@router.post("/booking")
def create_booking(
    body: BookingInput,
    user_id: int = Depends(get_current_user_id),
    s: Session = Depends(get_session),
):
    created = service.create_booking(s, user_id, body.roomId)
    publish_event("BookingCreated", {
        "bookingId": created.id,
        "userId": created.user_id,
        "roomId": created.room_id,
    })
    return booking_out(created)


# ------------------------------------------------------------
# GET /booking — Réservation courante avec la chambre
# ------------------------------------------------------------
@router.get("/booking")
def get_booking(user_id: int = Depends(get_current_user_id), s: Session = Depends(get_session)):
    booking, room = service.get_current_booking(s, user_id)
    return {"id": booking.id, "room": room_out(room)}


# ------------------------------------------------------------
# PUT /booking/{booking_id} — Changer de chambre
# ------------------------------------------------------------
# En cas d'échec (404/403) la réservation reste inchangée.
# ------------------------------------------------------------
@router.put("/booking/{booking_id}")
def change_room(
    booking_id: int,
    body: BookingInput,
    user_id: int = Depends(get_current_user_id),
    s: Session = Depends(get_session),
):
    updated, previous_room_id = service.change_room(s, user_id, booking_id, body.roomId)
    publish_event("BookingRoomChanged", {
        "bookingId": updated.id,
        "userId": updated.user_id,
        "roomId": updated.room_id,
        "previousRoomId": previous_room_id,
    })
    return {"id": updated.id}


@router.get("/hotels")
def list_hotels(user_id: int = Depends(get_current_user_id), s: Session = Depends(get_session)):
    return [hotel_out(h) for h in service.list_hotels(s, user_id)]


@router.get("/hotels/{hotel_id}")
def get_hotel(hotel_id: int, user_id: int = Depends(get_current_user_id), s: Session = Depends(get_session)):
    hotel, rooms = service.get_hotel_rooms(s, user_id, hotel_id)
    return {**hotel_out(hotel), "Rooms": [room_out(r) for r in rooms]}
