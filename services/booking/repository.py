# ============================================================
# repository.py — Accès aux données
# ------------------------------------------------------------
# Ce module implémente le design pattern "Repository" pour les
# tables utilisées par le service. Il isole la logique d'accès
# et de manipulation des données de la couche API.
# ============================================================
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from models import Booking, Enrollment, Hotel, Room, Ticket, TicketType, UserSession, utcnow


# BookingRepository
# CRUD simplifié sur la table Booking, utilisé par la couche service.
class BookingRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, b: Booking):
        self.session.add(b)
        self.session.commit()
        self.session.refresh(b)
        return b

    def get(self, booking_id: int):
        return self.session.exec(select(Booking).where(Booking.id == booking_id)).first()

    def get_by_user(self, user_id: int) -> Optional[Booking]:
        return self.session.exec(select(Booking).where(Booking.user_id == user_id)).first()

    def count_by_room(self, room_id: int) -> int:
        return self.session.exec(
            select(func.count(Booking.id)).where(Booking.room_id == room_id)
        ).one()

    def update_room(self, booking_id: int, room_id: int):
        b = self.get(booking_id)
        if b:
            b.room_id = room_id
            b.updated_at = utcnow()
            self.session.commit()
            self.session.refresh(b)
        return b


class RoomRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, room_id: int) -> Optional[Room]:
        return self.session.exec(select(Room).where(Room.id == room_id)).first()

    def list_by_hotel(self, hotel_id: int):
        return self.session.exec(select(Room).where(Room.hotel_id == hotel_id).order_by(Room.id)).all()


class HotelRepository:
    def __init__(self, session: Session):
        self.session = session

    def list(self):
        return self.session.exec(select(Hotel).order_by(Hotel.id)).all()

    def get(self, hotel_id: int) -> Optional[Hotel]:
        return self.session.exec(select(Hotel).where(Hotel.id == hotel_id)).first()


# Inscription + billet : lecture seule, les données sont saisies ailleurs
class EnrollmentRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[Enrollment]:
        return self.session.exec(select(Enrollment).where(Enrollment.user_id == user_id)).first()

    def get_ticket(self, enrollment_id: int) -> Optional[Ticket]:
        return self.session.exec(select(Ticket).where(Ticket.enrollment_id == enrollment_id)).first()

    def get_ticket_type(self, ticket_type_id: int) -> Optional[TicketType]:
        return self.session.exec(select(TicketType).where(TicketType.id == ticket_type_id)).first()


class SessionRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_token(self, token: str) -> Optional[UserSession]:
        return self.session.exec(select(UserSession).where(UserSession.token == token)).first()
