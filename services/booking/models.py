# ============================================================
# models.py — Modèles de données SQLModel (Booking Service)
# ------------------------------------------------------------
# Définit les tables de la base :
#   1. User / UserSession : identité et sessions actives
#   2. Enrollment, TicketType, Ticket : inscription et billet
#   3. Hotel, Room : hébergement proposé aux participants
#   4. Booking : réservation d'une chambre par un utilisateur
# ============================================================
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketStatus(str, Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    password: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# ------------------------------------------------------------
# UserSession
# ------------------------------------------------------------
# Un token n'est accepté que s'il existe une ligne "session"
# contenant exactement ce token (déconnexion = suppression).
# ------------------------------------------------------------
class UserSession(SQLModel, table=True):
    __tablename__ = "session"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    token: str = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Enrollment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    cpf: str
    birthday: datetime
    phone: str
    user_id: int = Field(foreign_key="user.id", unique=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class TicketType(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Ticket(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    ticket_type_id: int = Field(foreign_key="tickettype.id")
    enrollment_id: int = Field(foreign_key="enrollment.id", unique=True)
    status: TicketStatus = TicketStatus.RESERVED
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Hotel(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    image: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Room(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    capacity: int
    hotel_id: int = Field(foreign_key="hotel.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# ------------------------------------------------------------
# Booking
# ------------------------------------------------------------
# Réservation d'une chambre : au plus une par utilisateur.
# L'occupation d'une chambre = nombre de Booking qui la visent.
# ------------------------------------------------------------
class Booking(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", unique=True)
    room_id: int = Field(foreign_key="room.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# Corps des requêtes POST / PUT /booking
class BookingInput(SQLModel):
    roomId: int
