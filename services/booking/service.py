# ============================================================
# service.py — Règles métier de la réservation d'hôtel
# ------------------------------------------------------------
# Suite de vérifications synchrones, chacune pouvant interrompre
# la requête :
#   - éligibilité : inscription, billet payé, type de billet
#     présentiel avec hôtel inclus
#   - capacité : la chambre existe et n'est pas pleine
# Puis création / lecture / changement de chambre.
# ============================================================
import logging

from sqlmodel import Session

from errors import ForbiddenError, NotFoundError
from models import Booking, Hotel, Room, TicketStatus
from repository import BookingRepository, EnrollmentRepository, HotelRepository, RoomRepository

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# Éligibilité : l'utilisateur doit avoir un billet payé,
# présentiel et avec hôtel inclus.
# ------------------------------------------------------------
def check_eligibility(s: Session, user_id: int) -> None:
    repo = EnrollmentRepository(s)
    enrollment = repo.get_by_user(user_id)
    if not enrollment:
        raise NotFoundError("enrollment not found")

    ticket = repo.get_ticket(enrollment.id)
    if not ticket or ticket.status != TicketStatus.PAID:
        logger.info(f"user {user_id} refused: ticket missing or not paid")
        raise ForbiddenError("ticket not paid")

    ticket_type = repo.get_ticket_type(ticket.ticket_type_id)
    if not ticket_type or ticket_type.is_remote or not ticket_type.includes_hotel:
        logger.info(f"user {user_id} refused: ticket type without hotel")
        raise ForbiddenError("ticket type does not include hotel")


def get_room_or_404(s: Session, room_id: int) -> Room:
    room = RoomRepository(s).get(room_id)
    if not room:
        raise NotFoundError("room not found")
    return room


def check_room_capacity(s: Session, room_id: int) -> Room:
    room = get_room_or_404(s, room_id)
    occupancy = BookingRepository(s).count_by_room(room.id)
    if occupancy >= room.capacity:
        logger.info(f"room {room.id} full ({occupancy}/{room.capacity})")
        raise ForbiddenError("room is full")
    return room


# ------------------------------------------------------------
# Création : l'existence de la chambre est vérifiée avant
# l'éligibilité : une chambre inconnue donne toujours 404.
# ------------------------------------------------------------
def create_booking(s: Session, user_id: int, room_id: int) -> Booking:
    get_room_or_404(s, room_id)
    check_eligibility(s, user_id)

    repo = BookingRepository(s)
    if repo.get_by_user(user_id):
        logger.info(f"user {user_id} refused: already has a booking")
        raise ForbiddenError("user already has a booking")

    check_room_capacity(s, room_id)
    created = repo.create(Booking(user_id=user_id, room_id=room_id))
    logger.info(f"booking {created.id} created: user {user_id} -> room {room_id}")
    return created


def get_current_booking(s: Session, user_id: int) -> tuple[Booking, Room]:
    if not EnrollmentRepository(s).get_by_user(user_id):
        raise NotFoundError("enrollment not found")

    booking = BookingRepository(s).get_by_user(user_id)
    if not booking:
        raise NotFoundError("booking not found")
    return booking, get_room_or_404(s, booking.room_id)


# ------------------------------------------------------------
# Changement de chambre : la réservation n'est modifiée que si
# la nouvelle chambre existe et a une place libre.
# ------------------------------------------------------------
def change_room(s: Session, user_id: int, booking_id: int, room_id: int) -> tuple[Booking, int]:
    repo = BookingRepository(s)
    booking = repo.get_by_user(user_id)
    if not booking or booking.id != booking_id:
        raise NotFoundError("booking not found")

    check_room_capacity(s, room_id)
    previous_room_id = booking.room_id
    updated = repo.update_room(booking.id, room_id)
    logger.info(f"booking {updated.id} moved: room {previous_room_id} -> {room_id}")
    return updated, previous_room_id


def list_hotels(s: Session, user_id: int) -> list[Hotel]:
    check_eligibility(s, user_id)
    hotels = HotelRepository(s).list()
    if not hotels:
        raise NotFoundError("no hotel available")
    return list(hotels)


def get_hotel_rooms(s: Session, user_id: int, hotel_id: int) -> tuple[Hotel, list[Room]]:
    check_eligibility(s, user_id)
    hotel = HotelRepository(s).get(hotel_id)
    if not hotel:
        raise NotFoundError("hotel not found")
    return hotel, list(RoomRepository(s).list_by_hotel(hotel.id))
