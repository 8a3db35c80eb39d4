# rooms/service.py
import logging

from sqlalchemy.exc import IntegrityError

from expenses.models import Expense
from rooms.models import MAX_MEMBERS, Member, Room
from utils.balance import calculate_balance
from utils.codes import generate_room_code, normalize_room_code
from utils.errors import (
    CapacityError,
    CodeSpaceExhaustedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_CODE_ATTEMPTS = 100


def _clean_text(value):
    """Trimmed string, or None when the value is missing, not text or blank."""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def require_room(session, room_id) -> Room:
    room = session.get(Room, room_id) if isinstance(room_id, str) else None
    if room is None:
        raise NotFoundError("Room not found")
    return room


def room_members(session, room_id):
    return (
        session.query(Member)
        .filter_by(room_id=room_id)
        .order_by(Member.created_at.asc(), Member.seat.asc())
        .all()
    )


def room_balance(session, room_id):
    members = room_members(session, room_id)
    expenses = session.query(Expense).filter_by(room_id=room_id).all()
    return calculate_balance(members, expenses)


class RoomService:
    """
    Room lifecycle: creation with a shareable code, joining, and read views.

    The session is handed in by the caller (the request's db.session in the
    app, an isolated in-memory session in tests).
    """

    def __init__(self, session, max_code_attempts=DEFAULT_CODE_ATTEMPTS, code_generator=None):
        self.session = session
        self.max_code_attempts = max_code_attempts
        self.code_generator = code_generator or generate_room_code

    def create_room(self, name) -> Room:
        name = _clean_text(name)
        if not name:
            raise ValidationError("Room name is required")

        for attempt in range(1, self.max_code_attempts + 1):
            code = self.code_generator()
            if self.session.query(Room.id).filter_by(code=code).first():
                logger.debug("Room code %s already taken (attempt %d)", code, attempt)
                continue

            room = Room(code=code, name=name)
            self.session.add(room)
            try:
                self.session.commit()
            except IntegrityError:
                # another request inserted the same code between check and insert
                self.session.rollback()
                logger.debug("Room code %s lost an insert race (attempt %d)", code, attempt)
                continue

            logger.info("Created room %s (%s)", room.code, room.id)
            return room

        raise CodeSpaceExhaustedError(
            f"No unused room code found after {self.max_code_attempts} attempts"
        )

    def join_room(self, code, member_name):
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("Room code is required")
        member_name = _clean_text(member_name)
        if not member_name:
            raise ValidationError("Member name is required")

        room = self.session.query(Room).filter_by(code=normalize_room_code(code)).first()
        if room is None:
            raise NotFoundError("Invalid code")

        members = room_members(self.session, room.id)
        self._check_can_join(members, member_name)

        member = Member(
            room_id=room.id,
            name=member_name,
            name_key=member_name.lower(),
            seat=self._free_seat(members),
        )
        self.session.add(member)
        try:
            self.session.commit()
        except IntegrityError:
            # a concurrent join took the seat or the name; report what it was
            self.session.rollback()
            self._check_can_join(room_members(self.session, room.id), member_name)
            raise

        logger.info("Member %r joined room %s", member.name, room.code)
        return room, member

    @staticmethod
    def _check_can_join(members, member_name):
        if len(members) >= MAX_MEMBERS:
            raise CapacityError("Room full")
        key = member_name.lower()
        if any(m.name.strip().lower() == key for m in members):
            raise ConflictError("Name taken")

    @staticmethod
    def _free_seat(members):
        # a member may have left (cascade delete), so the count is not the next seat
        taken = {m.seat for m in members}
        return min(seat for seat in range(1, MAX_MEMBERS + 1) if seat not in taken)

    def get_room_detail(self, room_id):
        room = require_room(self.session, room_id)
        members = room_members(self.session, room.id)
        expenses = (
            self.session.query(Expense)
            .filter_by(room_id=room.id)
            .order_by(Expense.created_at.desc())
            .all()
        )
        return {
            "room": room,
            "members": members,
            "expenses": expenses,
            "balance": calculate_balance(members, expenses),
        }

    def get_balance(self, room_id):
        room = require_room(self.session, room_id)
        return room_balance(self.session, room.id)
