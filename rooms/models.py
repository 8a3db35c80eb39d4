# rooms/models.py
import uuid
from datetime import datetime, timezone

from extensions import db

MAX_MEMBERS = 2
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def new_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Room(db.Model):
    __tablename__ = "rooms"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    code = db.Column(db.String(6), unique=True, nullable=False, index=True)  # shareable join code
    name = db.Column(db.String(120), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    members = db.relationship(
        "Member", backref="room", cascade="all, delete-orphan", passive_deletes=True,
        order_by="Member.seat",
    )
    expenses = db.relationship(
        "Expense", backref="room", cascade="all, delete-orphan", passive_deletes=True,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "created_at": self.created_at.strftime(TIMESTAMP_FORMAT),
        }

    def __repr__(self):
        return f"<Room {self.code} {self.name!r}>"


class Member(db.Model):
    __tablename__ = "members"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    room_id = db.Column(
        db.String(36),
        db.ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(80), nullable=False)
    name_key = db.Column(db.String(80), nullable=False)   # lowercased name, unique per room
    seat = db.Column(db.Integer, nullable=False)          # 1-based join position
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    expenses_paid = db.relationship(
        "Expense", backref="payer", cascade="all, delete-orphan", passive_deletes=True,
    )

    # the room cap and case-insensitive names hold even for concurrent joins
    __table_args__ = (
        db.UniqueConstraint("room_id", "name_key", name="uq_member_room_name"),
        db.UniqueConstraint("room_id", "seat", name="uq_member_room_seat"),
        db.CheckConstraint(f"seat BETWEEN 1 AND {MAX_MEMBERS}", name="ck_member_seat"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "room_id": self.room_id,
            "name": self.name,
            "created_at": self.created_at.strftime(TIMESTAMP_FORMAT),
        }

    def __repr__(self):
        return f"<Member {self.name!r} room={self.room_id}>"
