# expenses/models.py
from extensions import db
from rooms.models import TIMESTAMP_FORMAT, new_id, utcnow

EXPENSE_CATEGORIES = ("Rent", "Utilities", "Groceries")
SPLIT_EQUAL = "equal"


class Expense(db.Model):
    __tablename__ = "expenses"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    room_id = db.Column(
        db.String(36),
        db.ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category = db.Column(db.String(32), nullable=False)     # Rent | Utilities | Groceries
    description = db.Column(db.String(255), nullable=True)
    amount = db.Column(db.Float, nullable=False)
    paid_by = db.Column(
        db.String(36),
        db.ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    split_type = db.Column(db.String(16), nullable=False, default=SPLIT_EQUAL)  # stored, not interpreted
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.CheckConstraint("amount > 0", name="ck_expense_amount_positive"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "room_id": self.room_id,
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "paid_by": self.paid_by,
            "split_type": self.split_type,
            "created_at": self.created_at.strftime(TIMESTAMP_FORMAT),
        }

    def __repr__(self):
        return f"<Expense {self.category} {self.amount:.2f} room={self.room_id}>"
