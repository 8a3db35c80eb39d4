# expenses/service.py
import logging
import math

from expenses.models import EXPENSE_CATEGORIES, SPLIT_EQUAL, Expense
from rooms.models import Member
from rooms.service import require_room, room_balance
from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _is_positive_amount(amount):
    # bool is an int subclass; "12.5" strings are rejected like any non-number
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    try:
        value = float(amount)
    except OverflowError:
        # integers beyond float range cannot be stored
        return False
    return math.isfinite(value) and value > 0


class ExpenseService:
    def __init__(self, session):
        self.session = session

    def add_expense(self, room_id, category, amount, paid_by, description=None):
        """
        Record an expense paid by a member of the room.

        Returns the stored expense together with the room balance recomputed
        from everything currently in the room.
        """
        room = require_room(self.session, room_id)

        if category not in EXPENSE_CATEGORIES:
            raise ValidationError(f"Category must be one of: {', '.join(EXPENSE_CATEGORIES)}")

        if not _is_positive_amount(amount):
            raise ValidationError("Amount must be positive")

        if description is not None and not isinstance(description, str):
            raise ValidationError("Description must be text")

        payer = None
        if isinstance(paid_by, str):
            payer = self.session.query(Member).filter_by(id=paid_by, room_id=room.id).first()
        if payer is None:
            raise ValidationError("Invalid member")

        expense = Expense(
            room_id=room.id,
            category=category,
            description=description or None,
            amount=float(amount),
            paid_by=payer.id,
            split_type=SPLIT_EQUAL,
        )
        self.session.add(expense)
        self.session.commit()
        logger.info("Added %s expense %.2f to room %s", category, expense.amount, room.id)

        return expense, room_balance(self.session, room.id)

    def delete_expense(self, room_id, expense_id):
        room = require_room(self.session, room_id)

        # scoped to the room so an id from another room is simply not found
        expense = self.session.query(Expense).filter_by(id=expense_id, room_id=room.id).first()
        if expense is None:
            raise NotFoundError("Expense not found")

        self.session.delete(expense)
        self.session.commit()
        logger.info("Deleted expense %s from room %s", expense_id, room.id)
        return {"success": True}
