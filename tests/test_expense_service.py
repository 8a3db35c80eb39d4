import pytest

from expenses.models import Expense
from extensions import db
from utils.errors import NotFoundError, ValidationError


def test_add_expense_returns_expense_and_new_balance(expenses, apartment):
    room, alex, _ = apartment

    expense, balance = expenses.add_expense(room.id, "Rent", 1200, alex.id, description="October")

    assert expense.category == "Rent"
    assert expense.amount == 1200.0
    assert expense.description == "October"
    assert expense.paid_by == alex.id
    assert expense.split_type == "equal"
    assert balance.total_expenses == 1200
    assert balance.per_person == 600
    assert balance.settlement == "Sam owes Alex $600.00"


def test_balance_after_add_reflects_all_room_expenses(expenses, apartment):
    room, alex, sam = apartment
    expenses.add_expense(room.id, "Rent", 1000, alex.id)

    _, balance = expenses.add_expense(room.id, "Utilities", 1000, sam.id)

    assert balance.total_expenses == 2000
    assert balance.settlement == "All settled up!"


def test_blank_description_is_stored_as_null(expenses, apartment):
    room, alex, _ = apartment
    expense, _ = expenses.add_expense(room.id, "Groceries", 12.5, alex.id, description="")
    assert expense.description is None


def test_add_expense_unknown_room(expenses, apartment):
    _, alex, _ = apartment
    with pytest.raises(NotFoundError) as exc:
        expenses.add_expense("missing", "Rent", 10, alex.id)
    assert exc.value.message == "Room not found"


@pytest.mark.parametrize("category", ["Travel", "rent", "", None])
def test_add_expense_rejects_unknown_category(expenses, apartment, category):
    room, alex, _ = apartment
    with pytest.raises(ValidationError) as exc:
        expenses.add_expense(room.id, category, 10, alex.id)
    assert exc.value.message == "Category must be one of: Rent, Utilities, Groceries"


@pytest.mark.parametrize("amount", [
    0, -5, -0.01, "12", None, True, float("nan"), float("inf"), int("9" * 400),
])
def test_add_expense_rejects_bad_amounts(expenses, apartment, amount):
    room, alex, _ = apartment
    with pytest.raises(ValidationError) as exc:
        expenses.add_expense(room.id, "Rent", amount, alex.id)
    assert exc.value.message == "Amount must be positive"
    assert Expense.query.count() == 0


def test_add_expense_rejects_non_text_description(expenses, apartment):
    room, alex, _ = apartment
    with pytest.raises(ValidationError):
        expenses.add_expense(room.id, "Rent", 10, alex.id, description=["x"])


def test_add_expense_rejects_payer_from_other_room(rooms, expenses, apartment):
    room, _, _ = apartment
    other = rooms.create_room("Other place")
    _, stranger = rooms.join_room(other.code, "Jordan")

    with pytest.raises(ValidationError) as exc:
        expenses.add_expense(room.id, "Rent", 10, stranger.id)
    assert exc.value.message == "Invalid member"


@pytest.mark.parametrize("paid_by", ["nobody", None, 7])
def test_add_expense_rejects_unknown_payer(expenses, apartment, paid_by):
    room, _, _ = apartment
    with pytest.raises(ValidationError) as exc:
        expenses.add_expense(room.id, "Rent", 10, paid_by)
    assert exc.value.message == "Invalid member"


def test_delete_expense(expenses, apartment):
    room, alex, _ = apartment
    expense, _ = expenses.add_expense(room.id, "Rent", 10, alex.id)

    assert expenses.delete_expense(room.id, expense.id) == {"success": True}
    assert Expense.query.count() == 0


def test_delete_expense_from_wrong_room_is_not_found(rooms, expenses, apartment):
    room, alex, _ = apartment
    expense, _ = expenses.add_expense(room.id, "Rent", 10, alex.id)
    other = rooms.create_room("Other place")

    with pytest.raises(NotFoundError) as exc:
        expenses.delete_expense(other.id, expense.id)
    assert exc.value.message == "Expense not found"
    assert db.session.get(Expense, expense.id) is not None


def test_delete_expense_missing_room_or_expense(expenses, apartment):
    room, _, _ = apartment
    with pytest.raises(NotFoundError) as exc:
        expenses.delete_expense("missing", "whatever")
    assert exc.value.message == "Room not found"

    with pytest.raises(NotFoundError) as exc:
        expenses.delete_expense(room.id, "whatever")
    assert exc.value.message == "Expense not found"
