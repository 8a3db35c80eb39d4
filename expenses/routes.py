# expenses/routes.py
from flask import Blueprint, jsonify

from expenses.service import ExpenseService
from extensions import db
from utils.http import json_body

expenses_bp = Blueprint("expenses", __name__, url_prefix="/api/rooms")


# ✅ Add an expense and return the refreshed balance
@expenses_bp.route("/<room_id>/expenses", methods=["POST"])
def add_expense(room_id):
    data = json_body()
    expense, new_balance = ExpenseService(db.session).add_expense(
        room_id,
        category=data.get("category"),
        amount=data.get("amount"),
        paid_by=data.get("paidBy"),
        description=data.get("description"),
    )
    return jsonify({"expense": expense.to_dict(), "newBalance": new_balance.to_dict()}), 201


# ✅ Delete an expense (clients re-fetch the balance afterwards)
@expenses_bp.route("/<room_id>/expenses/<expense_id>", methods=["DELETE"])
def delete_expense(room_id, expense_id):
    result = ExpenseService(db.session).delete_expense(room_id, expense_id)
    return jsonify(result), 200
