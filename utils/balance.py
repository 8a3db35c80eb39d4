# utils/balance.py
from dataclasses import dataclass, field
from typing import Dict, Optional

# balances inside this band count as even; equal division leaves float noise behind
SETTLED_THRESHOLD = 0.01
SETTLED_MESSAGE = "All settled up!"


@dataclass
class MemberBalance:
    paid: float
    owes: float
    balance: float

    def to_dict(self):
        return {"paid": self.paid, "owes": self.owes, "balance": self.balance}


@dataclass
class BalanceResult:
    total_expenses: float = 0.0
    per_person: float = 0.0
    breakdown: Dict[str, MemberBalance] = field(default_factory=dict)
    settlement: Optional[str] = None

    def to_dict(self):
        return {
            "totalExpenses": self.total_expenses,
            "perPerson": self.per_person,
            "breakdown": {member_id: mb.to_dict() for member_id, mb in self.breakdown.items()},
            "settlement": self.settlement,
        }


def calculate_balance(members, expenses) -> BalanceResult:
    """
    Split the room's expenses equally across its members.

    `members` need `id` and `name`; `expenses` need `amount` and `paid_by`.
    A positive balance means the member paid more than their share.
    The settlement sentence is only produced for exactly two members.
    """
    total = sum(e.amount for e in expenses)
    per_person = total / len(members) if members else 0

    breakdown = {}
    for member in members:
        paid = sum(e.amount for e in expenses if e.paid_by == member.id)
        breakdown[member.id] = MemberBalance(paid=paid, owes=per_person, balance=paid - per_person)

    settlement = None
    if len(members) == 2:
        m1, m2 = members
        b1 = breakdown[m1.id].balance
        b2 = breakdown[m2.id].balance
        if b1 > SETTLED_THRESHOLD:
            settlement = f"{m2.name} owes {m1.name} ${abs(b1):.2f}"
        elif b2 > SETTLED_THRESHOLD:
            settlement = f"{m1.name} owes {m2.name} ${abs(b2):.2f}"
        else:
            settlement = SETTLED_MESSAGE

    return BalanceResult(
        total_expenses=total,
        per_person=per_person,
        breakdown=breakdown,
        settlement=settlement,
    )
