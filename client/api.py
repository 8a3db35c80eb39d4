# client/api.py
import os

import requests

DEFAULT_API_URL = os.getenv("BUDGET_API_URL", "http://localhost:3001/api")


class ApiError(Exception):
    """Non-2xx answer from the budget API; `message` is the server's error text."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BudgetClient:
    """
    Thin wrapper over the REST API.

    Usage:
        api = BudgetClient("http://localhost:3001/api")
        room = api.create_room("Apt 4B")
        joined = api.join_room(room["code"], "Alex")
    """

    def __init__(self, base_url=None, session=None, timeout=10):
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, path, payload=None):
        r = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        try:
            data = r.json()
        except ValueError:
            data = {}
        if not 200 <= r.status_code < 300:
            raise ApiError(data.get("error") or "Request failed", r.status_code)
        return data

    def create_room(self, name):
        return self._request("POST", "/rooms", {"name": name})

    def join_room(self, code, member_name):
        return self._request("POST", "/rooms/join", {"code": code, "memberName": member_name})

    def get_room(self, room_id):
        return self._request("GET", f"/rooms/{room_id}")

    def get_balance(self, room_id):
        return self._request("GET", f"/rooms/{room_id}/balance")

    def add_expense(self, room_id, category, amount, paid_by, description=None):
        payload = {"category": category, "amount": amount, "paidBy": paid_by}
        if description:
            payload["description"] = description
        return self._request("POST", f"/rooms/{room_id}/expenses", payload)

    def delete_expense(self, room_id, expense_id):
        return self._request("DELETE", f"/rooms/{room_id}/expenses/{expense_id}")
