# utils/http.py
from flask import request


def json_body():
    """Request JSON as a dict; missing, malformed or non-object bodies count as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
