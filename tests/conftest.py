import pytest

from app import create_app
from config import TestConfig
from expenses.service import ExpenseService
from extensions import db
from rooms.service import RoomService


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def rooms(app):
    return RoomService(db.session)


@pytest.fixture
def expenses(app):
    return ExpenseService(db.session)


@pytest.fixture
def apartment(rooms):
    """A full room: 'Apt 4B' with Alex (joined first) and Sam."""
    room = rooms.create_room("Apt 4B")
    _, alex = rooms.join_room(room.code, "Alex")
    _, sam = rooms.join_room(room.code, "Sam")
    return room, alex, sam
