import pytest

from library_app import create_app
from library_app.config import TestingConfig
from library_app.extensions import db


@pytest.fixture
def app():
    # fresh in-memory database per test
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    with app.app_context():
        yield db.session


class DummyNotifier:
    def __init__(self, fail_for=(), raise_for=()) -> None:
        self.messages = []
        self.fail_for = set(fail_for)
        self.raise_for = set(raise_for)

    def send_email(self, to_email, subject, body):
        if to_email in self.raise_for:
            raise RuntimeError("smtp down")
        if to_email in self.fail_for:
            return False, "rejected"
        self.messages.append((to_email, subject, body))
        return True, None


@pytest.fixture
def notifier():
    return DummyNotifier()


def seed(client, users=(), books=(), borrows=()):
    """Posts users, books and borrows through the API and returns their ids."""
    ids = {"users": [], "books": []}
    for name, email in users:
        r = client.post("/api/users", json={"name": name, "email": email})
        assert r.status_code == 201, r.get_json()
        ids["users"].append(r.get_json()["data"]["id"])
    for title, author in books:
        r = client.post("/api/books", json={"title": title, "author": author})
        assert r.status_code == 201, r.get_json()
        ids["books"].append(r.get_json()["data"]["id"])
    for book_id, user_id, start, until in borrows:
        r = client.post("/api/borrowedbooks", json={
            "book_id": book_id,
            "user_id": user_id,
            "borrowed_from": start,
            "borrowed_until": until,
        })
        assert r.status_code == 201, r.get_json()
    return ids
