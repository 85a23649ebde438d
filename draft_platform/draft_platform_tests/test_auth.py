from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

import draft_platform.draft_platform.draft_service.main as main_module
from draft_platform.draft_platform.draft_service.main import app
from draft_platform.draft_platform.draft_service.db import SessionLocal, get_db
from draft_platform.draft_platform.draft_service.models import User
from draft_platform.draft_platform.draft_service.auth import hash_password


def signup(client, username="virat", password="cover-drive-18"):
    return client.post("/api/signup", json={"username": username, "password": password})


def test_signup_and_login(client):
    register = signup(client)
    assert register.status_code == 201
    body = register.json()
    assert body["message"] == "User created successfully"
    user = body["user"]
    assert user["username"] == "virat"
    assert user["isAdmin"] is False
    assert user["budget"] == 9000000
    assert user["team"] == []
    assert user["id"]

    login = client.post("/api/login", json={"username": "virat", "password": "cover-drive-18"})
    assert login.status_code == 200
    assert login.json()["message"] == "Login successful"
    assert login.json()["user"]["id"] == user["id"]


def test_responses_never_include_password(client):
    register = signup(client, password="s3cret-pass")
    login = client.post("/api/login", json={"username": "virat", "password": "s3cret-pass"})

    for response in (register, login):
        assert "password" not in response.json()["user"]
        assert "s3cret-pass" not in response.text


def test_password_is_stored_hashed(client):
    signup(client, password="plain-text")

    db = SessionLocal()
    try:
        stored = db.query(User).filter(User.username == "virat").one()
    finally:
        db.close()
    assert stored.password != "plain-text"
    assert stored.password.startswith("$pbkdf2-sha256$")


def test_signup_duplicate_username(client):
    assert signup(client).status_code == 201

    again = signup(client, password="different")
    assert again.status_code == 400
    assert again.json()["detail"] == "Username already exists"


def test_signup_race_rejected_by_unique_index(client, monkeypatch):
    db = SessionLocal()
    try:
        db.add(User(username="rohit", password=hash_password("pull-shot")))
        db.commit()
    finally:
        db.close()

    # Simulate a concurrent signup that passed the existence check first
    monkeypatch.setattr(main_module, "find_user", lambda db, username: None)

    response = signup(client, username="rohit")
    assert response.status_code == 400
    assert response.json()["detail"] == "Username already exists"


def test_signup_missing_fields(client):
    response = client.post("/api/signup", json={"username": "nopass"})
    assert response.status_code == 422


def test_login_invalid_password(client):
    signup(client)
    bad_login = client.post("/api/login", json={"username": "virat", "password": "wrong"})
    assert bad_login.status_code == 400
    assert bad_login.json()["detail"] == "Invalid password"


def test_login_unknown_user(client):
    response = client.post("/api/login", json={"username": "ghost", "password": "anything"})
    assert response.status_code == 400
    assert response.json()["detail"] == "User not found"


@pytest.fixture
def broken_db():
    session = MagicMock(spec=Session)
    session.query.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    app.dependency_overrides[get_db] = lambda: session
    yield session
    app.dependency_overrides.pop(get_db, None)


def test_signup_database_failure(client, broken_db):
    response = signup(client)
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["error"] == "Error creating user"
    assert "connection refused" in detail["details"]
    broken_db.rollback.assert_called_once()


def test_login_database_failure(client, broken_db):
    response = client.post("/api/login", json={"username": "virat", "password": "x"})
    assert response.status_code == 500
    assert response.json()["detail"]["error"] == "Error logging in"
    assert "connection refused" in response.json()["detail"]["details"]
