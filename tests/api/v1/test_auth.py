from unittest.mock import patch

from eventboard.crud import crud_organizer, crud_session, crud_user
from eventboard.models.session import Session as SessionModel
from tests.utils.user import DEFAULT_PASSWORD, create_user_with_session


def test_register_then_login_sets_session_cookie(client, db_session):
    response = client.post("/api/v1/register", json={"username": "acme", "password": "s3cret"})
    assert response.status_code == 201
    assert response.json() == {"message": "User acme registered"}

    response = client.post("/api/v1/login", json={"username": "acme", "password": "s3cret"})
    assert response.status_code == 200
    assert response.json() == {"message": "Session created"}

    set_cookie = response.headers["set-cookie"]
    assert "session_token=" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "samesite=none" in set_cookie.lower()

    user = crud_user.user.get_by_username(db_session, username="acme")
    token = response.cookies["session_token"]
    assert crud_session.session.get_session_by_token(db_session, token=token).user_id == user.id
    # Only the hash is stored
    assert user.password != "s3cret"


def test_register_duplicate_username_conflicts(client, db_session):
    create_user_with_session(db_session, username="acme")

    response = client.post("/api/v1/register", json={"username": "acme", "password": "x"})

    assert response.status_code == 409
    assert response.json()["category"] == "conflict_error"


def test_register_race_on_username_conflicts(client, db_session):
    create_user_with_session(db_session, username="acme")

    # Both requests passed the lookup before either inserted
    with patch.object(crud_user.user, "get_by_username", return_value=None):
        response = client.post("/api/v1/register", json={"username": "acme", "password": "x"})

    assert response.status_code == 409
    assert response.json()["category"] == "conflict_error"


def test_login_rejects_wrong_password_and_unknown_user_alike(client, db_session):
    create_user_with_session(db_session, username="acme")

    wrong = client.post("/api/v1/login", json={"username": "acme", "password": "nope"})
    unknown = client.post("/api/v1/login", json={"username": "ghost", "password": "nope"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()
    assert "set-cookie" not in wrong.headers


def test_unknown_username_still_runs_a_password_check(client, db_session):
    create_user_with_session(db_session, username="acme")

    with patch("eventboard.api.v1.endpoints.auth.verify_against_dummy") as dummy_check:
        unknown = client.post("/api/v1/login", json={"username": "ghost", "password": "nope"})
        known = client.post("/api/v1/login", json={"username": "acme", "password": "nope"})

    assert unknown.status_code == known.status_code == 401
    dummy_check.assert_called_once_with("nope")


def test_each_login_opens_a_new_session(client, db_session):
    user, _ = create_user_with_session(db_session, username="acme")

    for _ in range(2):
        client.post("/api/v1/login", json={"username": "acme", "password": DEFAULT_PASSWORD})

    assert db_session.query(SessionModel).filter(SessionModel.user_id == user.id).count() == 3


def test_protected_endpoint_without_cookie(client):
    response = client.get("/api/v1/check_auth_status")

    assert response.status_code == 401
    assert response.json() == {
        "detail": "No session token found in cookies",
        "category": "authentication_error",
    }


def test_protected_endpoint_with_unknown_token(client):
    client.cookies.set("session_token", "not-a-real-token")

    response = client.get("/api/v1/check_auth_status")

    assert response.status_code == 401
    assert response.json()["detail"] == "Session not authenticated"


def test_check_auth_status_without_organizer_profile(auth_client):
    response = auth_client.get("/api/v1/check_auth_status")

    assert response.status_code == 200
    assert response.json() == {
        "username": "organizer_one",
        "name": "",
        "logo": None,
        "website": None,
    }


def test_check_auth_status_with_organizer_profile(client, db_session):
    _, token = create_user_with_session(db_session, username="acme", organizer_name="Acme Events")
    client.cookies.set("session_token", token)

    response = client.get("/api/v1/check_auth_status")

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Events"


def test_logout_invalidates_session(auth_client, organizer_user, db_session):
    _, token = organizer_user

    response = auth_client.post("/api/v1/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}

    assert db_session.query(SessionModel).filter(SessionModel.token == token).count() == 0
    auth_client.cookies.set("session_token", token)
    assert auth_client.get("/api/v1/check_auth_status").status_code == 401


def test_update_password_then_login_with_new_one(auth_client):
    response = auth_client.put("/api/v1/update_password", json={"new_password": "fresh"})
    assert response.status_code == 200
    assert response.json() == {"message": "Password updated"}

    old = auth_client.post(
        "/api/v1/login", json={"username": "organizer_one", "password": DEFAULT_PASSWORD}
    )
    new = auth_client.post("/api/v1/login", json={"username": "organizer_one", "password": "fresh"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_delete_user_removes_user_sessions_and_profile(client, db_session):
    user, token = create_user_with_session(db_session, username="acme", organizer_name="Acme")
    user_id = user.id
    client.cookies.set("session_token", token)

    response = client.delete("/api/v1/delete_user")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted"}
    db_session.expire_all()
    assert crud_user.user.get(db_session, id=user_id) is None
    assert crud_organizer.organizer.get(db_session, id=user_id) is None
    assert db_session.query(SessionModel).filter(SessionModel.user_id == user_id).count() == 0
