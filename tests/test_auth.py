import re

import jwt as pyjwt
import pytest

from tests.conftest import TestConfig, bearer

REFERRAL_CODE_RE = re.compile(r"^GG[A-Z0-9]{6}$")


def test_register_returns_token_and_referral_code(register):
    r = register("a@x.com", "pw1", fullName="Asha Rao", city="Pune")

    assert r.status_code == 200
    body = r.get_json()
    assert body["message"] == "Registered successfully"
    assert body["token"]
    assert REFERRAL_CODE_RE.match(body["referralCode"])


def test_register_persists_profile_fields(register, get_user):
    register(
        "a@x.com", "pw1",
        fullName="Asha Rao", phone="+919876543210", country="India",
        city="Pune", zipCode="411001",
    )

    user = get_user("a@x.com")
    assert user["fullName"] == "Asha Rao"
    assert user["phone"] == "+919876543210"
    assert user["country"] == "India"
    assert user["city"] == "Pune"
    assert user["zipCode"] == "411001"
    assert user["balance"] == 0
    assert user["points"] == 0
    assert user["referredBy"] is None
    assert user["createdAt"]


def test_password_is_stored_hashed(app, register):
    from models.userModel import User

    register("a@x.com", "pw1")

    with app.app_context():
        user = User.query.filter_by(email="a@x.com").first()
        assert user.password_hash != "pw1"
        assert user.password_hash.startswith("$2")


@pytest.mark.parametrize("payload", [
    {},
    {"email": "a@x.com"},
    {"password": "pw1"},
    {"email": "", "password": "pw1"},
    {"email": "a@x.com", "password": ""},
])
def test_register_requires_email_and_password(client, payload):
    r = client.post("/api/auth/register", json=payload)

    assert r.status_code == 400
    assert r.get_json() == {"error": "Email and password required"}


def test_register_without_json_body(client):
    r = client.post("/api/auth/register", data="not json", content_type="text/plain")

    assert r.status_code == 400
    assert r.get_json() == {"error": "Email and password required"}


@pytest.mark.parametrize("path", ["/api/auth/register", "/api/auth/login"])
@pytest.mark.parametrize("body", [["a@x.com"], "a@x.com", 42])
def test_json_body_that_is_not_an_object(client, path, body):
    r = client.post(path, json=body)

    assert r.status_code == 400
    assert r.get_json() == {"error": "Email and password required"}


def test_duplicate_email_is_rejected_and_first_account_kept(register, login, get_user):
    first = register("a@x.com", "pw1", fullName="First").get_json()

    r = register("a@x.com", "other", fullName="Second")

    assert r.status_code == 400
    assert r.get_json() == {"error": "Email already registered"}

    user = get_user("a@x.com")
    assert user["fullName"] == "First"
    assert user["referralCode"] == first["referralCode"]
    assert login("a@x.com", "pw1").status_code == 200
    assert login("a@x.com", "other").status_code == 400


def test_login_token_carries_account_identity(client, register, login):
    register("a@x.com", "pw1")

    r = login("a@x.com", "pw1")

    assert r.status_code == 200
    body = r.get_json()
    assert body["message"] == "Login successful"

    claims = pyjwt.decode(body["token"], TestConfig.JWT_SECRET_KEY, algorithms=["HS256"])
    me = client.get("/api/user/me", headers=bearer(body["token"])).get_json()
    assert claims["id"] == str(me["id"])
    assert claims["email"] == "a@x.com"


def test_registration_token_matches_login_identity(register, login):
    reg_token = register("a@x.com", "pw1").get_json()["token"]
    login_token = login("a@x.com", "pw1").get_json()["token"]

    reg_claims = pyjwt.decode(reg_token, TestConfig.JWT_SECRET_KEY, algorithms=["HS256"])
    login_claims = pyjwt.decode(login_token, TestConfig.JWT_SECRET_KEY, algorithms=["HS256"])
    assert reg_claims["id"] == login_claims["id"]


def test_token_expires_after_seven_days(register):
    token = register("a@x.com", "pw1").get_json()["token"]

    claims = pyjwt.decode(token, TestConfig.JWT_SECRET_KEY, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_wrong_password_and_unknown_email_look_the_same(register, login):
    register("a@x.com", "pw1")

    wrong_password = login("a@x.com", "nope")
    unknown_email = login("ghost@x.com", "pw1")

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.get_json() == unknown_email.get_json() == {"error": "Invalid credentials"}


def test_login_requires_email_and_password(login):
    r = login("a@x.com", "")

    assert r.status_code == 400
    assert r.get_json() == {"error": "Email and password required"}
