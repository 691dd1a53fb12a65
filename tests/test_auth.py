"""Authentication API tests."""

REGISTRATION = {
    "name": "Ana",
    "email": "ana@x.com",
    "password": "abcdef",
    "password_confirmation": "abcdef",
}


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_register_user(client):
    """Test user registration."""
    response = client.post("/register", json=REGISTRATION)
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user"]["email"] == "ana@x.com"
    assert data["user"]["name"] == "Ana"
    assert data["user"]["role"] == "user"
    assert data["user"]["is_verified"] is False
    assert data["token"]


def test_register_never_returns_password(client):
    """Test that no form of the password appears in the response."""
    response = client.post("/register", json=REGISTRATION)
    user = response.json()["user"]
    assert "password" not in user
    assert "password_hash" not in user
    assert "abcdef" not in response.text


def test_register_token_resolves_to_new_user(client):
    """Test that the token issued at registration authenticates as that user."""
    data = client.post("/register", json=REGISTRATION).json()

    response = client.get("/user", headers=bearer(data["token"]))
    assert response.status_code == 200
    assert response.json()["id"] == data["user"]["id"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/register",
        json={
            "name": "Duplicate",
            "email": auth_headers.email,
            "password": "password123",
            "password_confirmation": "password123",
        },
    )
    assert response.status_code == 422
    assert response.json() == {"errors": {"email": ["The email has already been taken."]}}


def test_register_duplicate_email_with_other_errors(client, auth_headers):
    """Test that a taken email is reported alongside other field errors."""
    response = client.post(
        "/register",
        json={"email": auth_headers.email, "password": "abc", "password_confirmation": "abc"},
    )
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors["email"] == ["The email has already been taken."]
    assert errors["name"] == ["The name field is required."]
    assert errors["password"] == ["The password must be at least 6 characters."]


def test_register_validation_errors(client):
    """Test that every missing field is reported."""
    response = client.post("/register", json={})
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"name", "email", "password"}
    assert errors["password"] == ["The password field is required."]


def test_register_password_confirmation_mismatch(client):
    """Test that the password must match its confirmation."""
    response = client.post(
        "/register", json={**REGISTRATION, "password_confirmation": "abcdeg"}
    )
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "password": ["The password confirmation does not match."]
    }


def test_register_invalid_email(client):
    """Test that a malformed email is rejected."""
    response = client.post("/register", json={**REGISTRATION, "email": "not-an-email"})
    assert response.status_code == 422
    assert response.json()["errors"] == {"email": ["The email must be a valid email address."]}


def test_register_non_string_name(client):
    """Test that a non-string field is reported in the same error shape."""
    response = client.post("/register", json={**REGISTRATION, "name": 42})
    assert response.status_code == 422
    assert response.json()["errors"] == {"name": ["The name must be a string."]}


def test_register_malformed_json(client):
    """Test that an unparseable body is a 422, not a server error."""
    response = client.post(
        "/register", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422
    assert "body" in response.json()["errors"]


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["id"] == auth_headers.user_id
    assert data["token"] != auth_headers.token


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "wrongpass"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_login_failures_are_indistinguishable(client, auth_headers):
    """Test that unknown email and wrong password produce the same response."""
    wrong_password = client.post(
        "/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/login", json={"email": "nobody@example.com", "password": "wrongpass"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_login_missing_fields(client):
    """Test login without credentials."""
    response = client.post("/login", json={"email": "", "password": None})
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "email": ["The email field is required."],
        "password": ["The password field is required."],
    }


def test_login_does_not_revoke_previous_tokens(client, auth_headers):
    """Test that each login adds a session without ending older ones."""
    client.post("/login", json={"email": auth_headers.email, "password": "testpass123"})

    response = client.get("/user", headers=auth_headers)
    assert response.status_code == 200


def test_logout(client, auth_headers):
    """Test that logout revokes the token used for the request."""
    response = client.post("/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}

    response = client.get("/user", headers=auth_headers)
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthenticated."}


def test_logout_twice(client, auth_headers):
    """Test that a revoked token cannot log out again."""
    assert client.post("/logout", headers=auth_headers).status_code == 200
    assert client.post("/logout", headers=auth_headers).status_code == 401


def test_logout_keeps_other_tokens(client, auth_headers):
    """Test that logout only revokes one of the user's tokens."""
    second = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    ).json()["token"]

    assert client.post("/logout", headers=bearer(second)).status_code == 200

    assert client.get("/user", headers=bearer(second)).status_code == 401
    assert client.get("/user", headers=auth_headers).status_code == 200


def test_logout_requires_token(client):
    """Test that logout without a bearer token is rejected."""
    response = client.post("/logout")
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthenticated."}


def test_invalid_token_rejected(client, auth_headers):
    """Test tokens with a forged secret or unknown id."""
    token_id = auth_headers.token.split("|")[0]
    for token in (
        f"{token_id}|forged",
        "999999|whatever",
        "garbage",
        "x|y",
        "99999999999999999999999|abc",
        f"{2**31}|abc",
    ):
        response = client.get("/user", headers=bearer(token))
        assert response.status_code == 401


def test_update_password(client, auth_headers):
    """Test changing the password."""
    response = client.post(
        "/update-password",
        headers=auth_headers,
        json={
            "current_password": "testpass123",
            "new_password": "newpass456",
            "new_password_confirmation": "newpass456",
        },
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Password updated successfully"}

    old = client.post("/login", json={"email": auth_headers.email, "password": "testpass123"})
    new = client.post("/login", json={"email": auth_headers.email, "password": "newpass456"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_update_password_wrong_current(client, auth_headers):
    """Test that a wrong current password leaves the password unchanged."""
    response = client.post(
        "/update-password",
        headers=auth_headers,
        json={
            "current_password": "not-my-password",
            "new_password": "newpass456",
            "new_password_confirmation": "newpass456",
        },
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Current password is incorrect"}

    response = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200


def test_update_password_validates_before_checking_current(client, auth_headers):
    """Test that field errors win over a wrong current password."""
    response = client.post(
        "/update-password",
        headers=auth_headers,
        json={
            "current_password": "not-my-password",
            "new_password": "short",
            "new_password_confirmation": "other",
        },
    )
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "new_password": [
            "The new password must be at least 6 characters.",
            "The new password confirmation does not match.",
        ]
    }


def test_update_password_keeps_existing_tokens(client, auth_headers):
    """Test that changing the password does not end other sessions."""
    client.post(
        "/update-password",
        headers=auth_headers,
        json={
            "current_password": "testpass123",
            "new_password": "newpass456",
            "new_password_confirmation": "newpass456",
        },
    )
    assert client.get("/user", headers=auth_headers).status_code == 200


def test_update_password_requires_token(client):
    """Test that password changes need authentication."""
    response = client.post(
        "/update-password",
        json={
            "current_password": "testpass123",
            "new_password": "newpass456",
            "new_password_confirmation": "newpass456",
        },
    )
    assert response.status_code == 401


def test_session_lifecycle(client):
    """Register, log in, log out, and log in again."""
    response = client.post("/register", json=REGISTRATION)
    assert response.status_code == 201
    t1 = response.json()["token"]

    response = client.post("/login", json={"email": "ana@x.com", "password": "abcdef"})
    assert response.status_code == 200
    t2 = response.json()["token"]
    assert t2 != t1

    assert client.post("/logout", headers=bearer(t2)).status_code == 200

    response = client.post("/login", json={"email": "ana@x.com", "password": "abcdef"})
    assert response.status_code == 200
    t3 = response.json()["token"]
    assert t3 not in (t1, t2)

    assert client.get("/user", headers=bearer(t1)).status_code == 200
    assert client.get("/user", headers=bearer(t2)).status_code == 401
    assert client.get("/user", headers=bearer(t3)).status_code == 200


def test_register_rejects_unstorable_password(client):
    """Test that NUL bytes and lone surrogates in a new password are field errors."""
    response = client.post(
        "/register",
        json={**REGISTRATION, "password": "abc\x00def", "password_confirmation": "abc\x00def"},
    )
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "password": ["The password contains invalid characters."]
    }

    response = client.post(
        "/register",
        content=(
            '{"name": "Ana", "email": "ana@x.com", '
            '"password": "ab\\ud800cdef", "password_confirmation": "ab\\ud800cdef"}'
        ),
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "password": ["The password contains invalid characters."]
    }


def test_login_with_unhashable_password_is_invalid_credentials(client, auth_headers):
    """Test that passwords bcrypt cannot take fail like any other wrong password."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "abc\x00def"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}

    response = client.post(
        "/login",
        content=f'{{"email": "{auth_headers.email}", "password": "ab\\ud800cdef"}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}


def test_update_password_rejects_unstorable_password(client, auth_headers):
    """Test that a new password with a NUL byte is a field error."""
    response = client.post(
        "/update-password",
        headers=auth_headers,
        json={
            "current_password": "testpass123",
            "new_password": "new\x00pass",
            "new_password_confirmation": "new\x00pass",
        },
    )
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "new_password": ["The new password contains invalid characters."]
    }

    response = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200


def test_update_password_unhashable_current_password(client, auth_headers):
    """Test that an unhashable current password is reported as incorrect."""
    response = client.post(
        "/update-password",
        content=(
            '{"current_password": "ab\\ud800cd", '
            '"new_password": "newpass456", "new_password_confirmation": "newpass456"}'
        ),
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Current password is incorrect"}


def test_register_email_differing_only_in_case(client, auth_headers):
    """Test that email uniqueness ignores case."""
    response = client.post(
        "/register",
        json={
            "name": "Shouting",
            "email": auth_headers.email.upper(),
            "password": "password123",
            "password_confirmation": "password123",
        },
    )
    assert response.status_code == 422
    assert response.json() == {"errors": {"email": ["The email has already been taken."]}}


def test_login_email_ignores_case(client, auth_headers):
    """Test that login finds the user whatever the email's case."""
    response = client.post(
        "/login", json={"email": auth_headers.email.upper(), "password": "testpass123"}
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == auth_headers.user_id
