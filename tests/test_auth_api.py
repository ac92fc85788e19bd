from fastapi import status


def test_login_success(client, admin_user):
    """Test successful login with valid credentials."""
    response = client.post(
        "/api/auth/login",
        json={"email": admin_user.email, "password": "AdminPassword123!"}
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["success"] is True
    assert body["data"]["accessToken"]
    assert body["data"]["tokenType"] == "bearer"
    assert body["data"]["user"]["role"] == "admin"


def test_login_invalid_credentials(client):
    """Test login failure with wrong password."""
    response = client.post("/api/auth/login", json={"email": "nobody@staffhub.io", "password": "wrong"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"success": False, "error": "Incorrect email or password"}


def test_register_then_me(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Sam Lee", "email": "sam@staffhub.io", "password": "Secret123!"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    token = response.json()["data"]["accessToken"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "sam@staffhub.io"
    assert me.json()["data"]["role"] == "employee"


def test_register_ignores_role_in_payload(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Eve", "email": "eve@staffhub.io", "password": "Secret123!", "role": "admin"}
    )
    assert response.status_code == 201
    assert response.json()["data"]["user"]["role"] == "employee"


def test_missing_token_is_unauthorized(client):
    response = client.get("/api/admin/dashboard")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["success"] is False


def test_employee_cannot_use_admin_routes(client, employee, auth_headers):
    response = client.get("/api/admin/employees", headers=auth_headers(employee))
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["success"] is False


def test_admin_cannot_use_employee_routes(client, admin_user, auth_headers):
    response = client.get("/api/employees/tasks", headers=auth_headers(admin_user))
    assert response.status_code == status.HTTP_403_FORBIDDEN
