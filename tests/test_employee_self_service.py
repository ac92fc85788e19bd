def test_profile_read_and_update(client, employee, auth_headers):
    headers = auth_headers(employee)
    profile = client.get("/api/employees/profile", headers=headers)
    assert profile.json()["data"]["email"] == employee.email

    response = client.put(
        "/api/employees/profile",
        headers=headers,
        json={"phone": "555-0100", "address": "1 Main St", "salary": 99999, "role": "admin"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == "555-0100"
    assert data["address"] == "1 Main St"
    # Salary and role are not self-editable
    assert data["salary"] == 5000.0
    assert data["role"] == "employee"


def test_profile_name_cannot_be_blank(client, employee, auth_headers):
    response = client.put("/api/employees/profile", headers=auth_headers(employee), json={"name": ""})
    assert response.status_code == 400


def test_notifications_feed(client, admin_user, employee, auth_headers):
    client.post(
        "/api/admin/salary",
        headers=auth_headers(admin_user),
        json={"employee": employee.id, "month": 6, "year": 2024, "bonus": 10},
    )
    feed = client.get("/api/notifications/me", headers=auth_headers(employee)).json()
    assert feed["count"] == 1
    note = feed["data"][0]
    assert note["isRead"] is False

    marked = client.patch(f"/api/notifications/{note['id']}/read", headers=auth_headers(employee))
    assert marked.json()["data"]["isRead"] is True

    unread = client.get("/api/notifications/me?unread_only=true", headers=auth_headers(employee)).json()
    assert unread["count"] == 0


def test_cannot_mark_someone_elses_notification(client, admin_user, employee, make_employee, auth_headers):
    client.post(
        "/api/admin/salary",
        headers=auth_headers(admin_user),
        json={"employee": employee.id, "month": 6, "year": 2024},
    )
    note_id = client.get("/api/notifications/me", headers=auth_headers(employee)).json()["data"][0]["id"]
    stranger = make_employee(name="Stranger")
    response = client.patch(f"/api/notifications/{note_id}/read", headers=auth_headers(stranger))
    assert response.status_code == 404
