from decimal import Decimal

from fastapi import status

from staffhub.models.salary import Salary


def _issue(client, headers, employee_id, **body):
    payload = {"employee": employee_id, "month": 6, "year": 2024, **body}
    return client.post("/api/admin/salary", headers=headers, json=payload)


def test_process_and_update_salary(client, admin_user, employee, auth_headers):
    headers = auth_headers(admin_user)
    response = _issue(client, headers, employee.id, bonus=250)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()["data"]
    assert data["baseAmount"] == 5000.0
    assert data["bonus"] == 250.0
    assert data["totalAmount"] == 5250.0
    assert data["month"] == 6 and data["year"] == 2024
    assert data["employee"]["name"] == employee.name

    updated = client.put(f"/api/admin/salary/{data['id']}", headers=headers, json={"bonus": 300})
    assert updated.status_code == 200
    body = updated.json()["data"]
    assert body["baseAmount"] == 5000.0
    assert body["bonus"] == 300.0
    assert body["totalAmount"] == 5300.0


def test_update_ignores_base_and_total_in_payload(client, admin_user, employee, auth_headers):
    headers = auth_headers(admin_user)
    salary_id = _issue(client, headers, employee.id, bonus=250).json()["data"]["id"]

    response = client.put(
        f"/api/admin/salary/{salary_id}",
        headers=headers,
        json={"baseAmount": 1, "totalAmount": 2, "bonus": 50},
    )
    data = response.json()["data"]
    assert data["baseAmount"] == 5000.0
    assert data["totalAmount"] == 5050.0


def test_update_null_bonus_clears_it(client, admin_user, employee, auth_headers):
    headers = auth_headers(admin_user)
    salary_id = _issue(client, headers, employee.id, bonus=250).json()["data"]["id"]

    moved = client.put(f"/api/admin/salary/{salary_id}", headers=headers, json={"month": 7})
    assert moved.json()["data"]["bonus"] == 250.0
    assert moved.json()["data"]["month"] == 7

    cleared = client.put(f"/api/admin/salary/{salary_id}", headers=headers, json={"bonus": None})
    assert cleared.status_code == 200
    data = cleared.json()["data"]
    assert data["bonus"] == 0.0
    assert data["totalAmount"] == 5000.0
    assert data["month"] == 7


def test_process_without_base_salary(client, admin_user, make_employee, auth_headers, db_session):
    unpaid = make_employee(salary=None)
    response = _issue(client, auth_headers(admin_user), unpaid.id)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False
    assert "base salary not set" in response.json()["error"]
    assert db_session.query(Salary).count() == 0


def test_process_unknown_employee(client, admin_user, auth_headers):
    response = _issue(client, auth_headers(admin_user), 9999)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "error": "Employee not found"}


def test_process_rejects_non_numeric_bonus(client, admin_user, employee, auth_headers):
    response = _issue(client, auth_headers(admin_user), employee.id, bonus="lots")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_salaries_envelope(client, admin_user, employee, auth_headers):
    headers = auth_headers(admin_user)
    _issue(client, headers, employee.id)
    _issue(client, headers, employee.id, month=7)
    response = client.get("/api/admin/salary", headers=headers)
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert len(body["data"]) == 2
    assert "error" not in body


def test_delete_salary(client, admin_user, employee, auth_headers, db_session):
    headers = auth_headers(admin_user)
    salary_id = _issue(client, headers, employee.id).json()["data"]["id"]

    response = client.delete(f"/api/admin/salary/{salary_id}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {}}


def test_delete_missing_salary_keeps_records(client, admin_user, employee, auth_headers, db_session):
    headers = auth_headers(admin_user)
    _issue(client, headers, employee.id)
    before = db_session.query(Salary).count()

    response = client.delete("/api/admin/salary/999999", headers=headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "Salary record not found"
    assert db_session.query(Salary).count() == before


def test_salary_history_views(client, admin_user, employee, auth_headers):
    admin_headers = auth_headers(admin_user)
    _issue(client, admin_headers, employee.id, month=1, year=2024)
    _issue(client, admin_headers, employee.id, month=3, year=2024)

    admin_view = client.get(f"/api/admin/employees/{employee.id}/salary-history", headers=admin_headers)
    assert [r["month"] for r in admin_view.json()["data"]] == [3, 1]

    own_view = client.get("/api/employees/salary-history", headers=auth_headers(employee))
    assert own_view.json()["count"] == 2
    assert own_view.json()["data"][0]["totalAmount"] == float(Decimal("5000.00"))
