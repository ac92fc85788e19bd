import pytest

from staffhub.models.project import Project
from staffhub.models.task import Task, TaskStatus
from staffhub.services.task_service import NO_TASKS_MESSAGE, TaskService, format_progress


@pytest.fixture
def project(db_session):
    project = Project(name="Apollo", description="Launch the new portal")
    db_session.add(project)
    db_session.commit()
    return project


def _assign(db_session, project, employee, statuses):
    for i, task_status in enumerate(statuses):
        db_session.add(Task(
            project_id=project.id,
            employee_id=employee.id,
            title=f"Task {i}",
            status=task_status.value,
        ))
    db_session.commit()


@pytest.mark.parametrize("completed,total,expected", [
    (0, 4, "0.00%"),
    (1, 3, "33.33%"),
    (2, 3, "66.67%"),
    (5, 5, "100.00%"),
    (1, 32, "3.13%"),
    (1, 8, "12.50%"),
    (0, 0, "0.00%"),
])
def test_format_progress(completed, total, expected):
    assert format_progress(completed, total) == expected


def test_no_tasks_returns_message(db_session, employee):
    report = TaskService(db_session).progress_report(employee.id)
    assert report == {"message": NO_TASKS_MESSAGE, "progress": 0}


def test_progress_counts_only_completed(db_session, employee, project):
    _assign(db_session, project, employee, [
        TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS, TaskStatus.TODO
    ])
    report = TaskService(db_session).progress_report(employee.id)
    assert report["total_tasks"] == 3
    assert report["completed_tasks"] == 1
    assert report["progress"] == "33.33%"
    assert len(report["tasks"]) == 3


def test_progress_ignores_other_employees(db_session, make_employee, project):
    mine = make_employee(name="Mine")
    other = make_employee(name="Other")
    _assign(db_session, project, mine, [TaskStatus.COMPLETED, TaskStatus.TODO])
    _assign(db_session, project, other, [TaskStatus.COMPLETED, TaskStatus.COMPLETED, TaskStatus.COMPLETED])

    assert TaskService(db_session).progress_report(mine.id)["progress"] == "50.00%"


def test_progress_endpoints(client, db_session, admin_user, employee, project, auth_headers):
    empty = client.get(f"/api/admin/employees/{employee.id}/progress", headers=auth_headers(admin_user))
    assert empty.status_code == 200
    assert empty.json()["data"] == {"message": NO_TASKS_MESSAGE, "progress": 0}

    _assign(db_session, project, employee, [TaskStatus.COMPLETED, TaskStatus.TODO, TaskStatus.TODO])
    admin_view = client.get(f"/api/admin/employees/{employee.id}/progress", headers=auth_headers(admin_user))
    data = admin_view.json()["data"]
    assert set(data) == {"totalTasks", "completedTasks", "progress", "tasks"}
    assert data["totalTasks"] == 3
    assert data["completedTasks"] == 1
    assert data["progress"] == "33.33%"
    assert data["tasks"][0]["project"]["name"] == "Apollo"

    own_view = client.get("/api/employees/progress", headers=auth_headers(employee))
    assert own_view.json()["data"]["progress"] == "33.33%"
    assert "message" not in own_view.json()["data"]


def test_progress_rounds_halves_up(client, db_session, admin_user, employee, project, auth_headers):
    _assign(db_session, project, employee, [TaskStatus.COMPLETED] + [TaskStatus.TODO] * 31)
    response = client.get(f"/api/admin/employees/{employee.id}/progress", headers=auth_headers(admin_user))
    assert response.json()["data"]["progress"] == "3.13%"
