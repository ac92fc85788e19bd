from fastapi import APIRouter
from staffhub.routers import admin, auth, employees, notifications, projects, salary

# Centralized API router hub: main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(admin.router, tags=["Administration"])
api_router.include_router(salary.router, tags=["Salary"])
api_router.include_router(projects.router, tags=["Projects"])
api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(notifications.router, tags=["Notifications"])
