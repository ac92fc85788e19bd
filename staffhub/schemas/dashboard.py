from staffhub.core.schemas import CamelModel


class DashboardStats(CamelModel):
    total_employees: int
    pending_leaves: int
    total_projects: int
    completed_tasks: int
