from dashboard.db.models._mixins import CamelModel

class KPIOut(CamelModel):
    total_projects: int
    active_projects: int
    maintenance_projects: int
    completed_projects: int
    paused_projects: int
    archived_projects: int
    total_clients: int
    success_rate: int  # percent, 0..100
    total_users: int
    users_by_role: dict[str, int]

class StatusCount(CamelModel):
    status: str
    value: int

class ClientCount(CamelModel):
    client: str
    projects: int

class TechUsage(CamelModel):
    tech: str
    count: int

class MonthBucket(CamelModel):
    month: int  # 1..12
    label: str
    new: int
    completed: int
    active: int

class ChartsOut(CamelModel):
    projects_by_status: list[StatusCount]
    client_projects: list[ClientCount]
    tech_stack_usage: list[TechUsage]
    monthly_projects: list[MonthBucket]

class StatsOut(CamelModel):
    kpis: KPIOut
    charts: ChartsOut
