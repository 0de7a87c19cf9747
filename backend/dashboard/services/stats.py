import calendar
import datetime as dt
from collections import Counter

from dashboard.db.models.project import Project, ProjectStatus
from dashboard.db.models.user import User
from dashboard.schemas.stats import (
    ChartsOut,
    ClientCount,
    KPIOut,
    MonthBucket,
    StatsOut,
    StatusCount,
    TechUsage,
)

TOP_TECHNOLOGIES = 10


def _parse_created(value: str | None) -> dt.datetime | None:
    if not value:
        return None
    try:
        return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def success_rate(completed: int, paused: int) -> int:
    # Only finished work counts: active and maintenance projects are left out.
    terminated = completed + paused
    if terminated == 0:
        return 0
    return round(completed / terminated * 100)


def client_counts(projects: list[Project]) -> list[ClientCount]:
    counts = Counter(p.client for p in projects if p.client)
    rows = [ClientCount(client=c, projects=n) for c, n in counts.items()]
    return sorted(rows, key=lambda r: r.projects, reverse=True)


def tech_usage(projects: list[Project], limit: int = TOP_TECHNOLOGIES) -> list[TechUsage]:
    counts: Counter[str] = Counter()
    for p in projects:
        counts.update(p.tech_stack)
    rows = [TechUsage(tech=t, count=n) for t, n in counts.items()]
    return sorted(rows, key=lambda r: r.count, reverse=True)[:limit]


def monthly_buckets(projects: list[Project], year: int) -> list[MonthBucket]:
    buckets = [
        MonthBucket(month=m, label=calendar.month_abbr[m], new=0, completed=0, active=0)
        for m in range(1, 13)
    ]
    for p in projects:
        created = _parse_created(p.created_at)
        if not created or created.year != year:
            continue
        b = buckets[created.month - 1]
        b.new += 1
        if p.status == ProjectStatus.completed:
            b.completed += 1
        elif p.status == ProjectStatus.active:
            b.active += 1
    return buckets


def compute_stats(projects: list[Project], users: list[User], today: dt.date | None = None) -> StatsOut:
    today = today or dt.datetime.now(dt.timezone.utc).date()
    by_status = Counter(p.status for p in projects)
    completed = by_status[ProjectStatus.completed]
    paused = by_status[ProjectStatus.paused]

    users_by_role = Counter(u.role.value for u in users)

    kpis = KPIOut(
        total_projects=len(projects),
        active_projects=by_status[ProjectStatus.active],
        maintenance_projects=by_status[ProjectStatus.maintenance],
        completed_projects=completed,
        paused_projects=paused,
        archived_projects=by_status[ProjectStatus.archived],
        total_clients=len({p.client for p in projects if p.client}),
        success_rate=success_rate(completed, paused),
        total_users=len(users),
        users_by_role=dict(users_by_role),
    )
    charts = ChartsOut(
        projects_by_status=[StatusCount(status=s.value, value=by_status[s]) for s in ProjectStatus],
        client_projects=client_counts(projects),
        tech_stack_usage=tech_usage(projects),
        monthly_projects=monthly_buckets(projects, today.year),
    )
    return StatsOut(kpis=kpis, charts=charts)
