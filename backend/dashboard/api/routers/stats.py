from fastapi import APIRouter, Depends

from dashboard.core.deps import get_current_user, get_store
from dashboard.crud.projects import list_projects
from dashboard.crud.users import list_users
from dashboard.db.store import JsonStore
from dashboard.schemas.stats import StatsOut
from dashboard.services.stats import compute_stats

router = APIRouter()

@router.get("", response_model=StatsOut)
def stats(store: JsonStore = Depends(get_store), _user=Depends(get_current_user)):
    return compute_stats(list_projects(store), list_users(store))
