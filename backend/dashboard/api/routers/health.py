import os
import time
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dashboard.core.config import settings
from dashboard.core.deps import get_session, get_store
from dashboard.core.logging import logger
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import SessionUser

router = APIRouter()

STARTED_AT = time.monotonic()


def _mb(n: int) -> str:
    return f"{n / 1024 / 1024:.2f} MB"

def _details(store: JsonStore) -> dict:
    st = store.path.stat() if store.path.exists() else None
    mem = psutil.Process(os.getpid()).memory_info()
    return {
        "environment": settings.ENV,
        "datastore": {
            "path": str(store.path),
            "exists": st is not None,
            "size": f"{st.st_size / 1024:.2f} KB" if st else "N/A",
            "lastModified": datetime.fromtimestamp(st.st_mtime, timezone.utc).isoformat() if st else "N/A",
        },
        "memory": {"rss": _mb(mem.rss), "vms": _mb(mem.vms)},
    }

@router.get("")
def health(store: JsonStore = Depends(get_store), session: SessionUser | None = Depends(get_session)):
    """Public liveness and record counts; file and process details only for admins."""
    now = datetime.now(timezone.utc).isoformat()
    try:
        counts = store.counts()
    except (OSError, ValueError) as e:
        logger.error("health_check_failed", error=str(e))
        return JSONResponse(status_code=500, content={"status": "unhealthy", "timestamp": now})

    body = {
        "status": "healthy",
        "timestamp": now,
        "database": {"usersCount": counts["users"], "projectsCount": counts["projects"]},
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }
    if session is not None and session.role == Role.admin.value:
        body["details"] = _details(store)
    return body
