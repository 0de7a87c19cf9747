from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dashboard.core.config import settings
from dashboard.core.errors import register_exception_handlers
from dashboard.core.logging import RequestContextMiddleware, configure_logging, logger
from dashboard.api.router import api_router
from dashboard.db.store import JsonStore
from dashboard.services.seed import ensure_default_admin, seed_demo

def init_datastore() -> None:
    store = JsonStore(settings.DATABASE_PATH)
    store.ensure_initialized()
    ensure_default_admin(store)
    if settings.SEED_DEMO and settings.ENV == "dev":
        seed_demo(store)

def create_app() -> FastAPI:
    configure_logging(settings.ENV, level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    app = FastAPI(title="Project Dashboard API", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    @app.on_event("startup")
    def _startup():
        # Runs once, before the server accepts connections
        init_datastore()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()
