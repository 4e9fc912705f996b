"""Application FastAPI principale pour la gestion des cartes grises (RC)."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from backend.api import dashboard, vehicles
from backend.core.config import Settings, settings
from backend.core.dashboard import DashboardController
from backend.core.logging_config import configure_logging
from backend.core.storage import StorageBackend, build_storage
from backend.core.vehicle_store import VehicleStore
from backend.services.rc_exports import RcExporter

logger = logging.getLogger(__name__)


def create_app(
    config: Settings = settings,
    *,
    storage: StorageBackend | None = None,
    exporter: RcExporter | None = None,
) -> FastAPI:
    application = FastAPI(title="Vehicle RC Manager API", version="1.0.0")
    application.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

    store = VehicleStore(storage if storage is not None else build_storage(config))
    rc_exporter = exporter or RcExporter(config.TEMPLATE_IMAGE)
    if config.TEMPLATE_IMAGE is None:
        logger.warning("[PDF] RC_TEMPLATE_IMAGE not set, certificates render without background")

    application.state.settings = config
    application.state.store = store
    application.state.exporter = rc_exporter
    application.state.dashboard = DashboardController(store, rc_exporter)

    application.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
    application.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

    @application.get("/health", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        """Renvoie l'état de santé générique du service."""
        return {"status": "ok"}

    return application


configure_logging()

app = create_app()
