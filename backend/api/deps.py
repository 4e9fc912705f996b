"""Dépendances FastAPI partagées par les routes."""
from __future__ import annotations

from fastapi import Request

from backend.core.dashboard import DashboardController
from backend.core.vehicle_store import VehicleStore
from backend.services.rc_exports import RcExporter


def get_store(request: Request) -> VehicleStore:
    return request.app.state.store


def get_exporter(request: Request) -> RcExporter:
    return request.app.state.exporter


def get_dashboard(request: Request) -> DashboardController:
    """Return the shared dashboard, resynchronized with the store."""

    dashboard: DashboardController = request.app.state.dashboard
    dashboard.load()
    return dashboard
