"""Routes du tableau de bord: filtre, sélection et export groupé."""
from __future__ import annotations

import io

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import StreamingResponse

from backend.api.deps import get_dashboard
from backend.core import models
from backend.core.dashboard import NO_SELECTION_NOTICE, DashboardController

router = APIRouter()


@router.get("/", response_model=models.DashboardSnapshot)
async def get_dashboard_state(
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.DashboardSnapshot:
    return dashboard.snapshot()


@router.put("/query", response_model=models.DashboardSnapshot)
async def set_dashboard_query(
    payload: models.SearchQuery,
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.DashboardSnapshot:
    dashboard.set_query(payload.query)
    return dashboard.snapshot()


@router.post("/selection/all", response_model=models.DashboardSnapshot)
async def select_all_vehicles(
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.DashboardSnapshot:
    dashboard.select_all()
    return dashboard.snapshot()


@router.delete("/selection", response_model=models.DashboardSnapshot)
async def clear_selection(
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.DashboardSnapshot:
    dashboard.select_none()
    return dashboard.snapshot()


@router.post("/selection/{vehicle_id}", response_model=models.DashboardSnapshot)
async def toggle_vehicle_selection(
    vehicle_id: str,
    checked: bool | None = Query(default=None, description="Forcer l'état de la case"),
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.DashboardSnapshot:
    if not any(vehicle.id == vehicle_id for vehicle in dashboard.vehicles):
        raise HTTPException(status_code=404, detail="Vehicle not found")
    dashboard.toggle(vehicle_id, checked)
    return dashboard.snapshot()


@router.delete("/vehicles/{vehicle_id}", status_code=204)
async def delete_dashboard_vehicle(
    vehicle_id: str,
    dashboard: DashboardController = Depends(get_dashboard),
) -> Response:
    # Missing ids are a silent no-op here.
    dashboard.delete(vehicle_id)
    return Response(status_code=204)


@router.post("/sample-data", response_model=models.Notice)
async def add_sample_data(
    dashboard: DashboardController = Depends(get_dashboard),
) -> models.Notice:
    return dashboard.add_sample_data()


@router.post("/export")
async def export_selection(
    dashboard: DashboardController = Depends(get_dashboard),
) -> StreamingResponse:
    result = dashboard.bulk_export()
    if not result.ok:
        status_code = 400 if result.notice == NO_SELECTION_NOTICE else 500
        raise HTTPException(status_code=status_code, detail=result.notice.model_dump())
    return StreamingResponse(
        io.BytesIO(result.archive),
        media_type="application/zip",
        headers={
            "Content-Disposition": f"attachment; filename=\"{result.filename}\"",
            "X-Export-Count": str(result.count),
        },
    )
