"""Routes CRUD des véhicules et export PDF unitaire."""
from __future__ import annotations

import io
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import StreamingResponse

from backend.api.deps import get_dashboard, get_exporter, get_store
from backend.core import models
from backend.core.constants_vehicle_types import vehicle_options
from backend.core.dashboard import DashboardController
from backend.core.search import filter_vehicles
from backend.core.vehicle_form import VehicleFormController, normalize_vehicle_number
from backend.core.vehicle_store import VehicleStore
from backend.services.rc_exports import RcExporter, pdf_filename

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_DETAIL = "Vehicle not found"


def _require_vehicle(store: VehicleStore, vehicle_id: str) -> models.Vehicle:
    vehicle = store.get_vehicle(vehicle_id)
    if vehicle is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return vehicle


def _save(controller: VehicleFormController, payload: models.VehicleFormData) -> models.SaveResponse:
    controller.load(payload)
    result = controller.submit()
    if not result.ok:
        status_code = 400 if controller.validate() is not None else 500
        raise HTTPException(status_code=status_code, detail=result.notice.model_dump())
    return models.SaveResponse(vehicle=result.vehicle, notice=result.notice)


def _pdf_response(pdf_bytes: bytes, filename: str) -> StreamingResponse:
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=\"{filename}\""},
    )


@router.get("/", response_model=list[models.Vehicle])
async def list_vehicles(
    search: str | None = Query(default=None, description="Recherche plein texte"),
    store: VehicleStore = Depends(get_store),
) -> list[models.Vehicle]:
    return filter_vehicles(store.list_vehicles(), search, store)


@router.get("/options", response_model=models.VehicleOptions)
async def get_vehicle_options() -> models.VehicleOptions:
    return vehicle_options()


@router.get("/number-format", response_model=models.VehicleNumberFormat)
async def format_vehicle_number(value: str = Query(default="")) -> models.VehicleNumberFormat:
    return models.VehicleNumberFormat(raw=value, formatted=normalize_vehicle_number(value))


@router.get("/stats", response_model=models.VehicleStats)
async def get_vehicle_stats(store: VehicleStore = Depends(get_store)) -> models.VehicleStats:
    return store.stats()


@router.post("/sample-data", response_model=list[models.Vehicle], status_code=201)
async def create_sample_data(store: VehicleStore = Depends(get_store)) -> list[models.Vehicle]:
    return store.generate_sample_data()


@router.post("/", response_model=models.SaveResponse, status_code=201)
async def create_vehicle(
    payload: models.VehicleFormData,
    store: VehicleStore = Depends(get_store),
) -> models.SaveResponse:
    return _save(VehicleFormController(store), payload)


@router.get("/{vehicle_id}", response_model=models.Vehicle)
async def get_vehicle(vehicle_id: str, store: VehicleStore = Depends(get_store)) -> models.Vehicle:
    return _require_vehicle(store, vehicle_id)


@router.put("/{vehicle_id}", response_model=models.SaveResponse)
async def replace_vehicle(
    vehicle_id: str,
    payload: models.VehicleFormData,
    store: VehicleStore = Depends(get_store),
) -> models.SaveResponse:
    vehicle = _require_vehicle(store, vehicle_id)
    return _save(VehicleFormController(store, vehicle), payload)


@router.patch("/{vehicle_id}", response_model=models.Vehicle)
async def patch_vehicle(
    vehicle_id: str,
    payload: models.VehicleUpdate,
    store: VehicleStore = Depends(get_store),
) -> models.Vehicle:
    changes = payload.model_dump(exclude_unset=True)
    if "vehicle_number" in changes:
        number = normalize_vehicle_number(changes["vehicle_number"] or "")
        if not number:
            raise HTTPException(status_code=400, detail="Please enter a vehicle number")
        changes["vehicle_number"] = number
    updated = store.update_vehicle(vehicle_id, changes)
    if updated is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return updated


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(
    vehicle_id: str,
    dashboard: DashboardController = Depends(get_dashboard),
) -> Response:
    if dashboard.delete(vehicle_id) is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return Response(status_code=204)


@router.get("/{vehicle_id}/pdf")
async def download_vehicle_pdf(
    vehicle_id: str,
    store: VehicleStore = Depends(get_store),
    exporter: RcExporter = Depends(get_exporter),
) -> StreamingResponse:
    vehicle = _require_vehicle(store, vehicle_id)
    try:
        pdf_bytes = exporter.render(vehicle)
    except (OSError, ValueError) as exc:
        logger.exception("Unable to render certificate for vehicle %s", vehicle_id)
        raise HTTPException(status_code=500, detail="Failed to generate PDF") from exc
    return _pdf_response(pdf_bytes, pdf_filename(vehicle))
