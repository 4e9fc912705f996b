"""Modèles Pydantic pour l'API et le stockage."""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ordre des champs du formulaire (et des superpositions PDF).
FORM_FIELDS: tuple[str, ...] = (
    "vehicle_number",
    "owner_name",
    "vehicle_class",
    "fuel_type",
    "chassis_number",
    "engine_number",
    "manufacturer",
    "model",
    "registration_date",
    "insurance_valid_till",
    "rto_office",
    "owner_address",
)

DATE_FIELDS: frozenset[str] = frozenset({"registration_date", "insurance_valid_till"})


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VehicleFormData(CamelModel):
    vehicle_number: Optional[str] = None
    owner_name: Optional[str] = None
    vehicle_class: Optional[str] = None
    fuel_type: Optional[str] = None
    chassis_number: Optional[str] = None
    engine_number: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    registration_date: Optional[str] = None
    insurance_valid_till: Optional[str] = None
    rto_office: Optional[str] = None
    owner_address: Optional[str] = None


class VehicleUpdate(VehicleFormData):
    """Partial payload: only the fields explicitly sent are merged."""


class Vehicle(VehicleFormData):
    id: str
    created_at: datetime
    updated_at: datetime

    def form_data(self) -> VehicleFormData:
        return VehicleFormData(**{name: getattr(self, name) for name in FORM_FIELDS})

    def storage_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Notice(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class VehicleStats(CamelModel):
    total: int = 0
    selected: int = 0
    light_vehicles: int = 0
    electric: int = 0


class VehicleOptions(CamelModel):
    vehicle_classes: list[str] = Field(default_factory=list)
    fuel_types: list[str] = Field(default_factory=list)
    manufacturers: list[str] = Field(default_factory=list)
    rto_offices: list[str] = Field(default_factory=list)


class VehicleNumberFormat(BaseModel):
    raw: str
    formatted: str


class SaveResponse(BaseModel):
    vehicle: Vehicle
    notice: Notice


class SearchQuery(BaseModel):
    query: str = ""


class DashboardSnapshot(CamelModel):
    query: str
    vehicles: list[Vehicle]
    selected_ids: list[str]
    selection_state: Literal["none", "partial", "all"]
    stats: VehicleStats
