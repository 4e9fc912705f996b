from __future__ import annotations

from backend.core import models

VEHICLE_CLASSES: tuple[str, ...] = (
    "MCWG (Motor Cycle With Gear)",
    "MCWOG (Motor Cycle Without Gear)",
    "LMV (Light Motor Vehicle)",
    "HMV (Heavy Motor Vehicle)",
    "TRANS (Transport Vehicle)",
    "TRACTOR",
    "TRAILER",
)

FUEL_TYPES: tuple[str, ...] = ("PETROL", "DIESEL", "CNG", "LPG", "ELECTRIC", "HYBRID")

MANUFACTURERS: tuple[str, ...] = (
    "BAJAJ AUTO LTD",
    "HERO MOTOCORP LTD",
    "HONDA MOTORCYCLE & SCOOTER INDIA PVT LTD",
    "MARUTI SUZUKI INDIA LTD",
    "HYUNDAI MOTOR INDIA LTD",
    "TATA MOTORS LTD",
    "MAHINDRA & MAHINDRA LTD",
    "TOYOTA KIRLOSKAR MOTOR PVT LTD",
    "FORD INDIA PVT LTD",
    "VOLKSWAGEN INDIA PVT LTD",
)

RTO_OFFICES: tuple[str, ...] = (
    "RTO CHENNAI CENTRAL",
    "RTO CHENNAI NORTH",
    "RTO CHENNAI SOUTH",
    "RTO BANGALORE EAST",
    "RTO BANGALORE WEST",
    "RTO MUMBAI CENTRAL",
    "RTO DELHI",
    "RTO PUNE",
    "RTO HYDERABAD",
    "RTO KOLKATA",
)

LIGHT_VEHICLE_MARKER = "LMV"
ELECTRIC_FUEL = "ELECTRIC"

SAMPLE_VEHICLES: tuple[dict[str, str], ...] = (
    {
        "vehicle_number": "TN01AB1234",
        "owner_name": "RAJESH KUMAR",
        "vehicle_class": "MCWG (Motor Cycle With Gear)",
        "fuel_type": "PETROL",
        "chassis_number": "ME4JF48DXJK123456",
        "engine_number": "JF48DFH123456",
        "manufacturer": "BAJAJ AUTO LTD",
        "model": "PULSAR 150",
        "registration_date": "2023-01-15",
        "insurance_valid_till": "2024-12-31",
        "rto_office": "RTO CHENNAI CENTRAL",
        "owner_address": "No.45, Gandhi Street, T.Nagar, Chennai - 600017, Tamil Nadu",
    },
    {
        "vehicle_number": "KA05MN9876",
        "owner_name": "PRIYA SHARMA",
        "vehicle_class": "LMV (Light Motor Vehicle)",
        "fuel_type": "DIESEL",
        "chassis_number": "MA3ERLF3S00123456",
        "engine_number": "K9K792123456",
        "manufacturer": "MARUTI SUZUKI INDIA LTD",
        "model": "SWIFT DZIRE",
        "registration_date": "2022-08-20",
        "insurance_valid_till": "2025-08-19",
        "rto_office": "RTO BANGALORE EAST",
        "owner_address": "Flat 302, Green Valley Apartments, Koramangala, Bangalore - 560034, Karnataka",
    },
    {
        "vehicle_number": "MH12CD5678",
        "owner_name": "AMIT PATEL",
        "vehicle_class": "HMV (Heavy Motor Vehicle)",
        "fuel_type": "DIESEL",
        "chassis_number": "MAT634567890123456",
        "engine_number": "BS6D567890",
        "manufacturer": "TATA MOTORS LTD",
        "model": "ACE GOLD",
        "registration_date": "2023-03-10",
        "insurance_valid_till": "2024-03-09",
        "rto_office": "RTO PUNE",
        "owner_address": "Shop No. 15, Industrial Estate, Pimpri-Chinchwad, Pune - 411018, Maharashtra",
    },
)


def vehicle_options() -> models.VehicleOptions:
    return models.VehicleOptions(
        vehicle_classes=list(VEHICLE_CLASSES),
        fuel_types=list(FUEL_TYPES),
        manufacturers=list(MANUFACTURERS),
        rto_offices=list(RTO_OFFICES),
    )
