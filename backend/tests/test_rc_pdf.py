from __future__ import annotations

import zlib
from base64 import a85decode
from datetime import datetime, timezone
from pathlib import Path

import pytest

from backend.core import models
from backend.services.pdf.vehicle_rc import (
    FIELD_POSITIONS,
    FieldPosition,
    build_overlays,
    get_field_position,
    prepare_background,
    render_vehicle_pdf,
)
from backend.services.pdf.vehicle_rc.utils import format_date

CREATED = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


def _vehicle(**fields: str) -> models.Vehicle:
    return models.Vehicle(id="veh-1", created_at=CREATED, updated_at=CREATED, **fields)


def _full_vehicle() -> models.Vehicle:
    return _vehicle(
        vehicle_number="TN 01 AB 1234",
        owner_name="RAJESH KUMAR",
        vehicle_class="MCWG (Motor Cycle With Gear)",
        fuel_type="PETROL",
        chassis_number="ME4JF48DXJK123456",
        engine_number="JF48DFH123456",
        manufacturer="BAJAJ AUTO LTD",
        model="PULSAR 150",
        registration_date="2023-01-15",
        insurance_valid_till="2024-12-31",
        rto_office="RTO CHENNAI CENTRAL",
        owner_address="No.45, Gandhi Street, T.Nagar, Chennai - 600017, Tamil Nadu",
    )


def _extract_pdf_stream_text(pdf_bytes: bytes) -> bytes:
    chunks: list[bytes] = []
    cursor = 0
    while True:
        start = pdf_bytes.find(b"stream", cursor)
        if start == -1:
            break
        start = pdf_bytes.find(b"\n", start)
        if start == -1:
            break
        start += 1
        end = pdf_bytes.find(b"endstream", start)
        if end == -1:
            break
        stream = pdf_bytes[start:end].strip()
        decoded = stream
        try:
            decoded = a85decode(stream, adobe=True)
        except Exception:
            try:
                decoded = a85decode(stream, adobe=False)
            except Exception:
                decoded = stream
        try:
            chunks.append(zlib.decompress(decoded))
        except zlib.error:
            chunks.append(decoded)
        cursor = end + len(b"endstream")
    return b"".join(chunks)


def test_layout_table_is_read_only_and_complete() -> None:
    assert len(FIELD_POSITIONS) == 12
    assert get_field_position("vehicleNumber") == FieldPosition(
        top=180, left=200, width=200, font_size=14, font_weight="bold"
    )
    assert get_field_position("ownerAddress").height == 60
    assert get_field_position("colour") is None
    with pytest.raises(TypeError):
        FIELD_POSITIONS["colour"] = FieldPosition(top=0, left=0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2023-01-15", "15 Jan 2023"),
        ("2024-12-31T10:00:00Z", "31 Dec 2024"),
        ("2022-08-02T00:00:00+05:30", "02 Aug 2022"),
        ("next tuesday", "next tuesday"),
        ("", ""),
        (None, ""),
    ],
)
def test_format_date(raw, expected) -> None:
    assert format_date(raw) == expected


def test_only_vehicle_number_gives_one_overlay() -> None:
    overlays = build_overlays(_vehicle(vehicle_number="TN 01 AB 1234"))

    assert len(overlays) == 1
    assert overlays[0].field == "vehicleNumber"
    assert overlays[0].text == "TN 01 AB 1234"
    assert overlays[0].multiline is False


def test_overlays_format_dates_and_flag_address_as_multiline() -> None:
    overlays = {overlay.field: overlay for overlay in build_overlays(_full_vehicle())}

    assert len(overlays) == 12
    assert overlays["registrationDate"].text == "15 Jan 2023"
    assert overlays["insuranceValidTill"].text == "31 Dec 2024"
    assert overlays["ownerAddress"].multiline is True
    assert [name for name, overlay in overlays.items() if overlay.multiline] == ["ownerAddress"]


def test_fields_without_layout_entry_or_value_are_skipped() -> None:
    layout = {"ownerName": FIELD_POSITIONS["ownerName"]}
    vehicle = _vehicle(vehicle_number="TN 01 AB 1234", owner_name="RAJESH", model="")

    overlays = build_overlays(vehicle, layout)

    assert [overlay.field for overlay in overlays] == ["ownerName"]
    assert build_overlays(_vehicle(model=""), FIELD_POSITIONS) == []


def test_render_produces_single_a4_page_with_field_text() -> None:
    pdf_bytes = render_vehicle_pdf(_full_vehicle())

    assert pdf_bytes.startswith(b"%PDF")
    assert pdf_bytes.count(b"/Type /Page") - pdf_bytes.count(b"/Type /Pages") == 1
    assert b"595.28" in pdf_bytes and b"841.89" in pdf_bytes
    text = _extract_pdf_stream_text(pdf_bytes)
    assert b"TN 01 AB 1234" in text
    assert b"15 Jan 2023" in text
    assert b"Gandhi Street" in text


def test_render_is_deterministic() -> None:
    vehicle = _full_vehicle()
    assert render_vehicle_pdf(vehicle) == render_vehicle_pdf(vehicle)


def test_render_with_background_template(template_image: Path) -> None:
    background = prepare_background(template_image)

    with_background = render_vehicle_pdf(_full_vehicle(), background=background)
    from_path = render_vehicle_pdf(_full_vehicle(), background=template_image)

    assert b"/Subtype /Image" in with_background
    assert with_background == from_path


def test_missing_template_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        render_vehicle_pdf(_full_vehicle(), background=tmp_path / "missing.jpg")
