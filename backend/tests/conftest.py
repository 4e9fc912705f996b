from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

os.environ.setdefault("RC_STORAGE", "memory")
os.environ.setdefault("RC_LOG_DIR", tempfile.mkdtemp(prefix="rc-logs-"))
os.environ.setdefault("RC_TEMPLATE_IMAGE", "")

from backend.core.storage import MemoryStorage  # noqa: E402
from backend.core.vehicle_store import VehicleStore  # noqa: E402


class FakeClock:
    """Clock advancing by one second on every reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage, clock: FakeClock) -> VehicleStore:
    return VehicleStore(storage, clock=clock)


@pytest.fixture
def template_image(tmp_path: Path) -> Path:
    from PIL import Image

    path = tmp_path / "vehicle-template.png"
    Image.new("RGB", (60, 85), (240, 240, 220)).save(path)
    return path
