"""Configuration statique du backend."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}

STORAGE_MEMORY = "memory"
STORAGE_FILE = "file"
STORAGE_SQLITE = "sqlite"


def _get_env_flag(name: str, default: bool = False) -> bool:
    """Retourne une valeur booléenne à partir d'une variable d'environnement."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_env_choice(name: str, choices: set[str], default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized if normalized in choices else default


def _get_env_path(name: str, default: Path | None) -> Path | None:
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    if not stripped:
        return None
    return Path(stripped).expanduser()


@dataclass(frozen=True)
class Settings:
    """Paramètres globaux lus depuis l'environnement."""

    DEBUG: bool = False
    STORAGE: str = STORAGE_SQLITE
    DATA_DIR: Path = BASE_DIR / "data"
    LOG_DIR: Path = BASE_DIR.parent / "logs"
    TEMPLATE_IMAGE: Path | None = None

    @property
    def sqlite_path(self) -> Path:
        return self.DATA_DIR / "vehicles.db"


def load_settings() -> Settings:
    return Settings(
        DEBUG=_get_env_flag("RC_DEBUG", default=False),
        STORAGE=_get_env_choice(
            "RC_STORAGE", {STORAGE_MEMORY, STORAGE_FILE, STORAGE_SQLITE}, STORAGE_SQLITE
        ),
        DATA_DIR=_get_env_path("RC_DATA_DIR", BASE_DIR / "data") or BASE_DIR / "data",
        LOG_DIR=_get_env_path("RC_LOG_DIR", BASE_DIR.parent / "logs") or BASE_DIR.parent / "logs",
        TEMPLATE_IMAGE=_get_env_path("RC_TEMPLATE_IMAGE", None),
    )


settings = load_settings()
