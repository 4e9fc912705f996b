"""Filtrage plein texte de la liste des véhicules."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from backend.core import models


class SearchableStore(Protocol):
    def search_vehicles(self, query: str) -> list[models.Vehicle]: ...


def filter_vehicles(
    vehicles: Sequence[models.Vehicle], query: str | None, store: SearchableStore
) -> list[models.Vehicle]:
    """Return ``vehicles`` untouched for a blank query, else the store's matches."""

    if not query or not query.strip():
        return list(vehicles)
    return store.search_vehicles(query)
