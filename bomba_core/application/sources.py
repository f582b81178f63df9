"""Montagem das URLs das páginas de preço publicadas pela NDTV."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://www.ndtv.com/fuel-prices"
DEFAULT_FUEL = "diesel"


@dataclass(frozen=True, slots=True)
class PriceSource:
    base_url: str = DEFAULT_BASE_URL
    fuel: str = DEFAULT_FUEL

    def all_states_url(self) -> str:
        return f"{self._prefix()}-price-in-all-state"

    def city_url(self, city: str) -> str:
        slug = city.replace(" ", "-").lower()
        return f"{self._prefix()}-price-in-{slug}-city"

    def state_url(self, state: str) -> str:
        # o nome do estado segue sem normalização
        return f"{self._prefix()}-price-in-{state}-state"

    def _prefix(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.fuel.strip().lower()}"
