"""Carregamento de configurações para o serviço Bomba."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Mapping

from bomba_core.application.sources import DEFAULT_BASE_URL, DEFAULT_FUEL
from bomba_core.domain.contracts import View

DEFAULT_COLLECTIONS: Mapping[View, str] = {
    View.ALL_STATES: "DieselAllStates",
    View.CITY: "DieselByCities",
    View.STATE: "DieselByState",
}


@dataclass(slots=True)
class HttpSettings:
    base_url: str = DEFAULT_BASE_URL
    fuel: str = DEFAULT_FUEL
    user_agent: str | None = None


@dataclass(slots=True)
class DatabaseSettings:
    uri: str
    name: str
    collections: Mapping[View, str] = field(default_factory=lambda: dict(DEFAULT_COLLECTIONS))


@dataclass(slots=True)
class Settings:
    http: HttpSettings
    database: DatabaseSettings


def _load_collections(value: str | None) -> Mapping[View, str]:
    collections = dict(DEFAULT_COLLECTIONS)
    if not value:
        return collections
    try:
        parsed = json.loads(value)
        if not isinstance(parsed, dict):
            raise ValueError
        for key, name in parsed.items():
            collections[View(str(key))] = str(name)
    except ValueError as exc:  # noqa: PERF203 - trata entrada malformada
        raise RuntimeError("Variável de ambiente de coleções inválida") from exc
    return collections


def load_settings() -> Settings:
    """Carrega configurações a partir de variáveis de ambiente."""

    http = HttpSettings(
        base_url=os.environ.get("BOMBA_BASE_URL", DEFAULT_BASE_URL),
        fuel=os.environ.get("BOMBA_FUEL", DEFAULT_FUEL),
        user_agent=os.environ.get("BOMBA_USER_AGENT") or None,
    )

    database = DatabaseSettings(
        uri=os.environ.get("BOMBA_MONGODB_URI", "mongodb://localhost:27017"),
        name=os.environ.get("BOMBA_MONGODB_DB", "FR24"),
        collections=_load_collections(os.environ.get("BOMBA_COLLECTIONS")),
    )

    return Settings(http=http, database=database)
