"""Contratos e estruturas de dados compartilhadas no domínio do Bomba."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol, Union

from bomba_core.domain.errors import FetchError
from bomba_core.domain.trend import Trend, classify_trend


class View(str, Enum):
    """Visões derivadas de uma mesma tabela de preços."""

    ALL_STATES = "all_states"
    CITY = "city"
    STATE = "state"


@dataclass(frozen=True, slots=True)
class PriceRow:
    """Linha bruta da tabela: nome, preço e variação já sem espaços."""

    name: str
    price: str
    change: str


@dataclass(frozen=True, slots=True)
class PriceRecord:
    """Observação de preço pronta para resposta e persistência.

    ``trend`` não é aceito no construtor: é sempre derivado de ``change``.
    """

    label: str
    price: str
    change: str
    captured_on: str
    trend: Trend = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "trend", classify_trend(self.change))

    def to_payload(self) -> dict[str, str]:
        return {
            "label": self.label,
            "price": self.price,
            "change": self.change,
            "trend": self.trend.value,
            "captured_on": self.captured_on,
        }


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    """Conteúdo obtido com sucesso."""

    url: str
    content: str

    def unwrap(self) -> str:
        return self.content


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Falha tipada da busca; ``status_code`` é ``None`` em erros de transporte."""

    url: str
    status_code: int | None
    cause: Exception | None = None

    def unwrap(self) -> str:
        if self.status_code is None:
            message = f"Falha de transporte ao buscar {self.url}"
        else:
            message = f"Falha ao buscar {self.url}: status {self.status_code}"
        raise FetchError(
            message,
            status_code=self.status_code,
            url=self.url,
            cause=self.cause,
        )


FetchResult = Union[FetchSuccess, FetchFailure]


class PageFetcher(Protocol):
    """Interface para componentes responsáveis por buscar páginas."""

    def fetch(self, url: str) -> FetchResult:
        """Recupera o conteúdo textual de ``url``."""


class TableParser(Protocol):
    """Interface para extrair linhas de preço de um documento HTML."""

    def parse(self, content: str) -> Sequence[PriceRow]:
        """Retorna as linhas na ordem do documento."""


class RecordStore(Protocol):
    """Interface de armazenamento append-only dos lotes de registros."""

    def insert_batch(self, view: View, records: Sequence[PriceRecord]) -> None:
        """Insere o lote inteiro na coleção associada à visão."""


class Clock(Protocol):
    """Interface para abstrair o acesso ao relógio do sistema."""

    def now(self) -> datetime:
        """Retorna o instante atual."""


__all__ = (
    "Clock",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "PageFetcher",
    "PriceRecord",
    "PriceRow",
    "RecordStore",
    "TableParser",
    "Trend",
    "View",
)
