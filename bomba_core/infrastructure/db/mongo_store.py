"""Armazenamento append-only dos lotes de preço em coleções MongoDB."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from bomba_core.domain.contracts import PriceRecord, RecordStore, View
from bomba_core.domain.errors import WriteError


class MongoRecordStore(RecordStore):
    """Implementação de ``RecordStore`` com uma coleção por visão."""

    def __init__(self, collections: Mapping[View, Any]) -> None:
        missing = [view.value for view in View if view not in collections]
        if missing:
            raise ValueError(f"Coleções ausentes para as visões: {', '.join(missing)}")
        self._collections = dict(collections)

    def insert_batch(self, view: View, records: Sequence[PriceRecord]) -> None:
        documents = [self._to_document(record) for record in records]
        try:
            self._collections[view].insert_many(documents)
        except Exception as exc:  # noqa: BLE001
            raise WriteError("Falha ao inserir lote no MongoDB", cause=exc) from exc

    @staticmethod
    def _to_document(record: PriceRecord) -> dict[str, Any]:
        return dict(record.to_payload())


class NullRecordStore(RecordStore):
    """Descarta os lotes; usado em execuções sem persistência."""

    def insert_batch(self, view: View, records: Sequence[PriceRecord]) -> None:
        return None


def build_store(database: Any, names: Mapping[View, str]) -> MongoRecordStore:
    """Resolve as coleções nomeadas em ``database``."""

    return MongoRecordStore({view: database[name] for view, name in names.items()})
