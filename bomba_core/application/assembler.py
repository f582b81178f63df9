"""Montagem final do lote de registros e entrega ao armazenamento."""

from __future__ import annotations

from collections.abc import Sequence
from logging import Logger

from bomba_core.application.views import LabeledRow
from bomba_core.domain.contracts import Clock, PriceRecord, RecordStore, View

CAPTURE_DATE_FORMAT = "%d/%m/%y"


class RecordAssembler:
    """Carimba a data de captura e grava o lote em uma única chamada."""

    def __init__(self, *, store: RecordStore, clock: Clock, logger: Logger) -> None:
        self._store = store
        self._clock = clock
        self._logger = logger

    def assemble(self, view: View, rows: Sequence[LabeledRow]) -> list[PriceRecord]:
        captured_on = self._clock.now().strftime(CAPTURE_DATE_FORMAT)
        records = [
            PriceRecord(
                label=row.label,
                price=row.price,
                change=row.change,
                captured_on=captured_on,
            )
            for row in rows
        ]

        if not records:
            self._logger.warning(
                "assemble.empty_batch",
                extra={"extra": {"view": view.value, "captured_on": captured_on}},
            )
            return records

        self._store.insert_batch(view, records)
        self._logger.info(
            "assemble.persisted",
            extra={
                "extra": {
                    "view": view.value,
                    "count": len(records),
                    "captured_on": captured_on,
                }
            },
        )
        return records
