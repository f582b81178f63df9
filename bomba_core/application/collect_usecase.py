"""Caso de uso responsável pela coleta das três visões de preço."""

from __future__ import annotations

from logging import Logger

from bomba_core.application.assembler import RecordAssembler
from bomba_core.application.sources import PriceSource
from bomba_core.application.views import PAGE_SECTION_LAYOUT, PageSectionLayout, slice_view
from bomba_core.domain.contracts import (
    Clock,
    PageFetcher,
    PriceRecord,
    RecordStore,
    TableParser,
    View,
)
from bomba_core.domain.errors import FetchError


class CollectPricesUseCase:
    """Orquestra busca, parsing, recorte e persistência de uma visão.

    Cada chamada executa uma única busca remota e um único ``insert_many``;
    nenhum estado é mantido entre chamadas além dos colaboradores injetados.
    """

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        parser: TableParser,
        store: RecordStore,
        clock: Clock,
        logger: Logger,
        source: PriceSource | None = None,
        layout: PageSectionLayout = PAGE_SECTION_LAYOUT,
    ) -> None:
        self._fetcher = fetcher
        self._parser = parser
        self._source = source or PriceSource()
        self._layout = layout
        self._logger = logger
        self._assembler = RecordAssembler(store=store, clock=clock, logger=logger)

    def all_states(self) -> list[PriceRecord]:
        return self.execute(View.ALL_STATES)

    def by_city(self, city: str) -> list[PriceRecord]:
        return self.execute(View.CITY, city)

    def by_state(self, state: str) -> list[PriceRecord]:
        return self.execute(View.STATE, state)

    def execute(self, view: View, label: str | None = None) -> list[PriceRecord]:
        """Executa o fluxo completo para ``view`` retornando o lote gravado."""

        url = self._url_for(view, label)
        self._logger.info(
            "collect.start",
            extra={"extra": {"view": view.value, "label": label, "url": url}},
        )

        result = self._fetcher.fetch(url)
        try:
            content = result.unwrap()
        except FetchError as exc:
            self._logger.error(
                "collect.fetch_failed",
                extra={
                    "extra": {
                        "view": view.value,
                        "url": url,
                        "status_code": exc.status_code,
                    }
                },
            )
            raise

        rows = self._parser.parse(content)
        self._logger.info(
            "collect.fetched",
            extra={"extra": {"view": view.value, "url": url, "rows": len(rows)}},
        )

        selected = slice_view(
            view,
            rows,
            label,
            layout=self._layout,
            logger=self._logger,
        )
        records = self._assembler.assemble(view, selected)

        self._logger.info(
            "collect.finish",
            extra={"extra": {"view": view.value, "count": len(records)}},
        )
        return records

    def _url_for(self, view: View, label: str | None) -> str:
        if view is View.ALL_STATES:
            return self._source.all_states_url()
        if label is None:
            raise ValueError(f"A visão '{view.value}' exige um rótulo")
        if view is View.CITY:
            return self._source.city_url(label)
        return self._source.state_url(label)
