"""Parser baseado em selectolax para extrair linhas de tabelas de preço."""

from __future__ import annotations

from logging import Logger
from typing import Any

from selectolax.lexbor import LexborHTMLParser

from bomba_core.domain.contracts import PriceRow, TableParser
from bomba_core.domain.errors import ParseError

EXPECTED_CELLS = 3


class SelectolaxTableParser(TableParser):
    """Converte cada ``tr`` com três ``td`` em uma ``PriceRow``.

    A primeira linha do documento é sempre tratada como cabeçalho. Linhas com
    outra quantidade de células são descartadas sem erro.
    """

    def __init__(self, *, logger: Logger | None = None) -> None:
        self._logger = logger

    def parse(self, content: str) -> list[PriceRow]:
        if not content or not content.strip():
            return []
        try:
            tree = LexborHTMLParser(content)
        except Exception as exc:  # noqa: BLE001
            raise ParseError(
                "Não foi possível inicializar o parser HTML", cause=exc
            ) from exc

        rows = tree.css("tr")
        result: list[PriceRow] = []
        for position, row in enumerate(rows[1:], start=1):
            cells = [child for child in row.iter() if child.tag == "td"]
            if len(cells) != EXPECTED_CELLS:
                self._log_skip(position, len(cells))
                continue
            name, price, change = (self._cell_text(cell) for cell in cells)
            result.append(PriceRow(name=name, price=price, change=change))
        return result

    @staticmethod
    def _cell_text(cell: Any) -> str:
        return cell.text(deep=True).strip()

    def _log_skip(self, position: int, cells: int) -> None:
        if self._logger is None:
            return
        self._logger.debug(
            "parse.row_skipped",
            extra={"extra": {"position": position, "cells": cells}},
        )
