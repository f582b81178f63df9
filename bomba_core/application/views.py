"""Recorte posicional e rotulagem das visões de preço."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from logging import Logger

from bomba_core.domain.contracts import PriceRow, View


@dataclass(frozen=True, slots=True)
class PageSectionLayout:
    """Layout das páginas por cidade/estado.

    A tabela dessas páginas traz primeiro o bloco da cidade (linhas 0-9) e em
    seguida o bloco do estado (linhas 10-19). Os índices contam apenas linhas
    de dados, já sem o cabeçalho.
    """

    city: slice
    state: slice

    @property
    def expected_rows(self) -> int:
        return max(self.city.stop, self.state.stop)


PAGE_SECTION_LAYOUT = PageSectionLayout(city=slice(0, 10), state=slice(10, 20))


@dataclass(frozen=True, slots=True)
class LabeledRow:
    """Linha já recortada com o rótulo final da visão."""

    label: str
    price: str
    change: str


def slice_view(
    view: View,
    rows: Sequence[PriceRow],
    label: str | None = None,
    *,
    layout: PageSectionLayout = PAGE_SECTION_LAYOUT,
    logger: Logger | None = None,
) -> list[LabeledRow]:
    """Seleciona e rotula as linhas conforme a visão solicitada.

    ``ALL_STATES`` mantém todas as linhas com o nome lido da tabela. ``CITY``
    e ``STATE`` recortam o bloco correspondente de ``layout`` e sobrescrevem o
    rótulo com ``label``. Sequências curtas produzem recortes menores.
    """

    if view is View.ALL_STATES:
        return [LabeledRow(label=row.name, price=row.price, change=row.change) for row in rows]

    if label is None:
        raise ValueError(f"A visão '{view.value}' exige um rótulo")

    section = layout.city if view is View.CITY else layout.state
    selected = list(rows[section])
    expected = section.stop - section.start
    if len(selected) < expected and logger is not None:
        logger.warning(
            "slice.short",
            extra={
                "extra": {
                    "view": view.value,
                    "label": label,
                    "rows": len(rows),
                    "selected": len(selected),
                    "expected": expected,
                    "layout_rows": layout.expected_rows,
                }
            },
        )
    return [LabeledRow(label=label, price=row.price, change=row.change) for row in selected]
