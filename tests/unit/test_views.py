from __future__ import annotations

import pytest

from bomba_core.application.views import (
    PAGE_SECTION_LAYOUT,
    LabeledRow,
    PageSectionLayout,
    slice_view,
)
from bomba_core.domain.contracts import PriceRow, View


def _rows(count: int) -> list[PriceRow]:
    return [PriceRow(name=f"Linha {index}", price=f"{index}.00", change="0.00") for index in range(count)]


def test_page_section_layout_offsets() -> None:
    assert PAGE_SECTION_LAYOUT.city == slice(0, 10)
    assert PAGE_SECTION_LAYOUT.state == slice(10, 20)
    assert PAGE_SECTION_LAYOUT.expected_rows == 20


def test_all_states_keeps_every_row_and_parsed_names() -> None:
    rows = _rows(22)

    result = slice_view(View.ALL_STATES, rows, label="ignorado")

    assert len(result) == 22
    assert [item.label for item in result] == [row.name for row in rows]


def test_city_view_takes_first_ten_and_overrides_label() -> None:
    result = slice_view(View.CITY, _rows(25), "Pune")

    assert len(result) == 10
    assert {item.label for item in result} == {"Pune"}
    assert [item.price for item in result] == [f"{index}.00" for index in range(10)]


def test_state_view_takes_rows_ten_to_nineteen() -> None:
    result = slice_view(View.STATE, _rows(25), "Maharashtra")

    assert [item.price for item in result] == [f"{index}.00" for index in range(10, 20)]
    assert {item.label for item in result} == {"Maharashtra"}


def test_short_sequences_yield_smaller_slices(logger) -> None:
    rows = _rows(14)

    city = slice_view(View.CITY, rows[:6], "Pune", logger=logger)
    state = slice_view(View.STATE, rows, "Maharashtra", logger=logger)
    empty = slice_view(View.STATE, rows[:8], "Maharashtra", logger=logger)

    assert len(city) == 6
    assert [item.price for item in state] == [f"{index}.00" for index in range(10, 14)]
    assert empty == []
    assert logger.messages("warning") == ["slice.short", "slice.short", "slice.short"]
    assert logger.calls[1][2]["selected"] == 4
    assert logger.calls[1][2]["layout_rows"] == PAGE_SECTION_LAYOUT.expected_rows


def test_full_slices_do_not_warn(logger) -> None:
    slice_view(View.CITY, _rows(20), "Pune", logger=logger)
    slice_view(View.STATE, _rows(20), "Maharashtra", logger=logger)

    assert logger.calls == []


def test_labeled_views_require_label() -> None:
    with pytest.raises(ValueError):
        slice_view(View.CITY, _rows(3))


def test_custom_layout_is_honoured() -> None:
    layout = PageSectionLayout(city=slice(0, 2), state=slice(2, 4))

    result = slice_view(View.STATE, _rows(6), "Goa", layout=layout)

    assert result == [
        LabeledRow(label="Goa", price="2.00", change="0.00"),
        LabeledRow(label="Goa", price="3.00", change="0.00"),
    ]
