from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

import pytest


class LoggerStub:
    def __init__(self, name: str = "bomba") -> None:
        self.name = name
        self.calls: list[tuple[str, str, dict[str, object]]] = []

    def _record(self, level: str, message: str, extra: dict[str, object] | None) -> None:
        self.calls.append((level, message, (extra or {}).get("extra", {})))

    def debug(self, message: str, *, extra: dict[str, object] | None = None) -> None:
        self._record("debug", message, extra)

    def info(self, message: str, *, extra: dict[str, object] | None = None) -> None:
        self._record("info", message, extra)

    def warning(self, message: str, *, extra: dict[str, object] | None = None) -> None:
        self._record("warning", message, extra)

    def error(self, message: str, *, extra: dict[str, object] | None = None) -> None:
        self._record("error", message, extra)

    def exception(self, message: str, *, extra: dict[str, object] | None = None) -> None:
        self._record("exception", message, extra)

    def messages(self, level: str | None = None) -> list[str]:
        return [message for lvl, message, _ in self.calls if level is None or lvl == level]


class ClockStub:
    def __init__(self, now: datetime | None = None) -> None:
        self._now = now or datetime(2024, 3, 5, 8, 30, 0)
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self._now


def render_table(
    rows: Sequence[Sequence[str]],
    *,
    header: Sequence[str] = ("State/UT", "Price", "Change"),
) -> str:
    header_html = "".join(f"<th>{cell}</th>" for cell in header)
    body = "".join(
        "<tr>" + "".join(f"<td> {cell} </td>" for cell in row) + "</tr>" for row in rows
    )
    return (
        "<html><body><table><thead>"
        f"<tr>{header_html}</tr>"
        "</thead><tbody>"
        f"{body}"
        "</tbody></table></body></html>"
    )


def sample_rows(count: int) -> list[tuple[str, str, str]]:
    changes = ("+0.21", "-0.15", "0.00")
    return [
        (f"Region {index}", f"₹ {90 + index}.50", changes[index % 3])
        for index in range(count)
    ]


@pytest.fixture
def logger() -> LoggerStub:
    return LoggerStub()


@pytest.fixture
def clock() -> ClockStub:
    return ClockStub()


@pytest.fixture
def table_html() -> Callable[..., str]:
    return render_table


@pytest.fixture
def rows_factory() -> Callable[[int], list[tuple[str, str, str]]]:
    return sample_rows
