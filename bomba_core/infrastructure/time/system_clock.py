"""Implementação concreta de ``Clock`` baseada no relógio do sistema."""

from __future__ import annotations

from datetime import datetime

from bomba_core.domain.contracts import Clock


class SystemClock(Clock):
    """Retorna o instante atual no fuso local do servidor.

    A data de captura gravada com os preços é a data local, não a UTC.
    """

    def now(self) -> datetime:
        return datetime.now().astimezone()
