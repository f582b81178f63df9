"""Configuração de logging canônico para o Bomba."""

from __future__ import annotations

import json
import logging
from logging import Logger, LogRecord


class StructuredFormatter(logging.Formatter):
    """Formatter que serializa o atributo ``extra`` caso exista."""

    def format(self, record: LogRecord) -> str:  # noqa: D401
        extra_value = getattr(record, "extra", {})
        if isinstance(extra_value, str):
            return super().format(record)
        if not isinstance(extra_value, dict):
            extra_value = {"value": extra_value}
        record.__dict__["extra"] = json.dumps(extra_value, ensure_ascii=False, default=str)
        return super().format(record)


def configure_logger(name: str = "bomba", *, level: int | str = logging.INFO) -> Logger:
    """Cria um logger com formatação estruturada simples."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler()
    formatter = StructuredFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s | extra=%(extra)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
