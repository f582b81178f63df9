"""Classificação da tendência de preço a partir do texto de variação."""

from __future__ import annotations

from enum import Enum


class Trend(str, Enum):
    """Tendência derivada da célula de variação."""

    INCREASE = "Increase"
    DECREASE = "Decrease"
    NO_CHANGE = "No Change"


def classify_trend(change: str) -> Trend:
    """Deriva a tendência de ``change``.

    O sinal ``-`` é avaliado antes de ``+``: um texto com ambos os sinais
    resulta em ``Trend.DECREASE``.
    """

    if "-" in change:
        return Trend.DECREASE
    if "+" in change:
        return Trend.INCREASE
    return Trend.NO_CHANGE
