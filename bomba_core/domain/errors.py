"""Definições de exceções para o domínio do Bomba."""

from __future__ import annotations


class BombaError(Exception):
    """Exceção base para erros conhecidos da aplicação."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(BombaError):
    """Erro ocorrido durante a busca da página de preços."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.url = url


class ParseError(BombaError):
    """Erro ocorrido durante o parsing da tabela HTML."""


class WriteError(BombaError):
    """Erro ocorrido durante a escrita dos registros no armazenamento."""
