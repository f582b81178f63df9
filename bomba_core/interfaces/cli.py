"""Composition root CLI para executar as coletas de preço."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from contextlib import ExitStack
from logging import Logger

from pymongo import MongoClient

from config.settings import Settings, load_settings
from bomba_core.application.collect_usecase import CollectPricesUseCase
from bomba_core.application.sources import PriceSource
from bomba_core.domain.contracts import PriceRecord, RecordStore
from bomba_core.domain.errors import BombaError
from bomba_core.infrastructure.db.mongo_store import NullRecordStore, build_store
from bomba_core.infrastructure.http.httpx_fetcher import HttpxPageFetcher, build_client
from bomba_core.infrastructure.logging.logger import configure_logger
from bomba_core.infrastructure.parsing.selectolax_table_parser import SelectolaxTableParser
from bomba_core.infrastructure.time.system_clock import SystemClock


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coletor de preços de combustível")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Executa a coleta sem gravar o lote no MongoDB.",
    )
    parser.add_argument(
        "--fuel",
        help="Sobrescreve o tipo de combustível configurado (ex.: diesel, petrol).",
    )
    subparsers = parser.add_subparsers(dest="view", required=True)
    subparsers.add_parser("all", help="Preços de todos os estados.")
    city = subparsers.add_parser("city", help="Preços recentes de uma cidade.")
    city.add_argument("name", help="Nome da cidade, ex.: 'Navi Mumbai'.")
    state = subparsers.add_parser("state", help="Preços recentes de um estado.")
    state.add_argument("name", help="Nome do estado como aparece na URL.")
    return parser


def _run(use_case: CollectPricesUseCase, args: argparse.Namespace) -> list[PriceRecord]:
    if args.view == "city":
        return use_case.by_city(args.name)
    if args.view == "state":
        return use_case.by_state(args.name)
    return use_case.all_states()


def _build_store(settings: Settings, *, dry_run: bool, stack: ExitStack) -> RecordStore:
    if dry_run:
        return NullRecordStore()
    mongo_client = MongoClient(settings.database.uri)
    stack.callback(mongo_client.close)
    database = mongo_client[settings.database.name]
    return build_store(database, settings.database.collections)


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = _build_parser()
    args = arg_parser.parse_args(argv)

    settings = load_settings()
    logger: Logger = configure_logger()
    clock = SystemClock()

    logger.info(
        "cli.start",
        extra={
            "extra": {
                "at": clock.now().isoformat(),
                "view": args.view,
                "dry_run": args.dry_run,
            }
        },
    )

    source = PriceSource(
        base_url=settings.http.base_url,
        fuel=args.fuel or settings.http.fuel,
    )

    with ExitStack() as stack:
        http_client = build_client(user_agent=settings.http.user_agent)
        stack.callback(http_client.close)
        store = _build_store(settings, dry_run=args.dry_run, stack=stack)

        use_case = CollectPricesUseCase(
            fetcher=HttpxPageFetcher(http_client),
            parser=SelectolaxTableParser(logger=logger),
            store=store,
            clock=clock,
            logger=logger,
            source=source,
        )
        try:
            records = _run(use_case, args)
        except BombaError as exc:
            logger.exception(
                "cli.error",
                extra={
                    "extra": {
                        "error": exc.__class__.__name__,
                        "status_code": getattr(exc, "status_code", None),
                    }
                },
            )
            return 1

    print(json.dumps([record.to_payload() for record in records], ensure_ascii=False, indent=2))
    logger.info(
        "cli.finish",
        extra={
            "extra": {
                "at": clock.now().isoformat(),
                "view": args.view,
                "count": len(records),
            }
        },
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - entrypoint manual
    raise SystemExit(main())
