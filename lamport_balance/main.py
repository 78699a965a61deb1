"""Entrypoint for the lamport balance service."""

import argparse

import uvicorn
from fastapi import FastAPI

from .api import ServiceConfig, create_app
from .balance import BalanceProcessor
from .config import settings


processor = BalanceProcessor()

app: FastAPI = create_app(
    processor,
    ServiceConfig(
        description="Returns the lamport balance of a Solana account via GET ?address= or POST {\"address\": ...}.",
    ),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the lamport balance service.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return parser


def main(argv: list[str] | None = None):
    """Run the balance service."""
    args = build_parser().parse_args(argv)
    uvicorn.run(
        "lamport_balance.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
