"""Serverless entrypoint: Vercel serves the ASGI ``app`` found at ``api/balance.py``."""

from lamport_balance.main import app

__all__ = ["app"]
