"""HTTP API for the Paymentez example backend."""

from .app import create_app

__all__ = ["create_app"]
