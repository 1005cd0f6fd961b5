"""Data models for the Paymentez example backend."""

from .customer import Customer

__all__ = [
    "Customer",
]
