"""Example backend for the Paymentez payment gateway."""

__version__ = "0.1.0"
