"""External service clients."""

from .paymentez_service import (
    GatewayResponse,
    GatewayTimeoutError,
    GatewayUnavailableError,
    PaymentezError,
    PaymentezService,
)

__all__ = [
    "GatewayResponse",
    "GatewayTimeoutError",
    "GatewayUnavailableError",
    "PaymentezError",
    "PaymentezService",
]
