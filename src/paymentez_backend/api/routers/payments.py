"""Payment API endpoints forwarded to Paymentez."""

import logging
from collections.abc import Awaitable

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse

from ...config import get_settings
from ...models.customer import Customer
from ...services.paymentez_service import (
    GatewayResponse,
    GatewayTimeoutError,
    GatewayUnavailableError,
    PaymentezService,
)

router = APIRouter()
logger = logging.getLogger(__name__)

GREETING = (
    "Great, your backend is set up. "
    "Now you can configure the Paymentez example apps to point here."
)


def get_paymentez_service() -> PaymentezService:
    """Build the gateway client from settings."""
    settings = get_settings()
    return PaymentezService(
        app_code=settings.paymentez_app_code,
        app_key=settings.paymentez_app_key,
        base_url=settings.paymentez_base_url,
        timeout=settings.request_timeout_seconds,
    )


def get_authenticated_customer(uid: str, request: Request) -> Customer:
    """
    Simulate loading the customer for the current session.

    A real application would look the customer up in its own user store.
    """
    settings = get_settings()
    return Customer(
        uid=uid,
        email=settings.customer_email,
        ip_address=request.client.host if request.client else None,
    )


async def _relay(call: Awaitable[GatewayResponse]) -> Response:
    """Await a gateway call and copy its status and body to the response."""
    try:
        result = await call
    except GatewayTimeoutError as e:
        logger.error(f"Paymentez request timed out: {e}")
        raise HTTPException(status_code=504, detail="Payment gateway timed out")
    except GatewayUnavailableError as e:
        logger.error(f"Paymentez request failed: {e}")
        raise HTTPException(status_code=502, detail="Payment gateway unavailable")

    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )


@router.get("/", response_class=PlainTextResponse)
async def index():
    """Confirm the backend is running."""
    return GREETING


@router.get("/get-cards")
async def get_cards(
    uid: str = Query(..., description="Customer identifier"),
    paymentez: PaymentezService = Depends(get_paymentez_service),
):
    """
    List all cards assigned to a customer.

    A real backend should cache cards on its own servers instead of calling
    Paymentez on every request.
    """
    return await _relay(paymentez.list_cards(uid))


@router.post("/create-charge")
async def create_charge(
    request: Request,
    uid: str = Form(...),
    session_id: str | None = Form(default=None),
    token: str = Form(..., description="Card token"),
    amount: float = Form(..., allow_inf_nan=False, description="Amount to debit"),
    dev_reference: str = Form(..., description="Merchant order reference"),
    description: str = Form(...),
    paymentez: PaymentezService = Depends(get_paymentez_service),
):
    """Charge a stored card. Used by the Android/iOS example apps."""
    customer = get_authenticated_customer(uid, request)
    return await _relay(
        paymentez.debit(customer, session_id, token, amount, dev_reference, description)
    )


@router.post("/delete-card")
async def delete_card(
    uid: str = Form(...),
    token: str = Form(...),
    paymentez: PaymentezService = Depends(get_paymentez_service),
):
    """Delete a stored card."""
    return await _relay(paymentez.delete_card(uid, token))


@router.post("/verify-transaction")
async def verify_transaction(
    uid: str = Form(...),
    transaction_id: str = Form(...),
    type: str = Form(..., description="BY_AMOUNT or BY_AUTH_CODE"),
    value: str = Form(..., description="Authorization code or transaction amount"),
    paymentez: PaymentezService = Depends(get_paymentez_service),
):
    """Verify a card or transaction."""
    return await _relay(paymentez.verify(uid, transaction_id, type, value))
