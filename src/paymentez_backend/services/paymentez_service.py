"""Paymentez gateway client."""

import base64
import hashlib
import logging
import time
from dataclasses import dataclass

import httpx

from ..models.customer import Customer

logger = logging.getLogger(__name__)

LIST_PATH = "/v2/transaction/list"
DEBIT_PATH = "/v2/transaction/debit"
DELETE_PATH = "/v2/transaction/delete"
VERIFY_PATH = "/v2/transaction/verify"


class PaymentezError(Exception):
    """Raised when a request could not reach the gateway."""


class GatewayTimeoutError(PaymentezError):
    """The gateway did not answer within the configured timeout."""


class GatewayUnavailableError(PaymentezError):
    """The gateway could not be reached or answered with a broken response."""


@dataclass
class GatewayResponse:
    """Status and raw body of a single gateway call."""

    status_code: int
    body: bytes
    media_type: str = "application/json"


def generate_auth_token(app_code: str, app_key: str, timestamp: int | None = None) -> str:
    """Build the Auth-Token header value.

    The token is base64("<app_code>;<timestamp>;<sha256(app_key + timestamp)>").
    """
    if timestamp is None:
        timestamp = int(time.time())
    unique_token = hashlib.sha256(f"{app_key}{timestamp}".encode()).hexdigest()
    raw = f"{app_code};{timestamp};{unique_token}"
    return base64.b64encode(raw.encode()).decode()


def build_debit_payload(
    customer: Customer,
    session_id: str | None,
    token: str,
    amount: float,
    dev_reference: str,
    description: str,
) -> dict:
    """Payload for a debit against a stored card."""
    payload = {
        "user": {
            "id": customer.uid,
            "email": customer.email,
            "ip_address": customer.ip_address,
        },
        "order": {
            "amount": amount,
            "description": description,
            "dev_reference": dev_reference,
            "vat": 0,
        },
        "card": {"token": token},
    }
    if session_id:
        payload["session_id"] = session_id
    return payload


def build_delete_payload(uid: str, token: str) -> dict:
    """Payload for removing a stored card."""
    return {
        "card": {"token": token},
        "user": {"id": uid},
    }


def build_verify_payload(uid: str, transaction_id: str, type: str, value: str) -> dict:
    """Payload for verifying a transaction (BY_AMOUNT or BY_AUTH_CODE)."""
    return {
        "user": {"id": uid},
        "transaction": {"id": transaction_id},
        "type": type,
        "value": value,
    }


class PaymentezService:
    """Service that forwards requests to the Paymentez API."""

    def __init__(
        self,
        app_code: str,
        app_key: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.app_code = app_code
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def headers(self) -> dict:
        # Tokens are timestamped, so build a fresh one per call
        return {
            "Auth-Token": generate_auth_token(self.app_code, self.app_key),
            "Content-Type": "application/json",
        }

    async def list_cards(self, uid: str) -> GatewayResponse:
        """List the cards stored for a customer."""
        return await self._request("GET", LIST_PATH, params={"uid": uid})

    async def debit(
        self,
        customer: Customer,
        session_id: str | None,
        token: str,
        amount: float,
        dev_reference: str,
        description: str,
    ) -> GatewayResponse:
        """Charge a stored card."""
        payload = build_debit_payload(
            customer, session_id, token, amount, dev_reference, description
        )
        return await self._request("POST", DEBIT_PATH, json=payload)

    async def delete_card(self, uid: str, token: str) -> GatewayResponse:
        """Delete a stored card."""
        return await self._request("POST", DELETE_PATH, json=build_delete_payload(uid, token))

    async def verify(
        self, uid: str, transaction_id: str, type: str, value: str
    ) -> GatewayResponse:
        """Verify a pending transaction."""
        payload = build_verify_payload(uid, transaction_id, type, value)
        return await self._request("POST", VERIFY_PATH, json=payload)

    async def _request(self, method: str, path: str, **kwargs) -> GatewayResponse:
        logger.info(f"Paymentez {method} {path}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    headers=self.headers,
                    **kwargs,
                )
        except httpx.TimeoutException as e:
            logger.error(f"Paymentez {method} {path} timed out: {e}")
            raise GatewayTimeoutError(f"Timed out calling {path}") from e
        except httpx.RequestError as e:
            logger.error(f"Paymentez {method} {path} failed: {e}")
            raise GatewayUnavailableError(f"Could not reach {path}") from e

        logger.info(f"Paymentez {method} {path} -> {response.status_code}")
        return GatewayResponse(
            status_code=response.status_code,
            body=response.content,
            media_type=response.headers.get("content-type", "application/json"),
        )
