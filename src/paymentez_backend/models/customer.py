"""Customer data models."""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """Customer attached to the current request.

    Built per request and never stored. The uid is the application's own
    identifier for the user, not the gateway's.
    """

    uid: str = Field(..., description="Application-side customer identifier")
    email: str = Field(..., description="Customer contact email")
    ip_address: str | None = Field(
        default=None,
        description="Network address the request originated from",
    )
