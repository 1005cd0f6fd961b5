"""Run the Paymentez example backend for the Android/iOS example apps."""

import uvicorn

from paymentez_backend.api import create_app
from paymentez_backend.config import get_settings


def main():
    """Serve the forwarding API on the configured host and port."""
    settings = get_settings()

    uvicorn.run(
        create_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
