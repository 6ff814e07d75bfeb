"""
Customer registry client.
Confirms that a customer exists before an account is opened for them.
"""

import logging
from typing import Optional

import httpx

from accounts_service.core.config import Settings
from accounts_service.services.results import Result, Success, customer_not_found

logger = logging.getLogger(__name__)


class CustomerValidator:
    """
    HTTP client for the customer registry.

    Every outcome other than a 2xx response whose body is the JSON literal
    ``true`` is reported as CUSTOMER_NOT_FOUND. No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "CustomerValidator":
        return cls(
            settings.CUSTOMER_SERVICE_URL,
            timeout=settings.CUSTOMER_SERVICE_TIMEOUT,
        )

    @property
    def client(self) -> httpx.Client:
        """Created on first use, so requests that never validate open no connection pool."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def validate(self, customer_id: int) -> Result[int]:
        """
        Ask the registry whether the customer exists.
        Returns Success(customer_id) or a CUSTOMER_NOT_FOUND failure.
        """
        url = f"{self.base_url}/customers/{customer_id}/exists"
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Error calling customer registry for ID %s: %s", customer_id, e)
            return customer_not_found(customer_id, detail=f"request failed: {e}")

        logger.debug("Customer registry answered %s for ID %s", response.status_code, customer_id)

        if not response.is_success:
            logger.warning(
                "Customer registry returned status %s for ID %s",
                response.status_code,
                customer_id,
            )
            return customer_not_found(customer_id, detail=f"status {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            logger.warning("Customer registry returned a non-JSON body for ID %s", customer_id)
            return customer_not_found(customer_id, detail="malformed body")

        if body is True:
            return Success(customer_id)

        logger.info("Customer registry rejected ID %s with body %r", customer_id, body)
        return customer_not_found(customer_id, detail=f"registry answered {body!r}")

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "CustomerValidator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
