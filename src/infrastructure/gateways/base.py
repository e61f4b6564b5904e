"""
Infrastructure Gateway - HTTP base

Common request handling for the pipeline stage gateways: one GET per call
on a fresh ``httpx.AsyncClient``, with transport failures, error statuses
and unparseable payloads mapped onto the domain error taxonomy.
"""

from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.domain.entities.errors import (
    MalformedResponseError,
    NetworkError,
    UpstreamStatusError,
)
from src.shared import EnumPipelineStage, get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

DEFAULT_TIMEOUT_SECONDS = 5.0


class HttpStageGateway:
    """Base class for gateways that perform a single JSON GET request."""

    stage: EnumPipelineStage

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        """
        Initialize the gateway.

        Args:
            base_url: Base URL of the provider
            timeout: Request timeout in seconds, applied to every phase
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _details(self, **extra: Any) -> Dict[str, Any]:
        return {"stage": self.stage.value, **extra}

    async def _get(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """Send the request; transport failures and timeouts become NetworkError."""
        logger.info(f"{self.stage.value}.request", url=url, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(
                f"{self.stage.value}.timeout",
                url=url,
                timeout=self.timeout,
                error=str(e),
            )
            raise NetworkError(
                f"{self.stage.value} request timed out after {self.timeout}s",
                details=self._details(url=url, timeout=self.timeout),
            ) from e
        except httpx.RequestError as e:
            logger.error(f"{self.stage.value}.request_error", url=url, error=str(e))
            raise NetworkError(
                f"{self.stage.value} request failed: {str(e)}",
                details=self._details(url=url),
            ) from e

        logger.debug(
            f"{self.stage.value}.response",
            url=url,
            status_code=response.status_code,
        )
        return response

    def _raise_for_status(self, response: httpx.Response, url: str) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"{self.stage.value}.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise UpstreamStatusError(
                e.response.status_code,
                details=self._details(url=url, response_text=e.response.text),
            ) from e

    def _parse(
        self, response: httpx.Response, schema: Type[PayloadT], url: str
    ) -> PayloadT:
        try:
            return schema.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                f"{self.stage.value}.malformed_response",
                url=url,
                response_text=response.text,
                error=str(e),
            )
            raise MalformedResponseError(
                f"{self.stage.value} returned an unexpected payload: {str(e)}",
                details=self._details(url=url),
            ) from e
