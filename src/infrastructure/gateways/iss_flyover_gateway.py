"""
Infrastructure Gateway - ISS flyover

Fetches upcoming ISS passes for a coordinate and renders their rise times
through the PassTimeFormatter.
"""

from typing import List

import httpx

from src.domain.entities.errors import (
    InvalidCoordinateError,
    MalformedResponseError,
)
from src.domain.entities.flyover import FlyoverWindow, PassRecord
from src.domain.entities.location import Coordinate
from src.domain.gateways.flyover_gateway import IFlyoverGateway
from src.domain.services.pass_time_formatter import PassTimeFormatter
from src.infrastructure.gateways.base import DEFAULT_TIMEOUT_SECONDS, HttpStageGateway
from src.infrastructure.gateways.schemas import FlyoverPayload
from src.shared import EnumPipelineStage, get_logger

logger = get_logger(__name__)

INVALID_COORDINATES_SENTINEL = "invalid coordinates"


class IssFlyoverGateway(HttpStageGateway, IFlyoverGateway):
    """HTTP client for the ISS flyover prediction API."""

    stage = EnumPipelineStage.FLYOVER

    def __init__(
        self,
        base_url: str,
        formatter: PassTimeFormatter,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(base_url, timeout)
        self.formatter = formatter

    @staticmethod
    def _is_invalid_sentinel(response: httpx.Response) -> bool:
        body = response.text.strip().strip('"').strip()
        return body == INVALID_COORDINATES_SENTINEL

    async def fetch_passes(self, coordinate: Coordinate) -> List[PassRecord]:
        url = f"{self.base_url}/json/"
        params = {"lat": coordinate.latitude, "lon": coordinate.longitude}

        response = await self._get(url, params=params)

        # The sentinel may come with an error status, so check it first
        if self._is_invalid_sentinel(response):
            logger.error(
                "flyover.invalid_coordinates",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
                status_code=response.status_code,
            )
            raise InvalidCoordinateError(
                details=self._details(
                    url=url,
                    latitude=coordinate.latitude,
                    longitude=coordinate.longitude,
                )
            )

        self._raise_for_status(response, url)
        payload = self._parse(response, FlyoverPayload, url)

        windows = [
            FlyoverWindow(rise_time=item.risetime, duration=item.duration)
            for item in payload.response
        ]
        try:
            passes = self.formatter.to_pass_records(windows)
        except (ValueError, OverflowError, OSError) as e:
            logger.error("flyover.unrenderable_risetime", url=url, error=str(e))
            raise MalformedResponseError(
                f"flyover returned a rise time that is not a valid date: {str(e)}",
                details=self._details(url=url),
            ) from e

        logger.info(
            "flyover.resolved",
            count=len(passes),
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            time_zone=self.formatter.time_zone,
        )
        return passes
