"""
Infrastructure Gateway - ipwho.is

Resolves an IP address to approximate coordinates through ipwho.is.
The provider reports lookup failures in the payload (``success: false``)
rather than through the HTTP status.
"""

import ipaddress

from src.domain.entities.errors import (
    InvalidIPAddressError,
    MalformedResponseError,
    ProviderRejectedError,
)
from src.domain.entities.location import Coordinate, IPAddress
from src.domain.gateways.geolocation_gateway import IGeolocationGateway
from src.infrastructure.gateways.base import HttpStageGateway
from src.infrastructure.gateways.schemas import IpWhoIsPayload
from src.shared import EnumPipelineStage, get_logger

logger = get_logger(__name__)


class IpWhoIsGateway(HttpStageGateway, IGeolocationGateway):
    """HTTP client for the ipwho.is geolocation API."""

    stage = EnumPipelineStage.GEOLOCATION

    def _validate_ip(self, ip_address: IPAddress) -> str:
        candidate = (ip_address or "").strip()
        try:
            return str(ipaddress.ip_address(candidate))
        except ValueError as e:
            logger.warning("geolocation.invalid_ip", ip=ip_address)
            raise InvalidIPAddressError(
                ip_address, details=self._details(ip=ip_address)
            ) from e

    async def fetch_coordinate(self, ip_address: IPAddress) -> Coordinate:
        ip = self._validate_ip(ip_address)
        url = f"{self.base_url}/{ip}"

        response = await self._get(url)
        self._raise_for_status(response, url)
        payload = self._parse(response, IpWhoIsPayload, url)

        if not payload.success:
            message = payload.message or "Geolocation lookup failed"
            logger.error("geolocation.rejected", ip=ip, message=message, url=url)
            raise ProviderRejectedError(message, details=self._details(ip=ip, url=url))

        if payload.latitude is None or payload.longitude is None:
            logger.error("geolocation.missing_coordinates", ip=ip, url=url)
            raise MalformedResponseError(
                "geolocation payload has no latitude/longitude",
                details=self._details(ip=ip, url=url),
            )

        try:
            coordinate = Coordinate(
                latitude=payload.latitude, longitude=payload.longitude
            )
        except ValueError as e:
            logger.error("geolocation.out_of_range", ip=ip, error=str(e), url=url)
            raise MalformedResponseError(
                f"geolocation payload out of range: {str(e)}",
                details=self._details(ip=ip, url=url),
            ) from e

        logger.info(
            "geolocation.resolved",
            ip=ip,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        )
        return coordinate
