"""
Infrastructure Gateway - ipify

Resolves the caller's public IP address through the ipify API.
"""

from src.domain.entities.location import IPAddress
from src.domain.gateways.ip_lookup_gateway import IIPLookupGateway
from src.infrastructure.gateways.base import HttpStageGateway
from src.infrastructure.gateways.schemas import IpifyPayload
from src.shared import EnumPipelineStage, get_logger

logger = get_logger(__name__)


class IpifyGateway(HttpStageGateway, IIPLookupGateway):
    """HTTP client for the ipify public IP API."""

    stage = EnumPipelineStage.IP_LOOKUP

    async def fetch_public_ip(self) -> IPAddress:
        url = f"{self.base_url}/"
        response = await self._get(url, params={"format": "json"})
        self._raise_for_status(response, url)

        payload = self._parse(response, IpifyPayload, url)
        logger.info("ip_lookup.resolved", ip=payload.ip)
        return payload.ip
