"""
Flyover Use Cases - Application Layer

This module composes the three pipeline stages: public IP lookup,
IP geolocation and pass prediction. Stages run strictly in order and the
first failure is re-raised unchanged, so later stages never run.
"""

from typing import List

from dependency_injector.wiring import Provide, inject

from src.domain.entities.errors import DomainError
from src.domain.entities.flyover import PassRecord
from src.domain.gateways.flyover_gateway import IFlyoverGateway
from src.domain.gateways.geolocation_gateway import IGeolocationGateway
from src.domain.gateways.ip_lookup_gateway import IIPLookupGateway
from src.shared import get_logger

logger = get_logger(__name__)


class GetNextPassesUseCase:
    """Use case for the next ISS passes over the caller's current location."""

    @inject
    def __init__(
        self,
        ip_lookup_gateway: IIPLookupGateway = Provide["ip_lookup_gateway"],
        geolocation_gateway: IGeolocationGateway = Provide["geolocation_gateway"],
        flyover_gateway: IFlyoverGateway = Provide["flyover_gateway"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            ip_lookup_gateway: Stage resolving the public IP address
            geolocation_gateway: Stage resolving coordinates for an IP
            flyover_gateway: Stage predicting passes for a coordinate
        """
        self.ip_lookup_gateway = ip_lookup_gateway
        self.geolocation_gateway = geolocation_gateway
        self.flyover_gateway = flyover_gateway

    async def execute(self) -> List[PassRecord]:
        """
        Run the pipeline once.

        Returns:
            List[PassRecord]: Upcoming passes, in provider order

        Raises:
            DomainError: The error of the first stage that failed
        """
        logger.info("flyover.pipeline.started")

        try:
            ip_address = await self.ip_lookup_gateway.fetch_public_ip()
            logger.debug("flyover.pipeline.ip_resolved", ip=ip_address)

            coordinate = await self.geolocation_gateway.fetch_coordinate(ip_address)
            logger.debug(
                "flyover.pipeline.coordinate_resolved",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
            )

            passes = await self.flyover_gateway.fetch_passes(coordinate)

        except DomainError as e:
            logger.error(
                "flyover.pipeline.failed",
                stage=e.stage,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        logger.info("flyover.pipeline.completed", count=len(passes))
        return passes
