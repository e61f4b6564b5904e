"""
Domain Gateway - Geolocation

This module defines the gateway interface for resolving an IP address
to approximate coordinates.
"""

from abc import ABC, abstractmethod

from src.domain.entities.location import Coordinate, IPAddress


class IGeolocationGateway(ABC):
    """Interface for the IP geolocation stage."""

    @abstractmethod
    async def fetch_coordinate(self, ip_address: IPAddress) -> Coordinate:
        """
        Resolve the approximate position of an IP address.

        Args:
            ip_address: Address returned by the IP lookup stage

        Returns:
            Coordinate of the address

        Raises:
            InvalidIPAddressError: When the address is empty or not an IP literal
            NetworkError: When the request cannot be completed
            UpstreamStatusError: When the provider answers with a non-2xx status
            ProviderRejectedError: When the provider reports ``success: false``
            MalformedResponseError: When latitude/longitude are missing or invalid
        """
        pass
