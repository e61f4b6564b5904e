"""
Domain Gateway - IP Lookup

This module defines the gateway interface for discovering the caller's
public IP address.
"""

from abc import ABC, abstractmethod

from src.domain.entities.location import IPAddress


class IIPLookupGateway(ABC):
    """Interface for the public IP lookup stage."""

    @abstractmethod
    async def fetch_public_ip(self) -> IPAddress:
        """
        Fetch the public IP address the provider sees for this host.

        Returns:
            The IP address reported by the provider

        Raises:
            NetworkError: When the request cannot be completed
            UpstreamStatusError: When the provider answers with a non-2xx status
            MalformedResponseError: When the payload has no usable ``ip`` field
        """
        pass
