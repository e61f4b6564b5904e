"""
Domain Gateway - ISS Flyover

This module defines the gateway interface for predicting upcoming
ISS passes over a coordinate.
"""

from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.flyover import PassRecord
from src.domain.entities.location import Coordinate


class IFlyoverGateway(ABC):
    """Interface for the pass prediction stage."""

    @abstractmethod
    async def fetch_passes(self, coordinate: Coordinate) -> List[PassRecord]:
        """
        Fetch upcoming passes over a coordinate, in provider order.

        Args:
            coordinate: Observer position

        Returns:
            Passes with rise times rendered for display

        Raises:
            InvalidCoordinateError: When the provider rejects the coordinates
            NetworkError: When the request cannot be completed
            UpstreamStatusError: When the provider answers with a non-2xx status
            MalformedResponseError: When the payload has no usable ``response``
        """
        pass
