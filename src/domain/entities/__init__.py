"""
Domain Entities Package

This package contains the values passed between pipeline stages
and the errors the stages raise.
"""

from .errors import (
    DomainError,
    InvalidCoordinateError,
    InvalidIPAddressError,
    MalformedResponseError,
    NetworkError,
    ProviderRejectedError,
    UpstreamStatusError,
)
from .flyover import FlyoverWindow, PassRecord
from .location import Coordinate, IPAddress

__all__ = [
    "IPAddress",
    "Coordinate",
    "FlyoverWindow",
    "PassRecord",
    "DomainError",
    "NetworkError",
    "UpstreamStatusError",
    "ProviderRejectedError",
    "InvalidCoordinateError",
    "MalformedResponseError",
    "InvalidIPAddressError",
]
