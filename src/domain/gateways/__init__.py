"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for the three pipeline stages. Specific implementations
are provided by the infrastructure layer.
"""

from .flyover_gateway import IFlyoverGateway
from .geolocation_gateway import IGeolocationGateway
from .ip_lookup_gateway import IIPLookupGateway

__all__ = ["IIPLookupGateway", "IGeolocationGateway", "IFlyoverGateway"]
