"""
Gateways Package - Infrastructure Layer

This package contains the httpx implementations of the stage gateway
interfaces defined in the domain layer.
"""

from .ipify_gateway import IpifyGateway
from .ipwhois_gateway import IpWhoIsGateway
from .iss_flyover_gateway import IssFlyoverGateway

__all__ = ["IpifyGateway", "IpWhoIsGateway", "IssFlyoverGateway"]
