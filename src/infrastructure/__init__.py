"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with the third-party HTTP providers.
"""

from src.infrastructure import gateways

__all__ = ["gateways"]
