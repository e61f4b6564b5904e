"""
Domain Layer Package

This package contains the entities, gateway contracts and services of the
flyover pipeline, without dependencies on external frameworks or
infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]
