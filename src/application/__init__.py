"""
Application Layer Package

This package contains the use cases and DTOs of the flyover finder.
It orchestrates the flow of data between the pipeline stages.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
