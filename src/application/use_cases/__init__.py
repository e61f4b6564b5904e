"""
Use Cases Package - Application Layer

This package contains the use cases that orchestrate the pipeline stages.
"""

from .flyover_use_cases import GetNextPassesUseCase

__all__ = ["GetNextPassesUseCase"]
