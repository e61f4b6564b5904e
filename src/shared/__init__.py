"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides the enums and logging helpers used by every layer
of the flyover finder.

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumPipelineStage
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumPipelineStage",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
