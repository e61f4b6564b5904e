"""
DTOs Package - Application Layer

This package contains the Data Transfer Objects returned by the API.
"""

from .flyover_dto import ErrorResponseDTO, NextPassesResponseDTO, PassRecordDTO

__all__ = ["PassRecordDTO", "NextPassesResponseDTO", "ErrorResponseDTO"]
