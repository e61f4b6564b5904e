"""
Flyover DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for upcoming ISS passes.
These DTOs are used to transfer data between the application layer and
the presentation layer (API).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.flyover import PassRecord


class PassRecordDTO(BaseModel):
    """DTO for a single upcoming pass."""

    rise_time: str = Field(description="Rise time rendered in the display zone")
    duration: int = Field(description="Pass length in seconds")
    rise_epoch: int = Field(description="Rise time in epoch seconds")

    model_config = {
        "json_schema_extra": {
            "example": {
                "rise_time": "11/14/2023, 10:13:20 PM",
                "duration": 600,
                "rise_epoch": 1700000000,
            }
        }
    }

    @classmethod
    def from_entity(cls, record: PassRecord) -> "PassRecordDTO":
        return cls(
            rise_time=record.rise_time,
            duration=record.duration,
            rise_epoch=record.rise_epoch,
        )


class NextPassesResponseDTO(BaseModel):
    """DTO for the next passes over the caller's location."""

    count: int = Field(description="Number of passes returned")
    passes: List[PassRecordDTO] = Field(description="Passes in chronological order")

    @classmethod
    def from_entities(cls, records: List[PassRecord]) -> "NextPassesResponseDTO":
        passes = [PassRecordDTO.from_entity(record) for record in records]
        return cls(count=len(passes), passes=passes)


class ErrorResponseDTO(BaseModel):
    """DTO describing a pipeline failure."""

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    stage: Optional[str] = Field(default=None, description="Stage that failed")
