"""
Flyover Router - Presentation Layer

This module defines the FastAPI router for ISS pass endpoints.
"""

from typing import Dict, Type

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.flyover_dto import ErrorResponseDTO, NextPassesResponseDTO
from src.application.use_cases.flyover_use_cases import GetNextPassesUseCase
from src.domain.entities.errors import (
    DomainError,
    InvalidCoordinateError,
    InvalidIPAddressError,
    MalformedResponseError,
    NetworkError,
    ProviderRejectedError,
    UpstreamStatusError,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/passes", tags=["Passes"])

ERROR_STATUS_CODES: Dict[Type[DomainError], int] = {
    NetworkError: status.HTTP_503_SERVICE_UNAVAILABLE,
    UpstreamStatusError: status.HTTP_502_BAD_GATEWAY,
    MalformedResponseError: status.HTTP_502_BAD_GATEWAY,
    ProviderRejectedError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidCoordinateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidIPAddressError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def _status_for(error: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.get(
    "/next",
    response_model=NextPassesResponseDTO,
    responses={
        422: {"model": ErrorResponseDTO},
        502: {"model": ErrorResponseDTO},
        503: {"model": ErrorResponseDTO},
    },
)
@inject
async def get_next_passes(
    get_next_passes_use_case: GetNextPassesUseCase = Depends(
        Provide["get_next_passes_use_case"]
    ),
) -> NextPassesResponseDTO:
    """
    Get the next ISS passes over the caller's current location.

    The location is derived from the public IP address of the host running
    the service.

    Raises:
        HTTPException: With the status mapped from the failing stage's error
    """
    logger.info("passes.requested")

    try:
        passes = await get_next_passes_use_case.execute()
    except DomainError as e:
        status_code = _status_for(e)
        logger.error(
            "passes.retrieval_failed",
            stage=e.stage,
            status_code=status_code,
            error=str(e),
        )
        detail = ErrorResponseDTO(
            error=type(e).__name__, message=e.message, stage=e.stage
        )
        raise HTTPException(
            status_code=status_code, detail=detail.model_dump()
        ) from e

    response = NextPassesResponseDTO.from_entities(passes)
    logger.info("passes.retrieved", count=response.count)
    return response
