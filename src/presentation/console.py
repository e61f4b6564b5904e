"""Console rendering of pipeline results for the command line entry point."""

from typing import Iterable, List

from src.domain.entities.errors import DomainError
from src.domain.entities.flyover import PassRecord


def format_pass(record: PassRecord) -> str:
    return f"Next pass at {record.rise_time} for {record.duration} seconds!"


def format_passes(records: Iterable[PassRecord]) -> List[str]:
    return [format_pass(record) for record in records]


def format_error(error: DomainError) -> str:
    prefix = f"[{error.stage}] " if error.stage else ""
    return f"It didn't work! {prefix}{error.message}"
