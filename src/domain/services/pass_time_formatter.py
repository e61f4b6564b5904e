"""Domain service rendering provider rise times for display."""

from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.domain.entities.flyover import FlyoverWindow, PassRecord

DEFAULT_TIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


class PassTimeFormatter:
    """
    Convert epoch rise times into local timestamp strings.

    The time zone is an explicit input. ``None`` means the executing
    system's local zone, so output then depends on the host; pass an
    IANA name to make rendering deterministic.
    """

    def __init__(
        self,
        time_zone: Optional[str] = None,
        time_format: str = DEFAULT_TIME_FORMAT,
    ):
        self.time_zone = time_zone
        self.time_format = time_format
        self._tz = self._resolve_zone(time_zone)

    @staticmethod
    def _resolve_zone(name: Optional[str]) -> Optional[tzinfo]:
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {name}") from e

    def format_epoch(self, epoch_seconds: int) -> str:
        moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
        # astimezone(None) converts to the system local zone
        return moment.astimezone(self._tz).strftime(self.time_format)

    def to_pass_records(self, windows: Iterable[FlyoverWindow]) -> List[PassRecord]:
        return [
            PassRecord(
                rise_time=self.format_epoch(window.rise_time),
                duration=window.duration,
                rise_epoch=window.rise_time,
            )
            for window in windows
        ]
