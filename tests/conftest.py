from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import DomainError  # noqa: E402
from src.domain.entities.flyover import PassRecord  # noqa: E402
from src.domain.entities.location import Coordinate, IPAddress  # noqa: E402
from src.domain.gateways.flyover_gateway import IFlyoverGateway  # noqa: E402
from src.domain.gateways.geolocation_gateway import IGeolocationGateway  # noqa: E402
from src.domain.gateways.ip_lookup_gateway import IIPLookupGateway  # noqa: E402
from src.domain.services.pass_time_formatter import PassTimeFormatter  # noqa: E402

Responder = Callable[[httpx.Request], httpx.Response]


class StubAsyncClient:
    """Stands in for httpx.AsyncClient; answers every GET with a responder."""

    def __init__(self, responder: Responder):
        self._responder = responder
        self.requests: List[httpx.Request] = []

    async def __aenter__(self) -> "StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: Optional[Dict[str, Any]] = None, **kwargs):
        request = httpx.Request("GET", url, params=params)
        self.requests.append(request)
        return self._responder(request)


def json_response(status_code: int, payload: Any) -> Responder:
    def _respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload, request=request)

    return _respond


def text_response(status_code: int, body: str) -> Responder:
    def _respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body, request=request)

    return _respond


def raising(exc_type: type[httpx.RequestError], message: str) -> Responder:
    def _respond(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    return _respond


@pytest.fixture()
def stub_http(monkeypatch) -> Callable[[Responder], StubAsyncClient]:
    def install(responder: Responder) -> StubAsyncClient:
        client = StubAsyncClient(responder)
        monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)
        return client

    return install


@pytest.fixture()
def utc_formatter() -> PassTimeFormatter:
    return PassTimeFormatter(time_zone="UTC")


class StubIPLookupGateway(IIPLookupGateway):
    def __init__(self, ip: IPAddress = "1.2.3.4", error: DomainError | None = None):
        self.ip = ip
        self.error = error
        self.calls = 0

    async def fetch_public_ip(self) -> IPAddress:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.ip


class StubGeolocationGateway(IGeolocationGateway):
    def __init__(
        self,
        coordinate: Coordinate | None = None,
        error: DomainError | None = None,
    ):
        self.coordinate = coordinate or Coordinate(latitude=49.2, longitude=-123.1)
        self.error = error
        self.calls: List[IPAddress] = []

    async def fetch_coordinate(self, ip_address: IPAddress) -> Coordinate:
        self.calls.append(ip_address)
        if self.error is not None:
            raise self.error
        return self.coordinate


class StubFlyoverGateway(IFlyoverGateway):
    def __init__(
        self,
        passes: List[PassRecord] | None = None,
        error: DomainError | None = None,
    ):
        self.passes = passes if passes is not None else []
        self.error = error
        self.calls: List[Coordinate] = []

    async def fetch_passes(self, coordinate: Coordinate) -> List[PassRecord]:
        self.calls.append(coordinate)
        if self.error is not None:
            raise self.error
        return list(self.passes)


@pytest.fixture()
def sample_passes() -> List[PassRecord]:
    return [
        PassRecord(
            rise_time="11/14/2023, 10:13:20 PM", duration=600, rise_epoch=1700000000
        ),
        PassRecord(
            rise_time="11/14/2023, 11:48:20 PM", duration=512, rise_epoch=1700005700
        ),
    ]
