from __future__ import annotations

import httpx
import pytest

from src.application.use_cases.flyover_use_cases import GetNextPassesUseCase
from src.domain.entities.errors import (
    InvalidCoordinateError,
    NetworkError,
    ProviderRejectedError,
)
from src.domain.entities.location import Coordinate
from src.domain.services.pass_time_formatter import PassTimeFormatter
from src.infrastructure.gateways.ipify_gateway import IpifyGateway
from src.infrastructure.gateways.ipwhois_gateway import IpWhoIsGateway
from src.infrastructure.gateways.iss_flyover_gateway import IssFlyoverGateway
from tests.conftest import (
    StubFlyoverGateway,
    StubGeolocationGateway,
    StubIPLookupGateway,
    json_response,
)


@pytest.mark.asyncio
async def test_execute_chains_stage_outputs(sample_passes) -> None:
    coordinate = Coordinate(latitude=49.2, longitude=-123.1)
    ip_gateway = StubIPLookupGateway(ip="1.2.3.4")
    geo_gateway = StubGeolocationGateway(coordinate=coordinate)
    flyover_gateway = StubFlyoverGateway(passes=sample_passes)
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=ip_gateway,
        geolocation_gateway=geo_gateway,
        flyover_gateway=flyover_gateway,
    )

    passes = await use_case.execute()

    assert passes == sample_passes
    assert ip_gateway.calls == 1
    assert geo_gateway.calls == ["1.2.3.4"]
    assert flyover_gateway.calls == [coordinate]


@pytest.mark.asyncio
async def test_execute_short_circuits_on_ip_failure() -> None:
    error = NetworkError("connection refused", details={"stage": "ip_lookup"})
    geo_gateway = StubGeolocationGateway()
    flyover_gateway = StubFlyoverGateway()
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=StubIPLookupGateway(error=error),
        geolocation_gateway=geo_gateway,
        flyover_gateway=flyover_gateway,
    )

    with pytest.raises(NetworkError) as exc:
        await use_case.execute()

    assert exc.value is error
    assert geo_gateway.calls == []
    assert flyover_gateway.calls == []


@pytest.mark.asyncio
async def test_execute_short_circuits_on_geolocation_failure() -> None:
    error = ProviderRejectedError("Invalid IP address")
    flyover_gateway = StubFlyoverGateway()
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=StubIPLookupGateway(),
        geolocation_gateway=StubGeolocationGateway(error=error),
        flyover_gateway=flyover_gateway,
    )

    with pytest.raises(ProviderRejectedError) as exc:
        await use_case.execute()

    assert exc.value is error
    assert flyover_gateway.calls == []


@pytest.mark.asyncio
async def test_execute_forwards_last_stage_error() -> None:
    error = InvalidCoordinateError()
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=StubIPLookupGateway(),
        geolocation_gateway=StubGeolocationGateway(),
        flyover_gateway=StubFlyoverGateway(error=error),
    )

    with pytest.raises(InvalidCoordinateError) as exc:
        await use_case.execute()

    assert exc.value is error


@pytest.mark.asyncio
async def test_execute_is_idempotent_with_pinned_zone(stub_http) -> None:
    routes = {
        "api.ipify.org": json_response(200, {"ip": "1.2.3.4"}),
        "ipwho.is": json_response(
            200, {"success": True, "latitude": 49.2, "longitude": -123.1}
        ),
        "iss-flyover.herokuapp.com": json_response(
            200,
            {
                "response": [
                    {"risetime": 1700000000, "duration": 600},
                    {"risetime": 1700005700, "duration": 512},
                ]
            },
        ),
    }
    stub_http(lambda request: routes[request.url.host](request))
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=IpifyGateway("https://api.ipify.org"),
        geolocation_gateway=IpWhoIsGateway("http://ipwho.is"),
        flyover_gateway=IssFlyoverGateway(
            "https://iss-flyover.herokuapp.com",
            PassTimeFormatter(time_zone="America/Vancouver"),
        ),
    )

    first = await use_case.execute()
    second = await use_case.execute()

    assert first == second
    assert [p.rise_time for p in first] == [
        "11/14/2023, 02:13:20 PM",
        "11/14/2023, 03:48:20 PM",
    ]


@pytest.mark.asyncio
async def test_end_to_end_with_http_providers(stub_http, utc_formatter) -> None:
    routes = {
        "api.ipify.org": json_response(200, {"ip": "1.2.3.4"}),
        "ipwho.is": json_response(
            200, {"success": True, "latitude": "49.2", "longitude": "-123.1"}
        ),
        "iss-flyover.herokuapp.com": json_response(
            200, {"response": [{"risetime": 1700000000, "duration": 600}]}
        ),
    }

    def respond(request: httpx.Request) -> httpx.Response:
        return routes[request.url.host](request)

    client = stub_http(respond)
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=IpifyGateway("https://api.ipify.org"),
        geolocation_gateway=IpWhoIsGateway("http://ipwho.is"),
        flyover_gateway=IssFlyoverGateway(
            "https://iss-flyover.herokuapp.com", utc_formatter
        ),
    )

    passes = await use_case.execute()

    assert len(passes) == 1
    assert passes[0].duration == 600
    assert passes[0].rise_time == utc_formatter.format_epoch(1700000000)
    assert [r.url.host for r in client.requests] == [
        "api.ipify.org",
        "ipwho.is",
        "iss-flyover.herokuapp.com",
    ]
    assert client.requests[1].url.path == "/1.2.3.4"


@pytest.mark.asyncio
async def test_end_to_end_connection_failure_stops_pipeline(
    stub_http, utc_formatter
) -> None:
    def respond(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = stub_http(respond)
    use_case = GetNextPassesUseCase(
        ip_lookup_gateway=IpifyGateway("https://api.ipify.org"),
        geolocation_gateway=IpWhoIsGateway("http://ipwho.is"),
        flyover_gateway=IssFlyoverGateway("https://flyover", utc_formatter),
    )

    with pytest.raises(NetworkError) as exc:
        await use_case.execute()

    assert exc.value.stage == "ip_lookup"
    assert len(client.requests) == 1
