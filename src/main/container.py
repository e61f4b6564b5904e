"""
Dependency container injection module - Main Layer

This module wires settings, gateways and use cases together
with dependency-injector.
"""

from dependency_injector import containers, providers

from src.application.use_cases.flyover_use_cases import GetNextPassesUseCase
from src.domain.services.pass_time_formatter import PassTimeFormatter
from src.infrastructure.gateways.ipify_gateway import IpifyGateway
from src.infrastructure.gateways.ipwhois_gateway import IpWhoIsGateway
from src.infrastructure.gateways.iss_flyover_gateway import IssFlyoverGateway
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Domain services
    pass_time_formatter = providers.Singleton(
        PassTimeFormatter,
        time_zone=config.display.timezone,
        time_format=config.display.time_format,
    )

    # Gateways
    ip_lookup_gateway = providers.Singleton(
        IpifyGateway,
        base_url=config.providers.ip_lookup_url,
        timeout=config.providers.timeout_seconds,
    )

    geolocation_gateway = providers.Singleton(
        IpWhoIsGateway,
        base_url=config.providers.geolocation_url,
        timeout=config.providers.timeout_seconds,
    )

    flyover_gateway = providers.Singleton(
        IssFlyoverGateway,
        base_url=config.providers.flyover_url,
        formatter=pass_time_formatter,
        timeout=config.providers.timeout_seconds,
    )

    # Application (use cases)
    get_next_passes_use_case = providers.Factory(
        GetNextPassesUseCase,
        ip_lookup_gateway=ip_lookup_gateway,
        geolocation_gateway=geolocation_gateway,
        flyover_gateway=flyover_gateway,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", environment=settings.environment.value)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
