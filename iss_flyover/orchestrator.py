from collections.abc import Callable

from iss_flyover.clients.flyover_client import IssFlyoverClient
from iss_flyover.clients.ipify_client import IpifyClient
from iss_flyover.clients.ipwhois_client import IpWhoisClient
from iss_flyover.errors import LookupStepError
from iss_flyover.logger import logger
from iss_flyover.models.common import LookupStage, OverpassList
from iss_flyover.settings import Settings, get_settings

PassesCallback = Callable[[LookupStepError | None, OverpassList | None], None]


class FlyoverOrchestrator:
    """Chains IP lookup -> geolocation -> ISS flyover prediction.

    Each step consumes the previous step's result, so the lookups run strictly
    one after another. The first failure stops the chain and is re-raised as
    the same exception object, with `stage` naming the step that failed.
    Nothing is cached: every call performs three fresh lookups.
    """

    def __init__(
        self,
        ip_client: IpifyClient,
        geo_client: IpWhoisClient,
        flyover_client: IssFlyoverClient,
    ) -> None:
        self._ip_client = ip_client
        self._geo_client = geo_client
        self._flyover_client = flyover_client

    async def next_iss_times_for_my_location(self) -> OverpassList:
        """Return upcoming ISS passes for the caller's current location."""
        stage = LookupStage.ip
        try:
            ip = await self._ip_client.fetch_my_ip()
            logger.info(f"Resolved public IP ip={ip}")

            stage = LookupStage.geolocation
            coordinates = await self._geo_client.fetch_coords_by_ip(ip)
            logger.info(
                f"Resolved coordinates ip={ip} latitude={coordinates.latitude} longitude={coordinates.longitude}"
            )

            stage = LookupStage.overpass
            passes = await self._flyover_client.fetch_flyover_times(coordinates)
        except LookupStepError as exc:
            if exc.stage is None:
                exc.stage = stage
            logger.error(f"ISS flyover lookup failed stage={exc.stage.value} error={exc!r}")
            raise

        logger.info(f"Fetched ISS passes count={len(passes)}")
        return passes


def build_orchestrator(settings: Settings | None = None) -> FlyoverOrchestrator:
    """Wire the three lookup clients from settings (environment by default)."""
    settings = settings or get_settings()
    return FlyoverOrchestrator(
        ip_client=IpifyClient(settings.ipify_url, settings.timeout_seconds),
        geo_client=IpWhoisClient(settings.ipwhois_url, settings.timeout_seconds),
        flyover_client=IssFlyoverClient(settings.iss_flyover_url, settings.timeout_seconds),
    )


async def next_iss_times_for_my_location(
    callback: PassesCallback,
    orchestrator: FlyoverOrchestrator | None = None,
) -> None:
    """Run the lookup chain and report the outcome through `callback`.

    The callback is invoked exactly once, either as `callback(None, passes)`
    or as `callback(error, None)`. Exceptions outside the lookup error
    taxonomy are not reported through the callback and propagate as-is.
    """
    orchestrator = orchestrator or build_orchestrator()
    try:
        passes = await orchestrator.next_iss_times_for_my_location()
    except LookupStepError as exc:
        callback(exc, None)
    else:
        callback(None, passes)
