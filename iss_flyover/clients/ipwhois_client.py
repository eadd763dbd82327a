from http import HTTPStatus
from typing import Any

import httpx
from pydantic import ValidationError

from iss_flyover.clients.base import BaseLookupClient
from iss_flyover.errors import HTTPStatusError, ParseError, ServiceReportedError
from iss_flyover.models.common import Coordinates, IPAddress, LookupStage


class IpWhoisClient(BaseLookupClient):
    """Client for the https://ipwho.is geolocation API.

    ipwho.is reports failures inside the payload (`success: false` plus a
    `message`), usually with HTTP 200. The payload flag is therefore the
    primary signal; the HTTP status only matters when the body can't be
    decoded at all.
    """

    STAGE = LookupStage.geolocation

    def __init__(self, base_url: str = "https://ipwho.is", timeout_seconds: float = 5.0) -> None:
        super().__init__(base_url, timeout_seconds)

    async def fetch_coords_by_ip(self, ip: IPAddress) -> Coordinates:
        """Resolve latitude/longitude for an explicit IP address."""
        url = f"{self._base_url}/{ip}"
        response = await self._get(url)

        data = self._decode(response)
        self._handle_provider_status(data, ip)

        return self._normalize_payload(data)

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        try:
            return self._parse_json(response)
        except ParseError:
            if response.status_code != HTTPStatus.OK:
                raise HTTPStatusError(response.status_code, response.text, stage=self.STAGE) from None
            raise

    def _handle_provider_status(self, data: dict[str, Any], ip: IPAddress) -> None:
        """Surface `success: false` payloads with the provider's message untouched.

        Example:
            { "ip": "127.0.0.1", "success": false, "message": "Reserved range" }
        """
        success = data.get("success")
        if success is True:
            return

        if success is not False:
            raise ParseError(f"Geolocation provider response has no 'success' flag: {data}", stage=self.STAGE)

        message = str(data.get("message") or "")
        raise ServiceReportedError(message, ip=str(data.get("ip") or ip), stage=self.STAGE)

    def _normalize_payload(self, data: dict[str, Any]) -> Coordinates:
        try:
            return Coordinates(latitude=data.get("latitude"), longitude=data.get("longitude"))
        except ValidationError as exc:
            raise ParseError(
                f"Geolocation provider response has no usable coordinates: {exc}", stage=self.STAGE
            ) from exc
