from typing import Any

from pydantic import TypeAdapter, ValidationError

from iss_flyover.clients.base import BaseLookupClient
from iss_flyover.errors import ParseError
from iss_flyover.models.common import Coordinates, LookupStage, OverpassList

_OVERPASS_LIST_ADAPTER = TypeAdapter(OverpassList)


class IssFlyoverClient(BaseLookupClient):
    """Client for the ISS flyover prediction API.

    Example payload:
        { "response": [ { "risetime": 134564234, "duration": 600 }, ... ] }
    """

    STAGE = LookupStage.overpass

    def __init__(
        self, base_url: str = "https://iss-flyover.herokuapp.com/json/", timeout_seconds: float = 5.0
    ) -> None:
        super().__init__(base_url, timeout_seconds)

    async def fetch_flyover_times(self, coordinates: Coordinates) -> OverpassList:
        """Fetch upcoming passes for the given coordinates, in the order returned."""
        params = {"lat": coordinates.latitude, "lon": coordinates.longitude}
        response = await self._get(f"{self._base_url}/", params=params)
        self._raise_for_status(response)

        data = self._parse_json(response)
        return self._normalize_payload(data)

    def _normalize_payload(self, data: dict[str, Any]) -> OverpassList:
        if "response" not in data:
            raise ParseError(f"Overpass provider response has no 'response' field: {data}", stage=self.STAGE)
        try:
            return _OVERPASS_LIST_ADAPTER.validate_python(data["response"])
        except ValidationError as exc:
            raise ParseError(f"Overpass provider returned malformed pass entries: {exc}", stage=self.STAGE) from exc
