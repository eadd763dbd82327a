from http import HTTPStatus
from typing import Any

import httpx

from iss_flyover.errors import HTTPStatusError, NetworkError, ParseError
from iss_flyover.models.common import LookupStage


class BaseLookupClient:
    """Shared plumbing for the leaf lookup clients.

    Each concrete client performs exactly one GET per lookup and maps the
    outcome into the error taxonomy in `iss_flyover.errors`, tagged with the
    client's `STAGE`.
    """

    STAGE: LookupStage

    def __init__(self, base_url: str, timeout_seconds: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Issue a single GET request; transport failures become NetworkError.

        A URL httpx refuses to build (e.g. control characters in a value taken
        from an earlier response) becomes ParseError.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.get(url, params=params)
        except httpx.InvalidURL as exc:
            raise ParseError(
                f"Cannot build {self.STAGE.value} provider request URL: {exc}", stage=self.STAGE
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(
                f"Request to {self.STAGE.value} provider failed: {repr(exc)}", stage=self.STAGE
            ) from exc
        return response

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.status_code != HTTPStatus.OK:
            raise HTTPStatusError(response.status_code, response.text, stage=self.STAGE)

    def _parse_json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ParseError(
                f"Failed to decode {self.STAGE.value} provider response as JSON: {exc}", stage=self.STAGE
            ) from exc

        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object from {self.STAGE.value} provider, got {type(data).__name__}",
                stage=self.STAGE,
            )
        return data
