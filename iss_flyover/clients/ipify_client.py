from ipaddress import ip_address

from iss_flyover.clients.base import BaseLookupClient
from iss_flyover.errors import ParseError
from iss_flyover.models.common import IPAddress, LookupStage


class IpifyClient(BaseLookupClient):
    """Client for the https://www.ipify.org public IP echo API."""

    STAGE = LookupStage.ip

    def __init__(self, base_url: str = "https://api.ipify.org", timeout_seconds: float = 5.0) -> None:
        super().__init__(base_url, timeout_seconds)

    async def fetch_my_ip(self) -> IPAddress:
        """Resolve the public IP address this process is seen from."""
        response = await self._get(self._base_url, params={"format": "json"})
        self._raise_for_status(response)

        data = self._parse_json(response)
        ip = data.get("ip")
        if not isinstance(ip, str) or not ip:
            raise ParseError(f"IP provider response has no 'ip' field: {data}", stage=self.STAGE)

        # The value ends up in the geolocation URL path, so it must be an IP literal.
        try:
            ip_address(ip)
        except ValueError as exc:
            raise ParseError(f"IP provider returned an invalid IP address: {ip!r}", stage=self.STAGE) from exc
        return ip
