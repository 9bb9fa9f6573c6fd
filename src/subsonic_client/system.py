"""
System endpoints — ping, getLicense.
"""

from typing import TYPE_CHECKING

from subsonic_client.models.library import License
from subsonic_client.transport.envelope import payload_field

if TYPE_CHECKING:
    from subsonic_client.client import AsyncSubsonic


class SystemAPI:
    def __init__(self, client: "AsyncSubsonic"):
        self._client = client

    async def ping(self) -> bool:
        return await self._client.ping()

    async def get_license(self) -> License:
        """License details. Subsonic needs one after the 30-day trial; compatible servers report a perpetual one."""
        payload = await self._client.get("getLicense")
        return License.model_validate(payload_field(payload, "license"))
