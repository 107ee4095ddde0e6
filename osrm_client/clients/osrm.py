"""
OSRM (Open Source Routing Machine) HTTP client.

Builds request URLs and query strings from typed request configurations,
performs the GET through httpx, and decodes the JSON envelope into typed
payloads. No retries and no caching: every call is a single request.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

import httpx

from ..config import Config, load_config
from ..errors import DecodeError, ProtocolError, TransportError
from ..models.common import Coordinates, Location, SingleCoordinate, StatusCode
from ..models.requests import (
    BaseServiceRequest,
    MatchRequest,
    NearestRequest,
    RouteRequest,
    TableRequest,
    TileRequest,
    TripRequest,
)
from ..models.responses import (
    MatchResponse,
    NearestResponse,
    ResponseModel,
    RouteResponse,
    TableResponse,
    TripResponse,
)
from .envelope import unwrap_envelope

logger = logging.getLogger(__name__)

AnyRequest = Union[BaseServiceRequest, TileRequest]


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully built request: URL path plus ordered query parameters. Reusable."""
    url: str
    params: tuple[tuple[str, str], ...] = ()

    def as_url(self) -> str:
        """Complete URL including the query string, for logs and diagnostics."""
        return str(httpx.URL(self.url, params=list(self.params)))


class OSRMClient:
    """
    Client for the route, nearest, table, match, trip and tile services.

    base_url, version and timeout default to the process-wide values from
    config.yaml; pass them explicitly to talk to another backend. An existing
    httpx.AsyncClient can be injected, in which case it is not closed by
    close().
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        config: Optional[Config] = None,
    ):
        config = config or Config()
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.version = version or config.version
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout or config.timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "OSRMClient":
        """Create a client configured from OSRM_* environment variables / .env."""
        return cls(config=load_config(), **kwargs)

    async def close(self):
        """Close the HTTP client."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "OSRMClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def test_connection(self) -> bool:
        """Test API connectivity with a single nearest query."""
        try:
            await self.nearest(
                SingleCoordinate(location=Location(longitude=4.3517, latitude=50.8466)),  # Brussels
            )
            return True
        except (TransportError, ProtocolError, DecodeError) as e:
            logger.warning(f"OSRM connectivity check against {self.base_url} failed: {e}")
            return False

    def describe(self, request: AnyRequest) -> RequestDescriptor:
        """Build the URL and query parameters for a request without sending it."""
        return RequestDescriptor(
            url=request.url(self.base_url, self.version),
            params=tuple(request.options()),
        )

    async def send(self, request: AnyRequest):
        """
        Send a request and decode the typed response payload.

        Tile requests return the raw vector tile bytes.

        Raises:
            TransportError: the HTTP call failed.
            ProtocolError: the service answered with a non-Ok code, or the
                request is a trip combination the service does not implement.
            DecodeError: the body does not match the expected structure.
        """
        if isinstance(request, TileRequest):
            return await self.fetch_tile(request)

        if isinstance(request, TripRequest) and not request.is_supported():
            raise ProtocolError(
                StatusCode.NOT_IMPLEMENTED,
                "one-way trips require source=first and destination=last",
            )

        descriptor = self.describe(request)
        response = await self._get(descriptor)
        return self._decode(response, request.response_model, descriptor)

    async def debug(self, request: AnyRequest) -> str:
        """Send a request and return the raw response body as text, whatever its status."""
        descriptor = self.describe(request)
        response = await self._get(descriptor)
        return response.text

    async def fetch_tile(self, request: TileRequest) -> bytes:
        """Fetch a Mapbox Vector Tile as an opaque binary blob."""
        descriptor = self.describe(request)
        response = await self._get(descriptor)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Tile request {descriptor.url} failed with HTTP {response.status_code}")
            raise TransportError(
                f"tile request failed with HTTP {response.status_code}", url=descriptor.url
            ) from e
        return response.content

    # ----- Convenience wrappers -----
    async def nearest(self, coordinates: Coordinates, **options) -> NearestResponse:
        return await self.send(NearestRequest(coordinates=coordinates, **options))

    async def route(self, coordinates: Coordinates, **options) -> RouteResponse:
        return await self.send(RouteRequest(coordinates=coordinates, **options))

    async def table(self, coordinates: Coordinates, **options) -> TableResponse:
        return await self.send(TableRequest(coordinates=coordinates, **options))

    async def match(self, coordinates: Coordinates, **options) -> MatchResponse:
        return await self.send(MatchRequest(coordinates=coordinates, **options))

    async def trip(self, coordinates: Coordinates, **options) -> TripResponse:
        return await self.send(TripRequest(coordinates=coordinates, **options))

    # ----- Internals -----
    async def _get(self, descriptor: RequestDescriptor) -> httpx.Response:
        logger.debug(f"GET {descriptor.as_url()}")
        try:
            return await self._client.get(descriptor.url, params=list(descriptor.params))
        except httpx.HTTPError as e:
            logger.error(f"OSRM request to {descriptor.url} failed: {e!r}")
            raise TransportError(f"request to {descriptor.url} failed: {e}", url=descriptor.url) from e

    def _decode(
        self,
        response: httpx.Response,
        payload_model: type[ResponseModel],
        descriptor: RequestDescriptor,
    ) -> ResponseModel:
        # OSRM answers protocol errors with 4xx and a JSON envelope, so the
        # envelope takes precedence over the HTTP status.
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and "code" in data:
            return unwrap_envelope(data, payload_model)

        if response.is_error:
            logger.error(f"OSRM request to {descriptor.url} failed with HTTP {response.status_code}")
            raise TransportError(
                f"HTTP {response.status_code} without response envelope", url=descriptor.url
            )

        raise DecodeError(f"response from {descriptor.url} is not an OSRM envelope")
