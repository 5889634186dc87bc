"""Geocoding Client - wraps httpx.AsyncClient around the Google Geocoding API.

Invariants:
    - Empty/whitespace address -> InvalidInputError, no network call made
    - Exactly one outbound request per resolve() call: no retries, no caching
    - Zero results -> UnresolvableAddressError (422)
    - Timeout, transport failure, non-2xx, bad payload or provider refusal
      -> GeocoderUnavailableError (500)
    - Success returns the provider's first result only
    - CancelledError (BaseException) passes through uncaught so a disconnected
      client aborts the in-flight request

Design Decisions:
    - Failures returned as Err values, never raised: callers branch on Result
    - Bounded wait via httpx timeout (default 10s from settings)
"""

import logging

import httpx

from placeshare.core.domain_types import Coordinates
from placeshare.core.errors import (
    GeocoderUnavailableError, InvalidInputError, UnresolvableAddressError,
)
from placeshare.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleGeocodingClient:
    """Resolves postal addresses to coordinates via the Google Geocoding API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = GOOGLE_GEOCODE_URL,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def resolve(self, address: str) -> Result[Coordinates]:
        """Resolve an address to its best-match coordinates."""
        if not address or not address.strip():
            return Err(InvalidInputError())

        try:
            response = await self.client.get(
                self.base_url,
                params={"address": address, "key": self.api_key},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException:
            logger.warning(
                "Geocoding request timed out",
                extra={"error_code": "GEOCODER_UNAVAILABLE"},
            )
            return Err(GeocoderUnavailableError("timeout"))
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Geocoding provider returned HTTP {e.response.status_code}",
                extra={"error_code": "GEOCODER_UNAVAILABLE"},
            )
            return Err(GeocoderUnavailableError(
                f"http_{e.response.status_code}",
            ))
        except httpx.HTTPError as e:
            logger.warning(
                f"Geocoding transport error: {e}",
                extra={"error_code": "GEOCODER_UNAVAILABLE"},
            )
            return Err(GeocoderUnavailableError("transport"))
        except ValueError:
            logger.warning(
                "Geocoding provider returned a non-JSON body",
                extra={"error_code": "GEOCODER_UNAVAILABLE"},
            )
            return Err(GeocoderUnavailableError("invalid_payload"))

        return parse_geocode_payload(address, payload)

    async def aclose(self) -> None:
        await self.client.aclose()


def parse_geocode_payload(address: str, payload: object) -> Result[Coordinates]:
    """Classify a Google Geocoding JSON payload. Pure: no IO."""
    if not isinstance(payload, dict):
        return Err(GeocoderUnavailableError("invalid_payload"))

    status = payload.get("status")
    results = payload.get("results") or []

    if status == "ZERO_RESULTS" or (status == "OK" and not results):
        logger.info("No geocoding match for address")
        return Err(UnresolvableAddressError(address))
    if status != "OK":
        # REQUEST_DENIED, OVER_QUERY_LIMIT, INVALID_REQUEST, UNKNOWN_ERROR
        logger.warning(
            f"Geocoding provider refused request: {status}",
            extra={"error_code": "GEOCODER_UNAVAILABLE"},
        )
        return Err(GeocoderUnavailableError(str(status)))

    try:
        location = results[0]["geometry"]["location"]
        return Ok(Coordinates(
            lat=float(location["lat"]), lng=float(location["lng"]),
        ))
    except (KeyError, TypeError, ValueError):
        return Err(GeocoderUnavailableError("invalid_payload"))


# Singleton (initialized on startup)
geocoder: GoogleGeocodingClient | None = None


def init_geocoder(api_key: str, **kwargs):
    global geocoder
    geocoder = GoogleGeocodingClient(api_key, **kwargs)


async def close_geocoder() -> None:
    global geocoder
    if geocoder:
        await geocoder.aclose()
        geocoder = None


def get_coordinate_resolver() -> GoogleGeocodingClient:
    """FastAPI dependency for the coordinate resolver."""
    if not geocoder:
        raise RuntimeError("Geocoder not initialized")
    return geocoder
