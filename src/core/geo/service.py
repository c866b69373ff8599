# src/core/geo/service.py
"""
Geo service on top of the Google Maps Distance Matrix API.
Computes the driving distance between two coordinate pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import httpx

from src.common.constants import TypeMsg
from src.common.exceptions import DistanceLookupFailed
from src.common.logger import log_error, log_info


FORMAT_ERROR = "Please ensure data is in correct format"


@dataclass(frozen=True)
class LatLng:
    """Coordinate pair exactly as the client sent it."""
    latitude: str
    longitude: str

    @classmethod
    def from_pair(cls, pair: Sequence[str]) -> "LatLng":
        """
        Builds a point from a two-element sequence.

        Raises:
            DistanceLookupFailed: If the pair does not hold exactly two non-blank values
        """
        if pair is None or len(pair) != 2:
            raise DistanceLookupFailed(FORMAT_ERROR)

        latitude, longitude = (str(part).strip() for part in pair)
        if not latitude or not longitude:
            raise DistanceLookupFailed(FORMAT_ERROR)

        return cls(latitude=latitude, longitude=longitude)

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


class GeoService:
    """
    Distance lookup through Google Maps.

    Every failure (bad input, non-OK status, HTTP or network error,
    unexpected payload) surfaces as DistanceLookupFailed.
    """

    DISTANCE_MATRIX_PATH = "/maps/api/distancematrix/json"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            api_key: Google Maps API key (from settings if None)
            base_url: API base URL (from settings if None)
            timeout: HTTP timeout in seconds (from settings if None)
        """
        if api_key is None or base_url is None or timeout is None:
            from src.config import settings
            api_key = settings.google_maps.GOOGLE_MAPS_API_KEY if api_key is None else api_key
            base_url = settings.google_maps.GOOGLE_MAPS_BASE_URL if base_url is None else base_url
            timeout = settings.google_maps.GOOGLE_MAPS_TIMEOUT if timeout is None else timeout

        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}{self.DISTANCE_MATRIX_PATH}"
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Closes the HTTP client."""
        await self._client.aclose()

    async def compute_distance(
        self,
        origin: Sequence[str],
        destination: Sequence[str],
    ) -> int:
        """
        Returns the route distance between two points.

        Args:
            origin: [latitude, longitude] of the start
            destination: [latitude, longitude] of the end

        Returns:
            Distance in meters

        Raises:
            DistanceLookupFailed: If no distance could be obtained
        """
        start = LatLng.from_pair(origin)
        end = LatLng.from_pair(destination)

        if not self._api_key:
            await log_error("Google Maps API key is not configured")
            raise DistanceLookupFailed("API key is not configured")

        try:
            response = await self._client.get(
                self._url,
                params={
                    "origins": str(start),
                    "destinations": str(end),
                    "key": self._api_key,
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            await log_error(f"Distance Matrix request failed: {e}")
            raise DistanceLookupFailed(f"Request failed : {e}") from e
        except ValueError as e:
            await log_error(f"Distance Matrix returned invalid JSON: {e}")
            raise DistanceLookupFailed(FORMAT_ERROR) from e

        meters = self._parse_distance(data)

        await log_info(f"Distance {start} -> {end}: {meters} m", type_msg=TypeMsg.DEBUG)

        return meters

    @staticmethod
    def _parse_distance(data: Any) -> int:
        """Extracts rows[0].elements[0].distance.value from a Distance Matrix response."""
        if not isinstance(data, dict):
            raise DistanceLookupFailed(FORMAT_ERROR)

        status = data.get("status")
        if status != "OK":
            raise DistanceLookupFailed(f"Status : {status}")

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise DistanceLookupFailed(FORMAT_ERROR) from e

        if not isinstance(element, dict):
            raise DistanceLookupFailed(FORMAT_ERROR)

        # ZERO_RESULTS, NOT_FOUND, ...
        element_status = element.get("status")
        if element_status != "OK":
            raise DistanceLookupFailed(f"Status : {element_status}")

        try:
            meters = int(element["distance"]["value"])
        except (KeyError, TypeError, ValueError) as e:
            raise DistanceLookupFailed(FORMAT_ERROR) from e

        if meters < 0:
            raise DistanceLookupFailed(FORMAT_ERROR)

        return meters
