"""Google Maps Distance Matrix client - Serverless-optimized."""
from __future__ import annotations

import logging

import googlemaps
from googlemaps.exceptions import ApiError, Timeout, TransportError

from distance_api.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

NO_DISTANCE_MESSAGE = "could not find a distance, is your origin correct?"


class DistanceMatrixClient:
    """Thin wrapper over googlemaps.Client.

    Creates a lightweight client per request, suitable for serverless
    functions. Construction does no network I/O.
    """

    def __init__(self, api_key: str):
        try:
            # OVER_QUERY_LIMIT answers at once instead of retrying past the
            # function timeout
            self.gmaps = googlemaps.Client(key=api_key, retry_over_query_limit=False)
        except ValueError as e:
            # missing key, or one that doesn't look like a Maps key
            raise ConfigurationError(f"could not create maps client: {e}") from e

    def human_readable_distance(self, origin: str, destination: str) -> str:
        """Driving distance from origin to destination, as formatted text.

        Args:
            origin: Caller supplied address, passed through unvalidated
            destination: Target address

        Returns:
            The first element's distance text, e.g. "5.2 km"

        Raises:
            UpstreamError: If the call fails or no distance comes back
        """
        try:
            resp = self.gmaps.distance_matrix(
                origins=[origin],
                destinations=[destination],
            )
        except (ApiError, TransportError, Timeout) as e:
            raise UpstreamError(f"could not get response from origin {origin}") from e

        distance = _first_distance_text(resp)
        if not distance:
            raise UpstreamError(NO_DISTANCE_MESSAGE)
        return distance


def _first_distance_text(resp: dict) -> str:
    """rows[0].elements[0].distance.text, or "" when any level is missing."""
    rows = resp.get("rows") or []
    if not rows:
        return ""
    elements = rows[0].get("elements") or []
    if not elements:
        return ""
    element = elements[0]
    if element.get("status", "OK") != "OK":
        logger.debug("Distance element status %s", element.get("status"))
    return (element.get("distance") or {}).get("text", "")
