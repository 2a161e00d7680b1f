"""Distance handler: one origin in, one human readable distance out.

Independent of the hosting surface. The FastAPI route and the Lambda
entry point both translate their request shape into query parameters,
call DistanceHandler.handle() and translate the HandlerResponse back.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

from distance_api.config import Settings
from distance_api.errors import ConfigurationError, SerializationError, UpstreamError
from distance_api.maps.client import DistanceMatrixClient
from distance_api.models.schemas import DistanceRequest, DistanceResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class HandlerResponse(BaseModel):
    """Status, body and content type, ready for any hosting surface."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str
    content_type: str = TEXT_CONTENT_TYPE


def status_response(status: HTTPStatus) -> HandlerResponse:
    """Bare status text as a plain-text body."""
    return HandlerResponse(status_code=status.value, body=status.phrase)


def server_error() -> HandlerResponse:
    """500 with the standard status text only."""
    return status_response(HTTPStatus.INTERNAL_SERVER_ERROR)


def client_error(status: HTTPStatus) -> HandlerResponse:
    """4xx with the standard status text only."""
    return status_response(status)


def encode_response(distance: str) -> str:
    """Serialize the two-field success body."""
    try:
        return DistanceResponse(distance=distance, ok=True).model_dump_json()
    except ValueError as e:
        raise SerializationError(f"could not encode distance {distance!r}") from e


class DistanceHandler:
    """Answers distance requests against the configured destination."""

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger = logger,
        client_factory: Callable[[str], DistanceMatrixClient] = DistanceMatrixClient,
    ):
        self.settings = settings
        self.logger = logger
        self.client_factory = client_factory

    def build_request(self, query_params: Mapping[str, str] | None) -> DistanceRequest:
        # absent origin is sent upstream as ""
        origin = (query_params or {}).get("origin") or ""
        return DistanceRequest(origin=origin, destination=self.settings.destination)

    def handle(self, query_params: Mapping[str, str] | None) -> HandlerResponse:
        """Run one request through the Maps client.

        Args:
            query_params: Inbound query string parameters, may be None

        Returns:
            200 with {"distance", "ok"} JSON, 404 when the upstream call
            fails or returns no distance, 500 on configuration or
            serialization failure
        """
        try:
            client = self.client_factory(self.settings.google_api_key)
        except ConfigurationError:
            self.logger.exception("Maps client construction failed")
            return server_error()

        request = self.build_request(query_params)

        try:
            distance = client.human_readable_distance(request.origin, request.destination)
        except UpstreamError as e:
            self.logger.warning("Distance lookup failed: %s", e, exc_info=True)
            return client_error(HTTPStatus.NOT_FOUND)

        try:
            body = encode_response(distance)
        except SerializationError:
            self.logger.exception("Response serialization failed")
            return server_error()

        return HandlerResponse(
            status_code=HTTPStatus.OK.value,
            body=body,
            content_type=JSON_CONTENT_TYPE,
        )
