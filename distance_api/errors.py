"""Error types raised while answering a distance request."""
from __future__ import annotations


class DistanceError(Exception):
    """Base class for distance handler failures."""


class ConfigurationError(DistanceError):
    """Maps credential missing or rejected by the client library."""


class UpstreamError(DistanceError):
    """Distance Matrix call failed or returned no usable distance."""


class SerializationError(DistanceError):
    """Response could not be encoded as JSON."""
