"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
