"""HTTP access to the upstream golf data API."""

from .cache import CacheEntry, ResponseCache
from .espn import (
    CaptivePortalError,
    ClientError,
    EspnClient,
    UpstreamHTTPError,
    UpstreamUnavailableError,
)

__all__ = [
    "CacheEntry",
    "CaptivePortalError",
    "ClientError",
    "EspnClient",
    "ResponseCache",
    "UpstreamHTTPError",
    "UpstreamUnavailableError",
]
