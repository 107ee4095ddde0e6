"""HTTP client for the OSRM services."""

from .envelope import ResponseEnvelope, unwrap_envelope
from .osrm import OSRMClient, RequestDescriptor

__all__ = [
    "OSRMClient",
    "RequestDescriptor",
    "ResponseEnvelope",
    "unwrap_envelope",
]
