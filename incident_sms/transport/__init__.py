"""HTTP transport layer - abstraction and httpx implementation."""

from incident_sms.transport.abstractions import HttpClientError, IHttpTransport
from incident_sms.transport.httpx_transport import HttpxTransport

__all__ = [
    "HttpClientError",
    "HttpxTransport",
    "IHttpTransport",
]
