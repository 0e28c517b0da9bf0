"""Client for the incident SMS delivery API."""

from incident_sms.services.factory import create_client
from incident_sms.services.sms_service import (
    AuthError,
    DeliveryClient,
    DeliveryError,
    is_token_expired,
)
from incident_sms.transport import HttpClientError, HttpxTransport, IHttpTransport

__all__ = [
    "AuthError",
    "DeliveryClient",
    "DeliveryError",
    "HttpClientError",
    "HttpxTransport",
    "IHttpTransport",
    "create_client",
    "is_token_expired",
]

__version__ = "1.0.0"
