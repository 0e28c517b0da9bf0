"""Delivery client data models."""

from incident_sms.models.delivery import (
    ClientConfig,
    Credentials,
    DeliveryRequest,
    TokenState,
)

__all__ = [
    "ClientConfig",
    "Credentials",
    "DeliveryRequest",
    "TokenState",
]
