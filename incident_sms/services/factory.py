"""Build delivery clients from settings."""

from incident_sms.config import Settings, get_settings
from incident_sms.services.sms_service import DeliveryClient
from incident_sms.transport import IHttpTransport


def create_client(
    settings: Settings | None = None,
    transport: IHttpTransport | None = None,
) -> DeliveryClient:
    """Create a caller-owned DeliveryClient.

    Construct one at startup and pass it to the code that needs it; there is
    no module-level shared instance.
    """
    settings = settings or get_settings()
    return DeliveryClient(
        base_uri=settings.api_base_uri,
        username=settings.api_username,
        password=settings.api_password,
        access_token=settings.api_access_token,
        refresh_token=settings.api_refresh_token,
        retry_attempts=settings.retry_attempts,
        transport=transport,
        timeout=settings.request_timeout,
    )
