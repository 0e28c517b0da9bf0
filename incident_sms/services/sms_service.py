"""SMS delivery client – token lifecycle and delivery with bounded re-authentication."""

from typing import Any, Mapping, Optional

import httpx

from incident_sms.models import ClientConfig, Credentials, DeliveryRequest, TokenState
from incident_sms.transport import HttpClientError, HttpxTransport, IHttpTransport
from incident_sms.utils.logger import get_logger
from incident_sms.utils.validators import mask_phone_number, validate_phone_number

logger = get_logger(__name__)

AUTHENTICATE_PATH = "user/authenticate"
REFRESH_TOKEN_PATH = "user/refresh_token"
DELIVER_PATH = "sms/message/deliver"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Marker the API puts in 401 bodies when the access token is expired or invalid
TOKEN_EXPIRED_MARKER = "Token"

DEFAULT_RETRY_ATTEMPTS = 3


class AuthError(Exception):
    """Raised when token refresh fails or re-authentication retries run out."""

    pass


class DeliveryError(Exception):
    """Raised when the delivery endpoint rejects a request for a non-token reason."""

    pass


def is_token_expired(error: HttpClientError) -> bool:
    """Return True if the error means the access token must be re-issued."""
    return error.status_code == 401 and TOKEN_EXPIRED_MARKER in (error.body or "")


class DeliveryClient:
    """Client for the SMS delivery API.

    Holds the credentials and the current token pair. Token expiry is not
    tracked locally; it is discovered when the API answers 401 with a token
    error, at which point the client logs in again and retries, up to
    ``retry_attempts`` times per delivery.

    The client is not thread-safe: token state is shared mutable state, so
    use one instance per thread.
    """

    def __init__(
        self,
        base_uri: str,
        username: str,
        password: str,
        access_token: str | None = None,
        refresh_token: str | None = None,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
        transport: IHttpTransport | None = None,
        timeout: float = 30.0,
    ):
        self.config = ClientConfig(base_uri=base_uri, retry_attempts=retry_attempts, timeout=timeout)
        self.credentials = Credentials(username=username, password=password)
        self.token_state = TokenState(access_token=access_token, refresh_token=refresh_token)

        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(self.config.base_uri, timeout=self.config.timeout)

    def __enter__(self) -> "DeliveryClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def authenticate(self, username: str | None = None, password: str | None = None) -> TokenState:
        """Log in with the stored credentials and replace the cached tokens.

        Non-empty ``username``/``password`` overrides are stored before the
        request is sent. HTTP and transport errors propagate unchanged.
        """
        self.credentials.apply_overrides(username, password)

        logger.info(f"Authenticating with SMS API as {self.credentials.username}")
        response = self._post(
            AUTHENTICATE_PATH,
            {"username": self.credentials.username, "password": self.credentials.password},
        )
        body = response.json()

        self.token_state = TokenState(
            access_token=body["access_token"],
            client_id=body["client_id"],
            refresh_token=body["refresh_token"],
        )
        logger.debug("Access token issued")
        return self.token_state.model_copy()

    def refresh(self) -> None:
        """Obtain a new access token using the refresh token.

        Falls back to a full login when no refresh token is held.
        """
        if not self.token_state.refresh_token:
            logger.info("No refresh token held, performing full authentication")
            self.authenticate()
            return

        data = {
            "client_id": self.token_state.client_id or "",
            "refresh_token": self.token_state.refresh_token,
        }
        try:
            response = self._post(REFRESH_TOKEN_PATH, data)
        except HttpClientError as e:
            raise AuthError(f"Unable to refresh token: {e}") from e

        self.token_state.access_token = response.json()["access_token"]
        logger.debug("Access token refreshed")

    def deliver(
        self,
        phone_number: str,
        incident_id: str,
        activity_code: str,
        event_date: float,
    ) -> Optional[Any]:
        """Send an SMS delivery request for an incident.

        :param phone_number: Claimant's phone number.
        :param incident_id: Incident identifier.
        :param activity_code: Activity code.
        :param event_date: UNIX time the incident was logged.
        :return: The parsed API response, or None if the phone number is not
            a real phone number.
        :raises AuthError: If the token keeps being rejected after the retry budget.
        :raises DeliveryError: If the API rejects the request for any other reason.
        """
        if not validate_phone_number(phone_number):
            logger.debug(f"Skipping delivery to invalid phone number {mask_phone_number(phone_number)}")
            return None

        request = DeliveryRequest(
            phone_number=phone_number,
            incident_id=incident_id,
            activity_code=activity_code,
            event_date=event_date,
        )
        data = request.to_form_data()

        if not self.token_state.access_token:
            self.authenticate()

        retry_count = 0
        while True:
            try:
                response = self._post(DELIVER_PATH, data)
            except HttpClientError as e:
                if not is_token_expired(e):
                    raise DeliveryError("Unknown Delivery Error") from e

                retry_count += 1
                if retry_count >= self.config.retry_attempts:
                    raise AuthError("Authentication Error: Too many retries") from e

                logger.warning(
                    f"Access token rejected, re-authenticating "
                    f"(attempt {retry_count} of {self.config.retry_attempts})"
                )
                self.authenticate()
                continue

            logger.info(f"SMS delivery accepted for incident {request.incident_id}")
            return response.json()

    def build_headers(self) -> dict[str, str]:
        """Return request headers, including the access token when one is held."""
        headers = {"Content-Type": FORM_CONTENT_TYPE}

        if self.token_state.access_token:
            headers["Authorization"] = self.token_state.access_token

        return headers

    def _post(self, path: str, data: Mapping[str, str]) -> httpx.Response:
        return self._transport.post(path, data, self.build_headers())
