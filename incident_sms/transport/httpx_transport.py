"""HTTP transport backed by a synchronous httpx client."""

from typing import Mapping

import httpx

from incident_sms.transport.abstractions import HttpClientError, IHttpTransport
from incident_sms.utils.logger import get_logger

logger = get_logger(__name__)


class HttpxTransport(IHttpTransport):
    """Posts form-encoded requests relative to the API base URI.

    Redirects are followed; any final response outside 2xx raises
    ``HttpClientError``.
    """

    def __init__(
        self,
        base_uri: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_uri, timeout=timeout, follow_redirects=True)

    def post(
        self,
        path: str,
        form_data: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> httpx.Response:
        logger.debug(f"POST {path}")
        logger.debug(f"Headers: {list(headers.keys())}")

        response = self._client.post(path, data=dict(form_data), headers=dict(headers))

        if not response.is_success:
            logger.debug(f"POST {path} returned status {response.status_code}")
            raise HttpClientError(response.status_code, response.text, response)
        return response

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()
