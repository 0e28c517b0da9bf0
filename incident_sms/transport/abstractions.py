"""Abstract interface for the HTTP transport used by the delivery client."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

import httpx


class HttpClientError(Exception):
    """Raised when the remote API answers with a 4xx or 5xx status."""

    def __init__(self, status_code: int, body: str, response: Optional[httpx.Response] = None):
        self.status_code = status_code
        self.body = body
        self.response = response
        super().__init__(f"HTTP {status_code}: {body}")


class IHttpTransport(ABC):
    """Abstract interface for posting form-encoded requests to the remote API."""

    @abstractmethod
    def post(
        self,
        path: str,
        form_data: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """
        POST a form-encoded body to ``path`` relative to the API base URI.

        :param path: Endpoint path, e.g. ``user/authenticate``.
        :param form_data: Form fields to encode into the request body.
        :param headers: Request headers.
        :return: The successful (non-error) response.
        :raises HttpClientError: If the response status is 4xx or 5xx.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the transport."""
