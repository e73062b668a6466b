"""
HTTP bulk sink adapter for elblog.

Posts the serialized event stream to a bulk ingestion endpoint in a single
chunked request. Delivery is attempted once; there are no retries.
"""

import logging
from typing import Iterable

import requests

from elblog.core.exceptions import SinkError

__all__ = ["HttpBulkSink"]

logger = logging.getLogger(__name__)


class HttpBulkSink:
    """
    Sink that streams events to an HTTP bulk endpoint.

    Example:
        sink = HttpBulkSink("https://logs-01.loggly.com/bulk/TOKEN/tag/elb")
        sink.send(serialize_events(events))
    """

    def __init__(
        self,
        url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
        content_type: str = "text/plain",
    ):
        """
        Initialize HTTP sink.

        Args:
            url: Bulk endpoint URL
            session: Optional requests session (default: new session)
            timeout: Optional request timeout in seconds
            content_type: Content-Type header sent with the stream
        """
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.content_type = content_type

    @property
    def destination(self) -> str:
        return self.url

    def send(self, chunks: Iterable[bytes]) -> None:
        """
        POST the stream.

        Raises:
            SinkError: On connection failure or a non-2xx response
        """
        try:
            response = self.session.post(
                self.url,
                data=iter(chunks),
                headers={"Content-Type": self.content_type},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise SinkError(
                f"Endpoint rejected upload: {e}",
                destination=self.url,
                status_code=e.response.status_code if e.response is not None else None,
            ) from e
        except requests.RequestException as e:
            raise SinkError(f"Unable to upload: {e}", destination=self.url) from e

        logger.debug("Endpoint responded %s", response.status_code)
