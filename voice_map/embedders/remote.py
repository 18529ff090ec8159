"""
Remote embedding backend.
Calls the sentence embedding HTTP function that projects a pair of
sentences into the same 2D space as the precomputed dataset.
"""

import logging
from typing import Any, Optional

import requests

from .base import BaseEmbedder, EmbeddingServiceError, PairPosition, Position, register_embedder
import config

logger = logging.getLogger(__name__)


@register_embedder("remote")
class RemoteEmbeddingClient(BaseEmbedder):
    """
    Client for the sentence embedding function.

    Request:  POST {"active": str, "passive": str}
    Response: {"active": {"x": float, "y": float}, "passive": {"x": float, "y": float}}

    No retries; a failed call raises EmbeddingServiceError.
    """

    def __init__(
        self,
        endpoint: str = config.EMBEDDING_ENDPOINT,
        timeout: float = config.EMBEDDING_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the remote embedding client.

        Args:
            endpoint: URL of the embedding function
            timeout: Seconds to wait for the response
            session: Optional requests session (defaults to module-level requests)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._http = session or requests

    @property
    def name(self) -> str:
        return f"remote_{self.endpoint}"

    def locate(self, active: str, passive: str) -> PairPosition:
        payload = {"active": active, "passive": passive}
        logger.info(f"Requesting embeddings from {self.endpoint}")

        try:
            response = self._http.post(self.endpoint, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise EmbeddingServiceError(f"Embedding request failed: {e}") from e
        except ValueError as e:
            # requests raises a ValueError subclass for undecodable JSON
            raise EmbeddingServiceError(f"Embedding response is not valid JSON: {e}") from e

        return self.parse_response(body)

    @staticmethod
    def parse_response(body: Any) -> PairPosition:
        """
        Parse the embedding function response.

        Args:
            body: Decoded JSON response

        Returns:
            PairPosition

        Raises:
            EmbeddingServiceError: If the response does not have the expected shape
        """
        try:
            return PairPosition(
                active=Position(x=float(body["active"]["x"]), y=float(body["active"]["y"])),
                passive=Position(x=float(body["passive"]["x"]), y=float(body["passive"]["y"])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise EmbeddingServiceError(f"Malformed embedding response: {body!r}") from e
