# chainlisten/clients/extend_height.py

from typing import Optional

import msgspec
import requests
from msgspec import Struct

from .interfaces import ExtendHeightInterface
from ..core.logging import LoggingMixin


class ExtendHeightError(Exception):
    """Raised when the extended height endpoint cannot be read."""
    pass


class ExtendHeight(Struct):
    last_block_height: int


class ExtendHeightClient(ExtendHeightInterface, LoggingMixin):
    """
    Reads the chain height reported by a block explorer style HTTP endpoint.

    The endpoint answers a GET with {"last_block_height": "<height>"}.
    """

    def __init__(self, url: str, timeout: int = 30, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_latest_height(self) -> int:
        if not self.url:
            raise ExtendHeightError("No extended height endpoint configured")

        try:
            response = self.session.get(
                self.url,
                headers={"Accepts": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.log_warning("Extended height request failed", url=self.url, error=str(e))
            raise ExtendHeightError(f"Request to {self.url} failed: {e}") from e

        if response.status_code != 200:
            self.log_warning("Extended height request rejected", url=self.url,
                             status_code=response.status_code)
            raise ExtendHeightError(f"response status code: {response.status_code}")

        try:
            # strict=False accepts the height encoded as a numeric string
            extend_height = msgspec.json.decode(response.content, type=ExtendHeight, strict=False)
        except msgspec.DecodeError as e:
            raise ExtendHeightError(f"Invalid extended height body: {e}") from e

        return extend_height.last_block_height
