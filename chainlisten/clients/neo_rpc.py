# chainlisten/clients/neo_rpc.py

from typing import Any, Dict, List, Optional

import msgspec
from web3 import Web3

from .interfaces import HeightSourceInterface
from ..core.logging import LoggingMixin
from ..types import NeoApplicationLog, NeoBlock


class NeoRpcError(Exception):
    """Raised when the NEO node cannot serve a request."""
    pass


class NeoRpcClient(HeightSourceInterface, LoggingMixin):
    """
    A client for reading blocks and application logs from a NEO node over JSON-RPC.
    """

    def __init__(self, endpoint_url: str, timeout: int = 30):
        self.endpoint_url = endpoint_url
        self.provider = Web3.HTTPProvider(endpoint_url, request_kwargs={"timeout": timeout})

    def make_request(self, method: str, params: List) -> Any:
        """
        Make a JSON-RPC request and return its result.

        Args:
            method: RPC method name
            params: List of parameters for the method

        Returns:
            The `result` member of the response
        """
        try:
            response = self.provider.make_request(method, params)
        except Exception as e:
            raise NeoRpcError(f"Request {method} to {self.endpoint_url} failed: {e}") from e

        if not isinstance(response, dict):
            raise NeoRpcError(f"Malformed response to {method}: {response!r}")
        if response.get("error"):
            raise NeoRpcError(f"Error in response to {method}: {response['error']}")
        if "result" not in response:
            raise NeoRpcError(f"Missing result in response to {method}: {response}")

        return response["result"]

    def get_block_count(self) -> int:
        return int(self.make_request("getblockcount", []))

    def get_latest_height(self) -> int:
        return self.get_block_count()

    def get_block_by_index(self, height: int) -> Optional[NeoBlock]:
        result = self.make_request("getblock", [height, 1])
        if result is None:
            return None
        return self._convert(result, NeoBlock, "getblock")

    def get_application_log(self, txid: str) -> NeoApplicationLog:
        result = self.make_request("getapplicationlog", [txid])
        if result is None:
            raise NeoRpcError(f"No application log for {txid}")
        return self._convert(result, NeoApplicationLog, "getapplicationlog")

    def _convert(self, result: Dict[str, Any], type_, method: str):
        try:
            return msgspec.convert(result, type=type_)
        except msgspec.ValidationError as e:
            self.log_error("Unexpected response shape", method=method, error=str(e))
            raise NeoRpcError(f"Unexpected response to {method}: {e}") from e
