# chainlisten/clients/__init__.py

from .interfaces import HeightSourceInterface, ExtendHeightInterface
from .neo_rpc import NeoRpcClient, NeoRpcError
from .extend_height import ExtendHeightClient, ExtendHeightError


__all__ = [
    "HeightSourceInterface",
    "ExtendHeightInterface",
    "NeoRpcClient",
    "NeoRpcError",
    "ExtendHeightClient",
    "ExtendHeightError",
]
