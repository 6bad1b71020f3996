# chainlisten/types/__init__.py

from .neo import (
    NeoStackItem,
    NeoNotification,
    NeoExecution,
    NeoApplicationLog,
    NeoTransaction,
    NeoBlock,
)

from .records import (
    STATE_PENDING,
    WrapperTransaction,
    SrcTransfer,
    SrcTransaction,
    DstTransfer,
    DstTransaction,
    PolyTransaction,
    BlockRecords,
)

from .config import NeoChainListenConfig


__all__ = [
    ## NEO node payloads
    "NeoStackItem",
    "NeoNotification",
    "NeoExecution",
    "NeoApplicationLog",
    "NeoTransaction",
    "NeoBlock",

    ## Output records
    "STATE_PENDING",
    "WrapperTransaction",
    "SrcTransfer",
    "SrcTransaction",
    "DstTransfer",
    "DstTransaction",
    "PolyTransaction",
    "BlockRecords",

    ## Configuration
    "NeoChainListenConfig",
]
