# chainlisten/types/records.py

from typing import List, NamedTuple, Optional

from msgspec import Struct


STATE_PENDING = 1


class WrapperTransaction(Struct):
    hash: str
    user: str
    src_chain_id: int
    dst_chain_id: int
    fee_token_hash: str
    fee_amount: int


class SrcTransfer(Struct):
    hash: str = ""
    from_address: str = ""
    to_address: str = ""
    asset: str = ""
    amount: int = 0
    dst_chain_id: int = 0
    dst_user: str = ""
    dst_asset: str = ""


class SrcTransaction(Struct):
    chain_id: int
    hash: str
    state: int
    fee: int
    time: int
    height: int
    user: str
    dst_chain_id: int
    contract: str
    key: str
    param: str
    src_transfer: SrcTransfer


class DstTransfer(Struct):
    hash: str = ""
    from_address: str = ""
    to_address: str = ""
    asset: str = ""
    amount: int = 0


class DstTransaction(Struct):
    chain_id: int
    hash: str
    state: int
    fee: int
    time: int
    height: int
    src_chain_id: int
    contract: str
    poly_hash: str
    dst_transfer: DstTransfer


class PolyTransaction(Struct):
    ''' Relay-chain record. Produced by the relay listener, never by a source chain. '''
    hash: str
    chain_id: int
    state: int
    time: int
    fee: int
    height: int
    src_chain_id: int
    src_hash: str
    dst_chain_id: int
    key: Optional[str] = None


class BlockRecords(NamedTuple):
    wrapper_transactions: List[WrapperTransaction]
    src_transactions: List[SrcTransaction]
    poly_transactions: List[PolyTransaction]
    dst_transactions: List[DstTransaction]

    def is_empty(self) -> bool:
        return not any(self)

    def total(self) -> int:
        return sum(len(records) for records in self)
