"""
Builders for NEO node payloads and in-memory node fakes.
"""
from typing import Dict, List, Optional

from chainlisten.clients.interfaces import ExtendHeightInterface, HeightSourceInterface
from chainlisten.types import (
    NeoApplicationLog,
    NeoBlock,
    NeoExecution,
    NeoNotification,
    NeoStackItem,
    NeoTransaction,
)

WRAPPER_CONTRACT = "125c83403763670c215f9c7c815ef759b258a41b"
PROXY_CONTRACT = "edd2862dceb90b945210372d229f453f2b705f4f"
OTHER_CONTRACT = "0000000000000000000000000000000000000001"

NEO_CHAIN_ID = 4
ETH_CHAIN_ID = 2

TX_ID = "0x" + "ab" * 32
TX_HASH = "ab" * 32
BLOCK_TIME = 1600000000


def method_hex(name: str) -> str:
    return name.encode("utf-8").hex()


def byte_array(value: str) -> NeoStackItem:
    return NeoStackItem(type="ByteArray", value=value)


def integer(value) -> NeoStackItem:
    return NeoStackItem(type="Integer", value=str(value))


def notification(contract: str, method: str, *fields: NeoStackItem) -> NeoNotification:
    items = [byte_array(method_hex(method)), *fields]
    return NeoNotification(contract="0x" + contract, state=NeoStackItem(type="Array", value=items))


def lock_event(dst_user: str = "aa" * 20, amount: NeoStackItem = None,
               method: str = "LockEvent", asset: str = "0102030405060708090a0b0c0d0e0f1011121314",
               from_address: str = "1111111111111111111111111111111111111122") -> NeoNotification:
    return notification(
        PROXY_CONTRACT,
        method,
        byte_array(asset),
        byte_array(from_address),
        integer(ETH_CHAIN_ID),
        byte_array("dac17f958d2ee523a2206206994597c13d831ec7"),
        byte_array(dst_user),
        amount if amount is not None else integer(1000),
    )


def cross_chain_lock(to_contract: str = "3333333333333333333333333333333333333344") -> NeoNotification:
    return notification(
        PROXY_CONTRACT,
        "CrossChainLockEvent",
        byte_array("5555555555555555555555555555555555555555"),
        byte_array(to_contract),
        integer(ETH_CHAIN_ID),
        byte_array("key-bytes"),
        byte_array("param-bytes"),
    )


def unlock_event(amount: NeoStackItem = None, method: str = "UnlockEvent") -> NeoNotification:
    return notification(
        PROXY_CONTRACT,
        method,
        byte_array("0102030405060708090a0b0c0d0e0f1011121314"),
        byte_array("2222222222222222222222222222222222222233"),
        amount if amount is not None else byte_array("e803"),
    )


def cross_chain_unlock() -> NeoNotification:
    return notification(
        PROXY_CONTRACT,
        "CrossChainUnlockEvent",
        integer(ETH_CHAIN_ID),
        byte_array("4444444444444444444444444444444444444455"),
        byte_array("0a0b0c0d"),
    )


def execution(*notifications: NeoNotification, gas_consumed: str = "3.5") -> NeoExecution:
    return NeoExecution(
        trigger="Application",
        vmstate="HALT",
        gas_consumed=gas_consumed,
        notifications=list(notifications),
    )


class FakeHeightSource(HeightSourceInterface):
    """In-memory node holding blocks and application logs."""

    def __init__(self, height: int = 100):
        self.height = height
        self.blocks: Dict[int, Optional[NeoBlock]] = {}
        self.app_logs: Dict[str, NeoApplicationLog] = {}
        self.failing_txids: set = set()
        self.block_error: Optional[Exception] = None

    def add_block(self, height: int, transactions: List[NeoTransaction]) -> None:
        self.blocks[height] = NeoBlock(hash="0x" + "cd" * 32, index=height, time=BLOCK_TIME, tx=transactions)

    def add_transaction(self, height: int, txid: str, *executions: NeoExecution,
                        tx_type: str = "InvocationTransaction") -> None:
        block = self.blocks.get(height)
        if block is None:
            self.add_block(height, [])
            block = self.blocks[height]
        block.tx.append(NeoTransaction(txid=txid, type=tx_type))
        self.app_logs[txid] = NeoApplicationLog(txid=txid, executions=list(executions))

    def get_latest_height(self) -> int:
        return self.height

    def get_block_by_index(self, height: int) -> Optional[NeoBlock]:
        if self.block_error:
            raise self.block_error
        return self.blocks.get(height)

    def get_application_log(self, txid: str) -> NeoApplicationLog:
        if txid in self.failing_txids:
            raise ConnectionError(f"application log for {txid} unavailable")
        return self.app_logs[txid]


class FakeExtendHeight(ExtendHeightInterface):
    def __init__(self, height: int = 200):
        self.height = height

    def get_latest_height(self) -> int:
        return self.height


