# chainlisten/listen/neo_listen.py

from typing import Iterator, Optional

from ..clients.extend_height import ExtendHeightClient
from ..clients.interfaces import ExtendHeightInterface, HeightSourceInterface
from ..clients.neo_rpc import NeoRpcClient, NeoRpcError
from ..core.logging import LoggingMixin
from ..decode.amounts import decode_amount
from ..decode.notification import ClassifiedNotification, classify, normalize_contract
from ..types import (
    STATE_PENDING,
    BlockRecords,
    DstTransaction,
    DstTransfer,
    NeoBlock,
    NeoChainListenConfig,
    NeoExecution,
    NeoTransaction,
    SrcTransaction,
    SrcTransfer,
    WrapperTransaction,
)
from ..utils.address import hash_to_address, hex_string_reverse, strip_hex_prefix
from ..utils.amounts import gas_to_fee, parse_uint


INVOCATION_TRANSACTION = "InvocationTransaction"

CROSS_CHAIN_LOCK = "CrossChainLockEvent"
CROSS_CHAIN_UNLOCK = "CrossChainUnlockEvent"
LOCK_METHODS = ("Lock", "LockEvent")
UNLOCK_METHODS = ("Unlock", "UnlockEvent")

# minimum field counts, method name included
WRAPPER_LOCK_FIELDS = 6
PROXY_LOCK_FIELDS = 6
LOCK_FIELDS = 7
PROXY_UNLOCK_FIELDS = 4
UNLOCK_FIELDS = 4

DST_USER_HEX_LENGTH = 40


class NeoChainListen(LoggingMixin):
    """
    Extracts cross-chain bridge records from NEO blocks.

    Every invocation transaction's application log is scanned for
    notifications emitted by the configured wrapper and proxy contracts.
    Proxy lock/unlock events are paired with the Lock/Unlock notification of
    the same execution that carries the transfer details.
    """

    def __init__(self,
                 config: NeoChainListenConfig,
                 sdk: Optional[HeightSourceInterface] = None,
                 extend_client: Optional[ExtendHeightInterface] = None):
        self.config = config
        self.wrapper_contract = normalize_contract(config.wrapper_contract)
        self.proxy_contract = normalize_contract(config.proxy_contract)

        if sdk is None:
            sdk = NeoRpcClient(config.rest_url, timeout=config.rpc_timeout)
        if extend_client is None:
            extend_client = ExtendHeightClient(config.extend_node_url, timeout=config.rpc_timeout)

        self.sdk = sdk
        self.extend_client = extend_client

    def get_latest_height(self) -> int:
        return self.sdk.get_latest_height()

    def get_extend_latest_height(self) -> int:
        return self.extend_client.get_latest_height()

    def get_backward_block_number(self) -> int:
        return self.config.backward_block_number

    def get_chain_listen_slot(self) -> int:
        return self.config.listen_slot

    def get_chain_id(self) -> int:
        return self.config.chain_id

    def get_chain_name(self) -> str:
        return self.config.chain_name

    def handle_new_block(self, height: int) -> BlockRecords:
        """
        Extract the bridge records of one block.

        Errors fetching the block propagate to the caller. A transaction whose
        application log cannot be fetched is skipped, and malformed
        notifications are skipped without affecting the rest of the block.
        """
        block = self.sdk.get_block_by_index(height)
        if block is None:
            raise NeoRpcError(f"can not get {self.get_chain_name()} block {height}")

        records = BlockRecords(
            wrapper_transactions=[],
            src_transactions=[],
            poly_transactions=[],
            dst_transactions=[],
        )

        for tx in block.tx:
            if tx.type != INVOCATION_TRANSACTION:
                continue
            self._handle_transaction(block, height, tx, records)

        self.log_debug("Block processed",
                       chain_name=self.get_chain_name(),
                       block_number=height,
                       wrapper_count=len(records.wrapper_transactions),
                       src_count=len(records.src_transactions),
                       dst_count=len(records.dst_transactions))
        return records

    def _handle_transaction(self, block: NeoBlock, height: int, tx: NeoTransaction,
                            records: BlockRecords) -> None:
        try:
            app_log = self.sdk.get_application_log(tx.txid)
        except Exception as e:
            self.log_warning("Skipping transaction, application log unavailable",
                             chain_name=self.get_chain_name(),
                             block_number=height,
                             tx_hash=tx.txid,
                             error=str(e))
            return

        tx_hash = strip_hex_prefix(tx.txid)

        for execution in app_log.executions:
            for raw_notification in execution.notifications:
                notification = classify(raw_notification)
                if notification is None:
                    continue

                if notification.contract == self.wrapper_contract:
                    wrapper_tx = self._wrapper_transaction(notification, tx_hash)
                    if wrapper_tx:
                        records.wrapper_transactions.append(wrapper_tx)

                elif notification.contract == self.proxy_contract:
                    if notification.method == CROSS_CHAIN_LOCK:
                        src_tx = self._src_transaction(notification, execution, block, height, tx_hash)
                        if src_tx:
                            records.src_transactions.append(src_tx)
                    elif notification.method == CROSS_CHAIN_UNLOCK:
                        dst_tx = self._dst_transaction(notification, execution, block, height, tx_hash)
                        if dst_tx:
                            records.dst_transactions.append(dst_tx)
                    else:
                        self.log_warning("Ignoring proxy method",
                                         **self.log_transaction_context(tx_hash, method=notification.method))

    def _wrapper_transaction(self, notification: ClassifiedNotification,
                             tx_hash: str) -> Optional[WrapperTransaction]:
        if notification.method != CROSS_CHAIN_LOCK:
            return None

        self.log_info("Wrapper cross chain lock",
                      **self.log_transaction_context(tx_hash, chain_name=self.get_chain_name()))
        if not notification.has_fields(WRAPPER_LOCK_FIELDS):
            self.log_warning("Skipping short wrapper lock event",
                             **self.log_transaction_context(tx_hash, field_count=len(notification.fields)))
            return None

        # one field feeds chain ids and fee amount alike, matching the deployed wrapper
        value = parse_uint(notification.text(3))
        return WrapperTransaction(
            hash=tx_hash,
            user=notification.text(4),
            src_chain_id=value,
            dst_chain_id=value,
            fee_token_hash=notification.text(4),
            fee_amount=value,
        )

    def _src_transaction(self, notification: ClassifiedNotification, execution: NeoExecution,
                         block: NeoBlock, height: int, tx_hash: str) -> Optional[SrcTransaction]:
        self.log_info("Cross chain lock",
                      **self.log_transaction_context(tx_hash, chain_name=self.get_chain_name()))
        if not notification.has_fields(PROXY_LOCK_FIELDS):
            self.log_warning("Skipping short cross chain lock event",
                             **self.log_transaction_context(tx_hash, field_count=len(notification.fields)))
            return None

        transfer = self._find_lock_transfer(notification, execution, tx_hash)
        if transfer is None:
            self.log_warning("No lock transfer found for cross chain lock",
                             **self.log_transaction_context(tx_hash))
            transfer = SrcTransfer()

        return SrcTransaction(
            chain_id=self.get_chain_id(),
            hash=tx_hash,
            state=STATE_PENDING,
            fee=gas_to_fee(execution.gas_consumed),
            time=block.time,
            height=height,
            user=transfer.from_address,
            dst_chain_id=parse_uint(notification.text(3)),
            contract=notification.text(2),
            key=notification.text(4),
            param=notification.text(5),
            src_transfer=transfer,
        )

    def _find_lock_transfer(self, notification: ClassifiedNotification, execution: NeoExecution,
                            tx_hash: str) -> Optional[SrcTransfer]:
        for candidate in self._scan(execution, LOCK_METHODS):
            if not candidate.has_fields(LOCK_FIELDS):
                continue

            dst_user = candidate.text(5)
            if len(dst_user) != DST_USER_HEX_LENGTH:
                self.log_warning("Skipping lock event with malformed destination user",
                                 **self.log_transaction_context(tx_hash, method=candidate.method))
                continue

            dst_chain_id = parse_uint(candidate.text(3), bits=32)
            return SrcTransfer(
                hash=tx_hash,
                from_address=hash_to_address(self.get_chain_id(), candidate.text(2)),
                to_address=hash_to_address(self.get_chain_id(), notification.text(2)),
                asset=hex_string_reverse(candidate.text(1)),
                amount=decode_amount(candidate.item(6)),
                dst_chain_id=dst_chain_id,
                dst_user=hash_to_address(dst_chain_id, dst_user),
                dst_asset=candidate.text(4),
            )
        return None

    def _dst_transaction(self, notification: ClassifiedNotification, execution: NeoExecution,
                         block: NeoBlock, height: int, tx_hash: str) -> Optional[DstTransaction]:
        self.log_info("Cross chain unlock",
                      **self.log_transaction_context(tx_hash, chain_name=self.get_chain_name()))
        if not notification.has_fields(PROXY_UNLOCK_FIELDS):
            self.log_warning("Skipping short cross chain unlock event",
                             **self.log_transaction_context(tx_hash, field_count=len(notification.fields)))
            return None

        transfer = self._find_unlock_transfer(notification, execution, tx_hash)
        if transfer is None:
            self.log_warning("No unlock transfer found for cross chain unlock",
                             **self.log_transaction_context(tx_hash))
            transfer = DstTransfer()

        return DstTransaction(
            chain_id=self.get_chain_id(),
            hash=tx_hash,
            state=STATE_PENDING,
            fee=gas_to_fee(execution.gas_consumed),
            time=block.time,
            height=height,
            src_chain_id=parse_uint(notification.text(1), bits=32),
            contract=hex_string_reverse(notification.text(2)),
            poly_hash=hex_string_reverse(notification.text(3)),
            dst_transfer=transfer,
        )

    def _find_unlock_transfer(self, notification: ClassifiedNotification, execution: NeoExecution,
                              tx_hash: str) -> Optional[DstTransfer]:
        for candidate in self._scan(execution, UNLOCK_METHODS):
            if not candidate.has_fields(UNLOCK_FIELDS):
                continue

            return DstTransfer(
                hash=tx_hash,
                from_address=hash_to_address(self.get_chain_id(), notification.text(2)),
                to_address=hash_to_address(self.get_chain_id(), candidate.text(2)),
                asset=hex_string_reverse(candidate.text(1)),
                amount=decode_amount(candidate.item(3)),
            )
        return None

    def _scan(self, execution: NeoExecution, methods) -> Iterator[ClassifiedNotification]:
        """Notifications of the execution whose method is in `methods`, in emission order"""
        for raw_notification in execution.notifications:
            candidate = classify(raw_notification)
            if candidate is not None and candidate.method in methods:
                yield candidate
