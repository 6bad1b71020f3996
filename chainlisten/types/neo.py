# chainlisten/types/neo.py

from typing import List, Optional, Union

from msgspec import Struct, field


class NeoStackItem(Struct):
    # Map entries arrive as {"key": item, "value": item} without a type tag
    type: str = ""
    value: Union[List["NeoStackItem"], "NeoStackItem", str, int, float, bool, None] = None
    key: Optional["NeoStackItem"] = None


class NeoNotification(Struct):
    contract: str
    state: NeoStackItem

    @property
    def fields(self) -> List[NeoStackItem]:
        if isinstance(self.state.value, list):
            return self.state.value
        return []


class NeoExecution(Struct):
    trigger: str = ""
    contract: str = ""
    vmstate: str = ""
    gas_consumed: str = "0"
    notifications: List[NeoNotification] = field(default_factory=list)


class NeoApplicationLog(Struct):
    txid: str = ""
    executions: List[NeoExecution] = field(default_factory=list)


class NeoTransaction(Struct):
    txid: str
    type: str
    size: int = 0
    sys_fee: str = "0"
    net_fee: str = "0"


class NeoBlock(Struct):
    hash: str
    index: int
    time: int
    tx: List[NeoTransaction] = field(default_factory=list)
