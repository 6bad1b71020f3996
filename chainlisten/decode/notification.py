# chainlisten/decode/notification.py

from typing import List, Optional

from msgspec import Struct

from ..types import NeoNotification, NeoStackItem
from ..utils.address import strip_hex_prefix


def parse_method(value) -> str:
    """Decode a hex encoded method name. Undecodable input gives an empty name."""
    if not isinstance(value, str):
        return ""
    try:
        raw = bytes.fromhex(strip_hex_prefix(value))
    except ValueError:
        return ""
    return raw.decode("utf-8", errors="replace")


class ClassifiedNotification(Struct):
    contract: str
    method: str
    fields: List[NeoStackItem]

    def has_fields(self, count: int) -> bool:
        return len(self.fields) >= count

    def item(self, index: int) -> NeoStackItem:
        return self.fields[index]

    def text(self, index: int) -> str:
        value = self.fields[index].value
        return value if isinstance(value, str) else ""


def normalize_contract(contract: str) -> str:
    return strip_hex_prefix(contract or "").lower()


def classify(notification: NeoNotification) -> Optional[ClassifiedNotification]:
    """
    Split a notification into its method name and positional fields.

    Field 0 holds the method name. Field counts are not checked here beyond
    the empty case; callers guard the minimum each method needs.
    """
    fields = notification.fields
    if not fields:
        return None

    return ClassifiedNotification(
        contract=normalize_contract(notification.contract),
        method=parse_method(fields[0].value),
        fields=fields,
    )
