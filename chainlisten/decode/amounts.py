# chainlisten/decode/amounts.py
"""
Amount decoding for notification fields.

A field tagged "Integer" carries its value as decimal text. Every other tag
carries a little-endian hex byte string, which is reversed and read as
base-16.
"""

import logging
from typing import Optional

from ..types import NeoStackItem
from ..utils.address import hex_string_reverse
from ..core.logging import log_with_context

INTEGER_TYPE = "Integer"
UINT64_MAX = (1 << 64) - 1

logger = logging.getLogger("chainlisten.decode.amounts")


def _parse_decimal(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _parse_reversed_hex(value) -> Optional[int]:
    if not isinstance(value, str):
        return None
    reversed_hex = hex_string_reverse(value)
    if not reversed_hex:
        # an empty byte array is how the VM encodes zero
        return 0 if value.strip() == "" else None
    return int(reversed_hex, 16)


def decode_amount(item: NeoStackItem) -> int:
    """
    Decode an amount field into an unsigned 64-bit integer.

    Malformed text decodes to 0 so a single bad field never aborts a block.
    Values wider than 64 bits keep only their low 64 bits, as the bridge
    database stores uint64 amounts; a warning is logged when that happens.
    """
    if item.type == INTEGER_TYPE:
        amount = _parse_decimal(item.value)
    else:
        amount = _parse_reversed_hex(item.value)

    if amount is None:
        log_with_context(logger, logging.DEBUG, "Malformed amount field, using zero",
                         field_type=item.type, field_value=item.value)
        return 0

    if amount > UINT64_MAX:
        log_with_context(logger, logging.WARNING, "Amount exceeds uint64, truncating to low 64 bits",
                         field_type=item.type, field_value=item.value)
        amount &= UINT64_MAX

    return amount
