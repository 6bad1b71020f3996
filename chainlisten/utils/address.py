# chainlisten/utils/address.py
"""
Chain-scoped address helpers.

Cross-chain payloads carry addresses as raw hex in the byte order of the
emitting chain. These helpers turn them into the form each chain uses.
"""

from eth_utils import is_hex_address, remove_0x_prefix, to_normalized_address


ETHEREUM_CROSSCHAIN_ID = 2
ONT_CROSSCHAIN_ID = 3
NEO_CROSSCHAIN_ID = 4
BSC_CROSSCHAIN_ID = 6
HECO_CROSSCHAIN_ID = 7
OK_CROSSCHAIN_ID = 12
MATIC_CROSSCHAIN_ID = 17

EVM_CHAIN_IDS = frozenset({
    ETHEREUM_CROSSCHAIN_ID,
    BSC_CROSSCHAIN_ID,
    HECO_CROSSCHAIN_ID,
    OK_CROSSCHAIN_ID,
    MATIC_CROSSCHAIN_ID,
})

# script hashes are little-endian on the wire
REVERSED_HASH_CHAIN_IDS = frozenset({NEO_CROSSCHAIN_ID, ONT_CROSSCHAIN_ID})


def strip_hex_prefix(value: str) -> str:
    """Remove a leading 0x from a hex string"""
    return remove_0x_prefix(value) if value else value


def hex_string_reverse(value: str) -> str:
    """Reverse the byte order of a hex string. Invalid hex gives an empty string."""
    try:
        raw = bytes.fromhex(strip_hex_prefix(value or ""))
    except ValueError:
        return ""
    return raw[::-1].hex()


def hash_to_address(chain_id: int, value: str) -> str:
    if chain_id in EVM_CHAIN_IDS:
        candidate = value if value.startswith("0x") else f"0x{value}"
        if not is_hex_address(candidate):
            return value
        return remove_0x_prefix(to_normalized_address(candidate))

    if chain_id in REVERSED_HASH_CHAIN_IDS:
        reversed_value = hex_string_reverse(value)
        return reversed_value or value

    return value
