# chainlisten/utils/amounts.py
"""
Utility functions for coercing loosely typed numeric text from node payloads
"""

import math
from typing import Union


def string_to_float(value: Union[str, int, float, None]) -> float:
    """Parse a float, 0.0 when the text is not a number"""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value)
    except (ValueError, TypeError):
        return 0.0


def gas_to_fee(gas_consumed: Union[str, int, float, None]) -> int:
    """Truncate a gas-consumed value to a whole fee"""
    fee = string_to_float(gas_consumed)
    if not math.isfinite(fee) or fee < 0:
        return 0
    return int(fee)


def parse_uint(value: Union[str, int, None], bits: int = 64) -> int:
    """
    Parse a base-10 unsigned integer bounded to `bits`.
    Malformed, negative or out of range input gives 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        result = value
    else:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            return 0
        result = int(text)
    if result < 0 or result >= (1 << bits):
        return 0
    return result
